"""
Numerical Safeguards — IEEE-754 Arithmetic Primitives

Модуль приводит арифметику Python float к семантике IEEE-754 там, где
Python вместо значения поднимает исключение или возвращает complex:
- Деление на ноль: Python → ZeroDivisionError, IEEE → ±inf / nan
- Возведение отрицательного числа в дробную степень: Python `**` → complex,
  IEEE → nan
- Переполнение в math.pow: Python → OverflowError, IEEE → ±inf

Метод Ньютона на вырожденных потоках платежей регулярно попадает в эти
точки. Невалидные промежуточные значения должны дойти до проверки сходимости
как nan/inf, а не оборвать вычисление исключением.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции модуля никогда не поднимают исключения на float входах
2. Для конечных, представимых результатов возвращается ровно то же значение,
   что и у обычной арифметики Python
3. Все операции детерминированы и воспроизводимы
"""

import math


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def _is_odd_integer(value: float) -> bool:
    return float(value).is_integer() and value % 2.0 == 1.0


# =============================================================================
# IEEE ДЕЛЕНИЕ И СТЕПЕНЬ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с IEEE-754 семантикой для нулевого знаменателя.

    Правила для denominator == ±0.0:
        - numerator == 0 или NaN → nan
        - иначе → ±inf, знак = sign(numerator) * sign(denominator)

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator в семантике IEEE-754

    Examples:
        >>> ieee_divide(6.0, 3.0)
        2.0
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def ieee_pow(base: float, exponent: float) -> float:
    """
    Возведение в степень с IEEE-754 семантикой (C pow).

    В отличие от оператора `**`, никогда не возвращает complex.
    В отличие от math.pow, не поднимает ValueError/OverflowError.

    Правила:
        - base < 0, нецелый exponent → nan
        - base == ±0, exponent < 0 → ±inf (минус только для -0 и нечётной степени)
        - переполнение → ±inf (минус только для base < 0 и нечётной степени)

    Args:
        base: Основание
        exponent: Показатель степени

    Returns:
        base ** exponent в семантике IEEE-754

    Examples:
        >>> ieee_pow(2.0, 3.0)
        8.0
        >>> ieee_pow(-0.5, 0.5)
        nan
        >>> ieee_pow(0.0, -1.0)
        inf
        >>> ieee_pow(10.0, 400.0)
        inf
    """
    try:
        return math.pow(base, exponent)
    except ValueError:
        if base == 0.0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan
    except OverflowError:
        if base < 0.0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
