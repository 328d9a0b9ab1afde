"""
Solver — XIRR через метод Ньютона

Модуль вычисляет внутреннюю норму доходности (XIRR) для платежей в
произвольные даты:
- Проверка предусловия: есть и положительные, и отрицательные суммы
- NPV и его производная по ставке
- Метод Ньютона от одного начального приближения
- Перебор начальных приближений, если сходимости нет

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нарушение предусловия → InvalidPaymentsError до любых вычислений
2. Отсутствие сходимости → nan (не исключение)
3. Результат не зависит от порядка платежей во входной последовательности
4. Объём работы ограничен: не более 1 + 199 запусков по 50 итераций

ФОРМУЛЫ:
    t_i = days(date_0 → date_i) / 365
    NPV(r)  = Σ amount_i / (1 + r)^t_i
    NPV'(r) = Σ -amount_i * t_i / (1 + r)^(t_i + 1)
    r_{n+1} = r_n - NPV(r_n) / NPV'(r_n)

где date_0 — самая ранняя дата среди платежей.
"""

import logging
import math
from typing import Final, Iterable, Iterator, Sequence

from xirr.core.domain.dates import days_between
from xirr.core.domain.payment import Payment
from xirr.core.errors import InvalidPaymentsError
from xirr.core.math.numerical_safeguards import ieee_divide, ieee_pow, is_valid_float

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ SOLVER
# =============================================================================

# Порог сходимости: |r_{n+1} - r_n| <= MAX_ERROR
MAX_ERROR: Final[float] = 1e-10

# Бюджет итераций на одно начальное приближение
MAX_COMPUTE_WITH_GUESS_ITERATIONS: Final[int] = 50

# Начальное приближение по умолчанию (типичная доходность инвестиций)
DEFAULT_GUESS: Final[float] = 0.1

# Перебор приближений: от -0.99 с шагом 0.01, строго меньше 1.0
GUESS_SWEEP_START: Final[float] = -0.99
GUESS_SWEEP_STEP: Final[float] = 0.01
GUESS_SWEEP_STOP: Final[float] = 1.0

# Day-count: доля года = дни / 365
DAYS_PER_YEAR: Final[float] = 365.0


# =============================================================================
# VALIDATION
# =============================================================================


def validate_payments(payments: Iterable[Payment]) -> None:
    """
    Проверка, что среди платежей есть и положительные, и отрицательные суммы.

    Нулевые суммы не учитываются.

    Raises:
        InvalidPaymentsError: если нет хотя бы одной суммы > 0 и одной < 0
    """
    payments = list(payments)
    positive = any(p.amount > 0.0 for p in payments)
    negative = any(p.amount < 0.0 for p in payments)

    if not (positive and negative):
        raise InvalidPaymentsError()


# =============================================================================
# NPV И ПРОИЗВОДНАЯ
# =============================================================================


def _year_fraction(payment: Payment, origin: Payment) -> float:
    return days_between(payment.date, origin.date) / DAYS_PER_YEAR


def xirr(payments: Sequence[Payment], rate: float) -> float:
    """
    NPV платежей при годовой ставке `rate`.

    Дисконтирование от даты первого платежа: `payments` должны быть
    отсортированы по дате.

    Args:
        payments: Платежи по возрастанию даты (непустые)
        rate: Годовая ставка

    Returns:
        Σ amount_i / (1 + rate)^t_i (может быть nan/inf при 1 + rate <= 0)
    """
    origin = payments[0]
    return sum(
        (
            ieee_divide(p.amount, ieee_pow(1.0 + rate, _year_fraction(p, origin)))
            for p in payments
        ),
        0.0,
    )


def dxirr(payments: Sequence[Payment], rate: float) -> float:
    """
    Производная NPV по ставке.

    Args:
        payments: Платежи по возрастанию даты (непустые)
        rate: Годовая ставка

    Returns:
        Σ -amount_i * t_i / (1 + rate)^(t_i + 1)
    """
    origin = payments[0]

    def term(p: Payment) -> float:
        exp = _year_fraction(p, origin)
        return ieee_divide(-p.amount * exp, ieee_pow(1.0 + rate, exp + 1.0))

    return sum((term(p) for p in payments), 0.0)


# =============================================================================
# NEWTON SOLVER
# =============================================================================


def compute_with_guess(
    payments: Sequence[Payment],
    guess: float,
    max_error: float = MAX_ERROR,
    max_iterations: int = MAX_COMPUTE_WITH_GUESS_ITERATIONS,
) -> float:
    """
    Метод Ньютона от одного начального приближения.

    Сходимость проверяется в начале каждой итерации: если последний шаг
    |r_{n+1} - r_n| <= max_error, возвращается текущая ставка. После
    max_iterations итераций без сходимости возвращается nan.

    Args:
        payments: Платежи по возрастанию даты (непустые)
        guess: Начальная ставка r_0
        max_error: Порог сходимости (default: MAX_ERROR)
        max_iterations: Бюджет итераций (default: MAX_COMPUTE_WITH_GUESS_ITERATIONS)

    Returns:
        Найденная ставка или nan

    Examples:
        >>> payments = [Payment.of(date(2015, 1, 1), -1000.0), Payment.of(date(2016, 1, 1), 1100.0)]
        >>> compute_with_guess(payments, 0.1)
        0.1
    """
    rate = guess
    error = 1.0

    for _ in range(max_iterations):
        if error <= max_error:
            return rate

        next_rate = rate - ieee_divide(xirr(payments, rate), dxirr(payments, rate))
        error = abs(next_rate - rate)
        rate = next_rate

    return math.nan


def guess_sweep() -> Iterator[float]:
    """
    Последовательность запасных начальных приближений: -0.99, -0.98, ..., 0.99.

    Шаг накапливается сложением, как в табличных процессорах: значения несут
    ошибку округления (последнее ≈ 0.9900000000000014), всего 199 приближений.
    """
    guess = GUESS_SWEEP_START
    while guess < GUESS_SWEEP_STOP:
        yield guess
        guess += GUESS_SWEEP_STEP


# =============================================================================
# PUBLIC API
# =============================================================================


def compute(payments: Iterable[Payment]) -> float:
    """
    Внутренняя норма доходности серии нерегулярных платежей.

    Сначала метод Ньютона запускается с приближением 0.1. Если результат
    nan/inf, перебираются приближения от -0.99 до 0.99 с шагом 0.01 до
    первого конечного результата. Если не сошлось ни одно — nan.

    Args:
        payments: Платежи в любом порядке

    Returns:
        Годовая ставка (например 0.16 = 16%) или nan

    Raises:
        InvalidPaymentsError: если нет и положительных, и отрицательных сумм

    Examples:
        >>> compute([
        ...     Payment.of(date(2015, 6, 11), -1000.0),
        ...     Payment.of(date(2015, 7, 21), -9000.0),
        ...     Payment.of(date(2018, 6, 10), 20000.0),
        ...     Payment.of(date(2015, 10, 17), -3000.0),
        ... ])
        0.1635371584432641
    """
    payments = list(payments)
    validate_payments(payments)

    # sorted() стабилен: порядок платежей с одинаковой датой сохраняется
    ordered = sorted(payments, key=lambda p: p.date)

    rate = compute_with_guess(ordered, DEFAULT_GUESS)
    if is_valid_float(rate):
        return rate

    logger.debug(
        "Newton did not converge from guess %s for %d payments, sweeping guesses",
        DEFAULT_GUESS,
        len(ordered),
    )

    for guess in guess_sweep():
        rate = compute_with_guess(ordered, guess)
        if is_valid_float(rate):
            logger.debug("Newton converged from fallback guess %s: rate=%r", guess, rate)
            return rate

    logger.debug("No starting guess converged for %d payments, returning nan", len(ordered))
    return math.nan
