"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. IEEE деление на ноль (±inf / nan вместо ZeroDivisionError)
2. IEEE степень (nan вместо complex, ±inf вместо OverflowError)
3. NaN/Inf проверку
4. Совпадение с обычной арифметикой на конечных значениях
"""

import math

import pytest

from xirr.core.math.numerical_safeguards import ieee_divide, ieee_pow, is_valid_float

# =============================================================================
# ТЕСТЫ IEEE ДЕЛЕНИЯ
# =============================================================================


class TestIeeeDivide:
    """Тесты для ieee_divide"""

    def test_regular_division_unchanged(self) -> None:
        """Обычное деление не изменяется"""
        assert ieee_divide(6.0, 3.0) == 2.0
        assert ieee_divide(-1.0, 4.0) == -0.25
        assert ieee_divide(1.0, 3.0) == 1.0 / 3.0

    def test_positive_over_zero_is_inf(self) -> None:
        """x > 0 / +0 → +inf"""
        assert ieee_divide(1.0, 0.0) == math.inf

    def test_negative_over_zero_is_minus_inf(self) -> None:
        """x < 0 / +0 → -inf"""
        assert ieee_divide(-50.0, 0.0) == -math.inf

    def test_sign_of_negative_zero_respected(self) -> None:
        """x / -0 меняет знак бесконечности"""
        assert ieee_divide(1.0, -0.0) == -math.inf
        assert ieee_divide(-1.0, -0.0) == math.inf

    def test_zero_over_zero_is_nan(self) -> None:
        """0 / 0 → nan"""
        assert math.isnan(ieee_divide(0.0, 0.0))
        assert math.isnan(ieee_divide(-0.0, 0.0))

    def test_nan_over_zero_is_nan(self) -> None:
        """nan / 0 → nan"""
        assert math.isnan(ieee_divide(math.nan, 0.0))

    def test_inf_over_zero_is_inf(self) -> None:
        """inf / 0 → inf"""
        assert ieee_divide(math.inf, 0.0) == math.inf

    def test_non_finite_operands_propagate(self) -> None:
        """nan/inf операнды дают IEEE результат без исключений"""
        assert math.isnan(ieee_divide(math.inf, math.inf))
        assert math.isnan(ieee_divide(1.0, math.nan))
        assert ieee_divide(1.0, math.inf) == 0.0


# =============================================================================
# ТЕСТЫ IEEE СТЕПЕНИ
# =============================================================================


class TestIeeePow:
    """Тесты для ieee_pow"""

    def test_regular_power_unchanged(self) -> None:
        """Обычные степени не изменяются"""
        assert ieee_pow(2.0, 3.0) == 8.0
        assert ieee_pow(1.1, 0.0) == 1.0
        assert ieee_pow(4.0, 0.5) == 2.0

    def test_negative_base_integer_exponent(self) -> None:
        """Отрицательное основание с целой степенью допустимо"""
        assert ieee_pow(-2.0, 2.0) == 4.0
        assert ieee_pow(-2.0, 3.0) == -8.0

    def test_negative_base_fractional_exponent_is_nan(self) -> None:
        """Отрицательное основание с дробной степенью → nan (не complex)"""
        result = ieee_pow(-0.5, 0.5)
        assert isinstance(result, float)
        assert math.isnan(result)

    def test_zero_base_negative_exponent_is_inf(self) -> None:
        """0 ** (-y) → inf"""
        assert ieee_pow(0.0, -1.0) == math.inf
        assert ieee_pow(0.0, -0.5) == math.inf

    def test_negative_zero_base_odd_exponent_is_minus_inf(self) -> None:
        """-0 ** (нечётная отрицательная) → -inf"""
        assert ieee_pow(-0.0, -1.0) == -math.inf
        assert ieee_pow(-0.0, -2.0) == math.inf

    def test_zero_base_non_negative_exponent(self) -> None:
        """0 ** 0 = 1, 0 ** y = 0 при y > 0"""
        assert ieee_pow(0.0, 0.0) == 1.0
        assert ieee_pow(0.0, 2.5) == 0.0

    def test_overflow_is_inf(self) -> None:
        """Переполнение → inf"""
        assert ieee_pow(10.0, 400.0) == math.inf

    def test_overflow_negative_base_odd_exponent_is_minus_inf(self) -> None:
        """Переполнение с отрицательным основанием и нечётной степенью → -inf"""
        assert ieee_pow(-10.0, 401.0) == -math.inf
        assert ieee_pow(-10.0, 400.0) == math.inf

    def test_non_finite_base(self) -> None:
        """inf/nan основания следуют C pow"""
        assert ieee_pow(math.inf, 1.0) == math.inf
        assert ieee_pow(math.inf, 0.0) == 1.0
        assert ieee_pow(math.nan, 0.0) == 1.0
        assert math.isnan(ieee_pow(math.nan, 1.0))


# =============================================================================
# ТЕСТЫ NaN/Inf ПРОВЕРКИ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    @pytest.mark.parametrize("value", [0.0, -0.0, 1.5, -1e300, 1e-300])
    def test_finite_values_valid(self, value: float) -> None:
        """Конечные значения валидны"""
        assert is_valid_float(value) is True

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_values_invalid(self, value: float) -> None:
        """NaN и Inf невалидны"""
        assert is_valid_float(value) is False
