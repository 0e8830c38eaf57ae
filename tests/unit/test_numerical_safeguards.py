"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. proper_mod: диапазон [0, d), отрицательные значения, граница
2. centered_mod: диапазон (-d/2, d/2], разрешение половины в плюс
3. NaN/Inf защиту (require_finite, validate_positive)
4. sign
5. Граничные случаи и невалидные делители
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    AngleDomainError,
    centered_mod,
    is_valid_float,
    proper_mod,
    require_finite,
    sign,
    validate_positive,
)

TAU = 2 * math.pi


# =============================================================================
# ТЕСТЫ МОДУЛЬНОГО ПРИВЕДЕНИЯ
# =============================================================================


class TestProperMod:
    """Тесты для proper_mod"""

    def test_positive_value(self) -> None:
        """Положительное значение → обычный остаток"""
        assert proper_mod(7.0, 5.0) == 2.0
        assert proper_mod(3.0, 5.0) == 3.0

    def test_negative_value_becomes_non_negative(self) -> None:
        """Отрицательное значение → неотрицательный остаток"""
        assert proper_mod(-1.0, 5.0) == 4.0
        assert proper_mod(-7.0, 5.0) == 3.0

    def test_exact_multiple_is_zero(self) -> None:
        """Кратное делителя → 0"""
        assert proper_mod(10.0, 5.0) == 0.0
        assert proper_mod(-10.0, 5.0) == 0.0
        assert proper_mod(0.0, 5.0) == 0.0

    def test_result_strictly_below_divisor(self) -> None:
        """Крошечный отрицательный остаток не округляется до divisor"""
        result = proper_mod(-1e-300, TAU)
        assert 0.0 <= result < TAU

    @pytest.mark.parametrize("value", [-100.5, -TAU, -1e-9, 0.0, 1e-9, 3.0, TAU, 1e6])
    def test_range_invariant(self, value: float) -> None:
        """Результат всегда в [0, divisor)"""
        result = proper_mod(value, TAU)
        assert 0.0 <= result < TAU

    def test_invalid_divisor_raises(self) -> None:
        """Делитель <= 0 вызывает AngleDomainError"""
        with pytest.raises(AngleDomainError, match="divisor must be positive"):
            proper_mod(1.0, 0.0)

        with pytest.raises(AngleDomainError, match="divisor must be positive"):
            proper_mod(1.0, -5.0)


class TestCenteredMod:
    """Тесты для centered_mod"""

    def test_small_values_unchanged(self) -> None:
        """Значения в (-d/2, d/2] не изменяются"""
        assert centered_mod(1.0, 4.0) == 1.0
        assert centered_mod(-1.0, 4.0) == -1.0
        assert centered_mod(0.0, 4.0) == 0.0

    def test_wraps_to_smallest_magnitude(self) -> None:
        """Большие значения → наименьший по модулю представитель"""
        assert centered_mod(3.0, 4.0) == -1.0
        assert centered_mod(-3.0, 4.0) == 1.0
        assert centered_mod(9.0, 4.0) == 1.0

    def test_exact_half_resolves_positive(self) -> None:
        """Ровно половина делителя → +d/2 (с обеих сторон)"""
        assert centered_mod(2.0, 4.0) == 2.0
        assert centered_mod(-2.0, 4.0) == 2.0
        assert centered_mod(6.0, 4.0) == 2.0

    @pytest.mark.parametrize("value", [-100.5, -TAU, -math.pi, -1.0, 0.0, math.pi, 5.0, 1e6])
    def test_range_invariant(self, value: float) -> None:
        """Результат всегда в (-d/2, d/2]"""
        result = centered_mod(value, TAU)
        assert -math.pi < result <= math.pi

    def test_invalid_divisor_raises(self) -> None:
        """Делитель <= 0 вызывает AngleDomainError"""
        with pytest.raises(AngleDomainError, match="divisor must be positive"):
            centered_mod(1.0, 0.0)

        with pytest.raises(AngleDomainError, match="divisor must be positive"):
            centered_mod(1.0, -1.0)


# =============================================================================
# ТЕСТЫ NaN/Inf ЗАЩИТЫ
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_normal_values_valid(self) -> None:
        """Обычные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1.0)
        assert is_valid_float(1e300)

    def test_nan_and_inf_invalid(self) -> None:
        """NaN и Inf невалидны"""
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


class TestRequireFinite:
    """Тесты для require_finite"""

    def test_finite_value_returned(self) -> None:
        """Конечное значение возвращается без изменений"""
        assert require_finite(1.5, "angle") == 1.5
        assert require_finite(-0.0, "angle") == 0.0

    def test_nan_raises(self) -> None:
        """NaN → AngleDomainError"""
        with pytest.raises(AngleDomainError, match="angle is NaN"):
            require_finite(float("nan"), "angle")

    def test_inf_raises(self) -> None:
        """Inf → AngleDomainError"""
        with pytest.raises(AngleDomainError, match="angle is infinite"):
            require_finite(float("inf"), "angle")

        with pytest.raises(AngleDomainError, match="angle is infinite"):
            require_finite(float("-inf"), "angle")

    def test_agrees_with_is_valid_float(self) -> None:
        """require_finite пропускает ровно те значения, что валидны по is_valid_float"""
        for value in [0.0, -1.5, 1e308, 5e-324, float("nan"), float("inf"), float("-inf")]:
            if is_valid_float(value):
                assert require_finite(value, "angle") == value
            else:
                with pytest.raises(AngleDomainError):
                    require_finite(value, "angle")

    def test_domain_error_is_value_error(self) -> None:
        """AngleDomainError ловится как ValueError"""
        with pytest.raises(ValueError):
            require_finite(float("nan"), "angle")


class TestValidatePositive:
    """Тесты для validate_positive"""

    def test_positive_passes(self) -> None:
        validate_positive(1e-9, "units_per_turn")
        validate_positive(360.0, "units_per_turn")

    def test_zero_and_negative_raise(self) -> None:
        with pytest.raises(AngleDomainError, match="must be positive"):
            validate_positive(0.0, "units_per_turn")

        with pytest.raises(AngleDomainError, match="must be positive"):
            validate_positive(-12.0, "units_per_turn")

    def test_non_finite_raises(self) -> None:
        with pytest.raises(AngleDomainError, match="NaN"):
            validate_positive(float("nan"), "units_per_turn")

        with pytest.raises(AngleDomainError, match="infinite"):
            validate_positive(float("inf"), "units_per_turn")


class TestSign:
    """Тесты для sign"""

    def test_sign_values(self) -> None:
        assert sign(5.0) == 1
        assert sign(-0.1) == -1
        assert sign(0.0) == 0
        assert sign(-0.0) == 0
