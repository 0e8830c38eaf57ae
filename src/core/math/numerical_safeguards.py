"""
Numerical Safeguards — Safe Math Primitives для угловой арифметики

Модуль обеспечивает численную корректность всех угловых вычислений:
- Проверка конечности входов (NaN/Inf никогда не попадают в значения)
- Модульное приведение: proper (неотрицательный остаток) и centered
  (наименьший по модулю знаковый остаток)
- Единый тип доменной ошибки AngleDomainError

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. proper_mod(x, d) ∈ [0, d) для любого конечного x и d > 0
2. centered_mod(x, d) ∈ (-d/2, d/2], ровно половина → +d/2
3. Делитель <= 0 → AngleDomainError
4. Все операции детерминированы и воспроизводимы
"""

import math


# =============================================================================
# EXCEPTIONS
# =============================================================================


class AngleDomainError(ValueError):
    """
    Нарушение домена угловой операции.

    Возникает синхронно при:
    1. NaN/Inf на входе фабрики или конверсии
    2. Неположительном делителе в proper_mod/centered_mod
    3. Неположительном или бесконечном units_per_turn для Basis
    4. Нулевом векторе в Direction.from_vector
    """

    pass


# =============================================================================
# NaN/Inf ЗАЩИТА
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


def require_finite(value: float, name: str) -> float:
    """
    Валидация, что значение конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        AngleDomainError: Если value NaN или Inf

    Examples:
        >>> require_finite(1.5, "angle")
        1.5
        >>> require_finite(float("nan"), "angle")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        AngleDomainError: angle is NaN
    """
    if is_valid_float(value):
        return value
    if math.isnan(value):
        raise AngleDomainError(f"{name} is NaN")
    raise AngleDomainError(f"{name} is infinite: {value}")


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение конечное и строго положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        AngleDomainError: Если value <= 0 или NaN/Inf
    """
    require_finite(value, name)

    if value <= 0:
        raise AngleDomainError(f"{name} must be positive, got {value}")


# =============================================================================
# МОДУЛЬНОЕ ПРИВЕДЕНИЕ
# =============================================================================


def proper_mod(value: float, divisor: float) -> float:
    """
    Наименьший неотрицательный остаток от деления value на divisor.

    Используется для нормализации Direction и беззнаковых углов в базисе.

    Args:
        value: Делимое (любое конечное)
        divisor: Делитель (> 0)

    Returns:
        Остаток в [0, divisor)

    Raises:
        AngleDomainError: Если divisor <= 0

    Examples:
        >>> proper_mod(7.0, 5.0)
        2.0
        >>> proper_mod(-1.0, 5.0)
        4.0
        >>> proper_mod(10.0, 5.0)
        0.0
    """
    if divisor <= 0:
        raise AngleDomainError(f"divisor must be positive, got {divisor}")

    result = math.fmod(value, divisor)
    if result < 0:
        result += divisor

    # -tiny + divisor округляется до divisor
    if result >= divisor:
        return 0.0

    return result


def centered_mod(value: float, divisor: float) -> float:
    """
    Наименьший по модулю знаковый остаток от деления value на divisor.

    Граничный случай (ровно половина делителя) разрешается в положительную
    сторону: centered_mod(d/2, d) == centered_mod(-d/2, d) == d/2.

    Args:
        value: Делимое (любое конечное)
        divisor: Делитель (> 0)

    Returns:
        Остаток в (-divisor/2, divisor/2]

    Raises:
        AngleDomainError: Если divisor <= 0

    Examples:
        >>> centered_mod(3.0, 4.0)
        -1.0
        >>> centered_mod(2.0, 4.0)
        2.0
        >>> centered_mod(-2.0, 4.0)
        2.0
    """
    if divisor <= 0:
        raise AngleDomainError(f"divisor must be positive, got {divisor}")

    # fmod сохраняет знак делимого: result ∈ (-divisor, divisor)
    result = math.fmod(value, divisor)

    if result * 2 <= -divisor:
        result += divisor
    elif result * 2 > divisor:
        result -= divisor

    return result


def sign(value: float) -> int:
    """
    Знак значения.

    Returns:
        -1 если value < 0, 0 если value == 0, +1 если value > 0
    """
    if value > 0:
        return 1
    if value < 0:
        return -1
    return 0
