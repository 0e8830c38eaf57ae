"""
AngleUnits — Централизованный модуль угловых единиц

Единственный допустимый способ преобразований между:
- units_per_turn (положительное количество единиц в полном обороте)
- counter_clockwise_radians_per_unit (знаковый множитель Basis)

Знак множителя кодирует направление: отрицательный означает, что
положительные углы базиса идут по часовой стрелке.
"""

import math
from typing import Final

from src.core.config import DEFAULT_DISPLAY_CONFIG, DisplayConfig
from src.core.math.numerical_safeguards import require_finite, validate_positive


# =============================================================================
# ЕДИНИЦ В ПОЛНОМ ОБОРОТЕ
# =============================================================================

# Радиан в полном обороте (2π)
RADIANS_PER_ROTATION: Final[float] = 2 * math.pi

# Градусов в полном обороте
DEGREES_PER_ROTATION: Final[float] = 360.0

# Градов (gradians) в полном обороте
GRADIANS_PER_ROTATION: Final[float] = 400.0

# Оборотов в полном обороте
TURNS_PER_ROTATION: Final[float] = 1.0

# Часов на циферблате (стандартный clock face)
HOURS_PER_CLOCK_FACE: Final[float] = 12.0

# Порядок важен: первое совпадение в пределах толерантности побеждает
_KNOWN_UNITS: Final[tuple[tuple[str, float], ...]] = (
    ("Radians", RADIANS_PER_ROTATION),
    ("Degrees", DEGREES_PER_ROTATION),
    ("Gradians", GRADIANS_PER_ROTATION),
    ("Turns", TURNS_PER_ROTATION),
)


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def counter_clockwise_radians_per_unit(
    units_per_turn: float, is_clockwise_positive: bool
) -> float:
    """
    Конверсия: units_per_turn + направление → знаковый множитель базиса.

    factor = sign * (2π / units_per_turn), sign = -1 если clockwise positive

    Args:
        units_per_turn: Количество единиц в полном обороте (> 0)
        is_clockwise_positive: True если рост угла = вращение по часовой

    Returns:
        Знаковый множитель (радиан против часовой на единицу)

    Raises:
        AngleDomainError: Если units_per_turn <= 0, NaN/Inf или настолько мал,
            что множитель переполняется до Inf
    """
    validate_positive(units_per_turn, "units_per_turn")

    direction_sign = -1.0 if is_clockwise_positive else 1.0

    # Субнормальный units_per_turn переполняет множитель до Inf
    return require_finite(
        direction_sign * (RADIANS_PER_ROTATION / units_per_turn),
        "counter_clockwise_radians_per_unit",
    )


def units_per_counter_clockwise_turn(radians_per_unit: float) -> float:
    """
    Конверсия: знаковый множитель → знаковое количество единиц в обороте.

    Отрицательный результат означает clockwise-positive базис.
    """
    require_finite(radians_per_unit, "radians_per_unit")
    return RADIANS_PER_ROTATION / radians_per_unit


# =============================================================================
# ОТОБРАЖЕНИЕ
# =============================================================================


def unit_name(units_per_turn: float, config: DisplayConfig | None = None) -> str:
    """
    Имя единицы по количеству единиц в обороте.

    Args:
        units_per_turn: Количество единиц в обороте (знак игнорируется)
        config: Конфигурация отображения (default: DEFAULT_DISPLAY_CONFIG)

    Returns:
        "Radians"/"Degrees"/"Gradians"/"Turns" при совпадении в пределах
        config.unit_match_tolerance, иначе "<N>/Turn"

    Examples:
        >>> unit_name(360.0)
        'Degrees'
        >>> unit_name(-12.0)
        '12/Turn'
    """
    config = config or DEFAULT_DISPLAY_CONFIG
    magnitude = abs(units_per_turn)

    for name, count in _KNOWN_UNITS:
        if abs(magnitude - count) <= config.unit_match_tolerance:
            return name

    return f"{config.fmt(magnitude)}/Turn"
