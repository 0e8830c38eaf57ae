"""
Domain models and value objects.

Contains the planar orientation value types: Turn, Direction, Basis, Range.
"""

from src.core.domain.angular_range import (
    RANGE_ALL_DIRECTIONS,
    RANGE_NEGATIVE_X,
    RANGE_NEGATIVE_X_NEGATIVE_Y,
    RANGE_NEGATIVE_X_POSITIVE_Y,
    RANGE_NEGATIVE_Y,
    RANGE_POSITIVE_X,
    RANGE_POSITIVE_X_NEGATIVE_Y,
    RANGE_POSITIVE_X_POSITIVE_Y,
    RANGE_POSITIVE_Y,
    Range,
)
from src.core.domain.basis import NATURAL_BASIS, Basis
from src.core.domain.direction import (
    ALONG_NEGATIVE_X,
    ALONG_NEGATIVE_Y,
    ALONG_POSITIVE_X,
    ALONG_POSITIVE_Y,
    Direction,
)
from src.core.domain.turn import (
    ONE_DEGREE_CLOCKWISE,
    ONE_DEGREE_COUNTER_CLOCKWISE,
    ONE_GRADIAN_CLOCKWISE,
    ONE_GRADIAN_COUNTER_CLOCKWISE,
    ONE_RADIAN_CLOCKWISE,
    ONE_RADIAN_COUNTER_CLOCKWISE,
    ONE_TURN_CLOCKWISE,
    ONE_TURN_COUNTER_CLOCKWISE,
    TURN_ZERO,
    Turn,
    compare_absolute_rotation,
    compare_clockwise,
    compare_counter_clockwise,
)
from src.core.domain.units import (
    DEGREES_PER_ROTATION,
    GRADIANS_PER_ROTATION,
    HOURS_PER_CLOCK_FACE,
    RADIANS_PER_ROTATION,
    TURNS_PER_ROTATION,
    counter_clockwise_radians_per_unit,
    unit_name,
    units_per_counter_clockwise_turn,
)

__all__ = [
    # Units module
    "RADIANS_PER_ROTATION",
    "DEGREES_PER_ROTATION",
    "GRADIANS_PER_ROTATION",
    "TURNS_PER_ROTATION",
    "HOURS_PER_CLOCK_FACE",
    "counter_clockwise_radians_per_unit",
    "units_per_counter_clockwise_turn",
    "unit_name",
    # Turn model
    "Turn",
    "TURN_ZERO",
    "ONE_TURN_COUNTER_CLOCKWISE",
    "ONE_RADIAN_COUNTER_CLOCKWISE",
    "ONE_DEGREE_COUNTER_CLOCKWISE",
    "ONE_GRADIAN_COUNTER_CLOCKWISE",
    "ONE_TURN_CLOCKWISE",
    "ONE_RADIAN_CLOCKWISE",
    "ONE_DEGREE_CLOCKWISE",
    "ONE_GRADIAN_CLOCKWISE",
    "compare_counter_clockwise",
    "compare_clockwise",
    "compare_absolute_rotation",
    # Direction model
    "Direction",
    "ALONG_POSITIVE_X",
    "ALONG_POSITIVE_Y",
    "ALONG_NEGATIVE_X",
    "ALONG_NEGATIVE_Y",
    # Basis model
    "Basis",
    "NATURAL_BASIS",
    # Range model
    "Range",
    "RANGE_ALL_DIRECTIONS",
    "RANGE_POSITIVE_X",
    "RANGE_NEGATIVE_X",
    "RANGE_POSITIVE_Y",
    "RANGE_NEGATIVE_Y",
    "RANGE_POSITIVE_X_POSITIVE_Y",
    "RANGE_NEGATIVE_X_POSITIVE_Y",
    "RANGE_NEGATIVE_X_NEGATIVE_Y",
    "RANGE_POSITIVE_X_NEGATIVE_Y",
]
