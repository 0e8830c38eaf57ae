"""
Basis — Система угловых координат

Immutable Pydantic модель, определяющая размер и направление угловой единицы
и направление нулевого угла. Используется для трансляции "сырых" углов
(градусы, грады, часы циферблата и т.д.) в инвариантные Direction/Turn и обратно.

Пример: циферблат часов
    clock = Basis.from_direction_and_units(ALONG_POSITIVE_Y, 12, is_clockwise_positive=True)
    clock.angle_to_dir(3)  # → ALONG_POSITIVE_X
    clock.angle_to_dir(6)  # → ALONG_NEGATIVE_Y

КОНТРАКТ ОБРАТИМОСТИ (с точностью до float):
1. angle_to_dir(dir_to_unsigned_angle(d)) ≈ d для любого Direction d
2. angle_to_turn(turn_to_angle(t)) ≈ t для любого Turn t
"""

import logging
from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.config import DEFAULT_DISPLAY_CONFIG, DisplayConfig
from src.core.domain.direction import ALONG_POSITIVE_X, Direction
from src.core.domain.turn import Turn
from src.core.domain.units import (
    counter_clockwise_radians_per_unit,
    unit_name,
    units_per_counter_clockwise_turn,
)
from src.core.math.numerical_safeguards import centered_mod, proper_mod, require_finite

LOG = logging.getLogger(__name__)


# =============================================================================
# BASIS MODEL
# =============================================================================


class Basis(BaseModel):
    """
    Система угловых координат.

    Знак counter_clockwise_radians_per_unit кодирует направление:
    отрицательный — положительные углы идут по часовой стрелке.
    Создаётся через from_direction_and_units.
    """

    origin: Direction = Field(..., description="Куда указывает нулевой угол базиса")
    counter_clockwise_radians_per_unit: float = Field(
        ...,
        allow_inf_nan=False,
        description="Радиан против часовой на единицу (знаковый, ненулевой)",
    )

    model_config = {"frozen": True}

    @field_validator("counter_clockwise_radians_per_unit")
    @classmethod
    def validate_nonzero_factor(cls, v: float) -> float:
        if v == 0:
            raise ValueError("counter_clockwise_radians_per_unit must be non-zero")
        return v

    @classmethod
    def from_direction_and_units(
        cls, origin: Direction, units_per_turn: float, is_clockwise_positive: bool
    ) -> "Basis":
        """
        Базис с нулевым углом вдоль origin и единицами, заданными ограничениями.

        Args:
            origin: Направление нулевого угла
            units_per_turn: Количество единиц в полном обороте (> 0, конечное)
            is_clockwise_positive: True если рост угла = вращение по часовой

        Raises:
            AngleDomainError: Если units_per_turn <= 0, NaN/Inf или настолько мал,
                что множитель переполняется до Inf
        """
        factor = counter_clockwise_radians_per_unit(units_per_turn, is_clockwise_positive)
        basis = cls(origin=origin, counter_clockwise_radians_per_unit=factor)
        LOG.debug("Basis built: %s", basis)
        return basis

    # -------------------------------------------------------------------------
    # Производные величины
    # -------------------------------------------------------------------------

    @property
    def units_per_counter_clockwise_turn(self) -> float:
        """Количество единиц в обороте против часовой (отрицательно для clockwise базиса)"""
        return units_per_counter_clockwise_turn(self.counter_clockwise_radians_per_unit)

    @property
    def is_clockwise_positive(self) -> bool:
        return self.counter_clockwise_radians_per_unit < 0

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def angle_to_dir(self, angle: float) -> Direction:
        """Направление, соответствующее углу в этом базисе"""
        require_finite(angle, "angle")
        return Direction.from_natural_angle(
            self.origin.unsigned_natural_angle
            + angle * self.counter_clockwise_radians_per_unit
        )

    def angle_to_turn(self, angle: float) -> Turn:
        """Поворот, соответствующий углу в этом базисе"""
        return Turn.from_angle(angle, self)

    def dir_to_unsigned_angle(self, direction: Direction) -> float:
        """Наименьший неотрицательный угол направления в этом базисе"""
        return proper_mod(
            self._raw_angle(direction), abs(self.units_per_counter_clockwise_turn)
        )

    def dir_to_signed_angle(self, direction: Direction) -> float:
        """Наименьший по модулю знаковый угол направления в этом базисе"""
        return centered_mod(
            self._raw_angle(direction), abs(self.units_per_counter_clockwise_turn)
        )

    def turn_to_angle(self, turn: Turn) -> float:
        """Угол в этом базисе, соответствующий повороту"""
        return turn.get_angle(self)

    def _raw_angle(self, direction: Direction) -> float:
        return (
            direction.unsigned_natural_angle - self.origin.unsigned_natural_angle
        ) / self.counter_clockwise_radians_per_unit

    # -------------------------------------------------------------------------
    # Отображение
    # -------------------------------------------------------------------------

    def describe(self, config: DisplayConfig | None = None) -> str:
        """Например: 'Unit: Degrees (counterclockwise), Zero: Towards: <1, 0>, ...'"""
        config = config or DEFAULT_DISPLAY_CONFIG
        sense = "clockwise" if self.is_clockwise_positive else "counterclockwise"
        unit = unit_name(self.units_per_counter_clockwise_turn, config)
        return f"Unit: {unit} ({sense}), Zero: {self.origin.describe(config)}"

    def __str__(self) -> str:
        return self.describe()


# =============================================================================
# CONSTANTS
# =============================================================================

# Натуральный базис: ноль вдоль +X, единица радиан против часовой.
# Угол 0 соответствует вектору (1, 0), угол π/2 вектору (0, 1).
NATURAL_BASIS: Final[Basis] = Basis(
    origin=ALONG_POSITIVE_X, counter_clockwise_radians_per_unit=1.0
)
