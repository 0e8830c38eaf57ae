"""
Direction — Направление на плоскости XY

Immutable Pydantic модель, изоморфная точке на единичной окружности:
"точка" в аффинном пространстве углов (Turn — соответствующая "дельта").

Каноническое представление: радианы в [0, 2π), нормализуются при создании.

Арифметика:
- Direction + Turn → Direction
- Direction - Turn → Direction
- Direction - Direction → Turn (сырая разность, БЕЗ приведения по модулю)
"""

import math
from typing import TYPE_CHECKING, Final

from pydantic import BaseModel, Field, field_validator

from src.core.config import DEFAULT_DISPLAY_CONFIG, DisplayConfig
from src.core.domain.turn import Turn
from src.core.domain.units import RADIANS_PER_ROTATION
from src.core.math.numerical_safeguards import (
    AngleDomainError,
    centered_mod,
    proper_mod,
    require_finite,
)

if TYPE_CHECKING:
    from src.core.domain.angular_range import Range
    from src.core.domain.basis import Basis


# =============================================================================
# DIRECTION MODEL
# =============================================================================


class Direction(BaseModel):
    """
    Абсолютное направление, независимое от счётчика оборотов.

    Immutable модель (frozen=True). Два направления равны тогда и только тогда,
    когда их нормализованные радианы совпадают побитово.
    """

    radians: float = Field(
        ...,
        allow_inf_nan=False,
        description="Натуральный угол в [0, 2π) (0 = +X, π/2 = +Y)",
    )

    model_config = {"frozen": True}

    @field_validator("radians")
    @classmethod
    def normalize_radians(cls, v: float) -> float:
        """Приведение к [0, 2π)"""
        return proper_mod(v, RADIANS_PER_ROTATION)

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def from_natural_angle(cls, radians: float) -> "Direction":
        """
        Направление по натуральному углу.

        Натуральный угол 0 — направление из начала координат к точке (1, 0),
        π/2 — к точке (0, 1).
        """
        return cls(radians=require_finite(radians, "radians"))

    @classmethod
    def from_vector(cls, dx: float, dy: float) -> "Direction":
        """
        Направление вдоль вектора смещения (dx, dy).

        Одна бесконечная компонента допустима: (inf, 0) → 0, (-inf, 1) → π.

        Raises:
            AngleDomainError: нулевой вектор, NaN-компонента или обе компоненты
                бесконечны (направление не определено)
        """
        if math.isnan(dx) or math.isnan(dy):
            raise AngleDomainError(f"vector component is NaN: ({dx}, {dy})")
        if math.isinf(dx) and math.isinf(dy):
            raise AngleDomainError(f"both vector components are infinite: ({dx}, {dy})")
        if dx == 0 and dy == 0:
            raise AngleDomainError("direction of a zero-length vector is undefined")

        return cls.from_natural_angle(math.atan2(dy, dx))

    @classmethod
    def from_angle(cls, angle: float, basis: "Basis") -> "Direction":
        """Направление по углу в единицах базиса"""
        return basis.angle_to_dir(angle)

    # -------------------------------------------------------------------------
    # Компоненты и углы
    # -------------------------------------------------------------------------

    @property
    def unit_x(self) -> float:
        """X-компонента единичного вектора вдоль направления"""
        return math.cos(self.radians)

    @property
    def unit_y(self) -> float:
        """Y-компонента единичного вектора вдоль направления"""
        return math.sin(self.radians)

    @property
    def unsigned_natural_angle(self) -> float:
        """Натуральный угол в [0, 2π)"""
        return self.radians

    @property
    def signed_natural_angle(self) -> float:
        """Натуральный угол в (-π, π]"""
        return centered_mod(self.radians, RADIANS_PER_ROTATION)

    def get_unsigned_angle(self, basis: "Basis") -> float:
        """Наименьший неотрицательный угол направления в базисе"""
        return basis.dir_to_unsigned_angle(self)

    def get_signed_angle(self, basis: "Basis") -> float:
        """Наименьший по модулю знаковый угол направления в базисе"""
        return basis.dir_to_signed_angle(self)

    def clamped_inside(self, arc: "Range") -> "Direction":
        """Принудительно внутрь диапазона, с минимальным поворотом"""
        return arc.clamp(self)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, turn: object) -> "Direction":
        if not isinstance(turn, Turn):
            return NotImplemented
        return Direction(radians=self.radians + turn.radians)

    def __sub__(self, other: object) -> "Direction | Turn":
        # Direction - Direction: поворот, переводящий other в self
        if isinstance(other, Direction):
            return Turn.from_natural_angle(self.radians - other.radians)
        if isinstance(other, Turn):
            return Direction(radians=self.radians - other.radians)
        return NotImplemented

    def is_close(self, other: "Direction", tolerance: Turn) -> bool:
        """Равенство с толерантностью по кратчайшему повороту между направлениями"""
        return not (self - other).smallest_signed_equivalent().is_more_rotation_than(
            tolerance
        )

    # -------------------------------------------------------------------------
    # Отображение
    # -------------------------------------------------------------------------

    def describe(self, config: DisplayConfig | None = None) -> str:
        config = config or DEFAULT_DISPLAY_CONFIG
        return (
            f"Towards: <{config.fmt(self.unit_x)}, {config.fmt(self.unit_y)}>, "
            f"Natural Angle: {config.fmt(self.radians)}"
        )

    def __str__(self) -> str:
        return self.describe()


# =============================================================================
# CONSTANTS
# =============================================================================

ALONG_POSITIVE_X: Final[Direction] = Direction(radians=0.0)
ALONG_POSITIVE_Y: Final[Direction] = Direction(radians=RADIANS_PER_ROTATION / 4)
ALONG_NEGATIVE_X: Final[Direction] = Direction(radians=RADIANS_PER_ROTATION / 2)
ALONG_NEGATIVE_Y: Final[Direction] = Direction(radians=3 * RADIANS_PER_ROTATION / 4)
