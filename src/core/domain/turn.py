"""
Turn — Величина поворота

Immutable Pydantic модель, представляющая "дельту" в аффинном пространстве
углов: знаковую величину поворота в радианах (против часовой = положительно)
с неявным счётчиком оборотов.

Полтора оборота и пол-оборота переводят Direction в одно и то же место,
но это РАЗНЫЕ Turn. Точное равенство (==) учитывает счётчик оборотов;
для сравнения "по эффекту" используется is_congruent_to.
"""

import math
from numbers import Real
from typing import TYPE_CHECKING, Final

from pydantic import BaseModel, Field

from src.core.config import DEFAULT_DISPLAY_CONFIG, DisplayConfig
from src.core.domain.units import (
    DEGREES_PER_ROTATION,
    GRADIANS_PER_ROTATION,
    RADIANS_PER_ROTATION,
)
from src.core.math.numerical_safeguards import (
    AngleDomainError,
    centered_mod,
    proper_mod,
    require_finite,
    sign,
)

if TYPE_CHECKING:
    from src.core.domain.basis import Basis


# =============================================================================
# TURN MODEL
# =============================================================================


class Turn(BaseModel):
    """
    Величина поворота в радианах против часовой стрелки.

    Immutable модель (frozen=True). Без неявного приведения по модулю 2π:
    Turn(radians=2π) != Turn(radians=0).
    """

    radians: float = Field(
        ..., allow_inf_nan=False, description="Поворот против часовой (радианы)"
    )

    model_config = {"frozen": True}

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def from_natural_angle(cls, radians: float) -> "Turn":
        """Поворот против часовой на заданный угол в радианах"""
        return cls(radians=require_finite(radians, "radians"))

    @classmethod
    def from_angle(cls, angle: float, basis: "Basis") -> "Turn":
        """Поворот на заданный угол в единицах базиса"""
        require_finite(angle, "angle")
        return cls.from_natural_angle(angle * basis.counter_clockwise_radians_per_unit)

    # -------------------------------------------------------------------------
    # Углы
    # -------------------------------------------------------------------------

    @property
    def natural_angle(self) -> float:
        """Угол поворота в радианах против часовой (знаковый, с оборотами)"""
        return self.radians

    def get_angle(self, basis: "Basis") -> float:
        """Угол поворота в единицах базиса (обратное к from_angle)"""
        return self.radians / basis.counter_clockwise_radians_per_unit

    @property
    def is_clockwise(self) -> bool:
        return self.radians < 0

    @property
    def is_counter_clockwise(self) -> bool:
        return self.radians > 0

    def sign(self) -> int:
        """Знак поворота: -1 (по часовой), 0, +1 (против часовой)"""
        return sign(self.radians)

    # -------------------------------------------------------------------------
    # Наименьшие конгруэнтные эквиваленты
    # -------------------------------------------------------------------------

    def smallest_signed_equivalent(self) -> "Turn":
        """
        Наименьший по модулю поворот с тем же эффектом на Direction.

        Результат в (-π, π]; ровно пол-оборота → против часовой.
        """
        return Turn(radians=centered_mod(self.radians, RADIANS_PER_ROTATION))

    def smallest_counter_clockwise_equivalent(self) -> "Turn":
        """Наименьший неотрицательный поворот с тем же эффектом, в [0, 2π)"""
        return Turn(radians=proper_mod(self.radians, RADIANS_PER_ROTATION))

    def smallest_clockwise_equivalent(self) -> "Turn":
        """Наименьший неположительный поворот с тем же эффектом, в (-2π, 0]"""
        return Turn(radians=-proper_mod(-self.radians, RADIANS_PER_ROTATION))

    def abs_counter_clockwise(self) -> "Turn":
        """Поворот той же величины против часовой"""
        return self if self.radians >= 0 else -self

    def abs_clockwise(self) -> "Turn":
        """Поворот той же величины по часовой"""
        return self if self.radians <= 0 else -self

    def clamp_magnitude(
        self, max_magnitude: "Turn", use_minimum_congruent: bool = True
    ) -> "Turn":
        """
        Ограничение величины поворота.

        Направление max_magnitude игнорируется, важна только величина.

        Args:
            max_magnitude: Максимальная величина (по часовой или против)
            use_minimum_congruent: Приводить ли поворот к smallest_signed_equivalent
                перед ограничением. Определяет знак результата: ограничение
                3/4 оборота по часовой до 1 градуса даёт 1 градус ПРОТИВ часовой
                при True (эквивалент = 1/4 против часовой) и ПО часовой при False.

        Returns:
            Поворот с |result| <= |max_magnitude|
        """
        if use_minimum_congruent:
            return self.smallest_signed_equivalent().clamp_magnitude(
                max_magnitude, use_minimum_congruent=False
            )

        if not self.is_more_rotation_than(max_magnitude):
            return self

        return max_magnitude * (sign(self.radians) * sign(max_magnitude.radians))

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def is_more_clockwise_than(self, other: "Turn") -> bool:
        return self.radians < other.radians

    def is_more_counter_clockwise_than(self, other: "Turn") -> bool:
        return self.radians > other.radians

    def is_more_rotation_than(self, other: "Turn") -> bool:
        """Больше ли абсолютная величина поворота (независимо от направления)"""
        return abs(self.radians) > abs(other.radians)

    def compare_to(self, other: "Turn") -> int:
        """Сравнение в порядке против часовой: -1, 0, +1"""
        return compare_counter_clockwise(self, other)

    def is_close(self, other: "Turn", tolerance: "Turn") -> bool:
        """
        Равенство с толерантностью, С УЧЁТОМ счётчика оборотов.

        Полный оборот по часовой НЕ близок к нулевому повороту.
        Знак tolerance не важен.
        """
        return not (self - other).is_more_rotation_than(tolerance)

    def is_congruent_to(self, other: "Turn", tolerance: "Turn | None" = None) -> bool:
        """
        Эквивалентность эффекта поворотов с толерантностью.

        Например, четверть оборота по часовой конгруэнтна трём четвертям
        против часовой. Знак tolerance не важен.
        """
        if tolerance is None:
            tolerance = TURN_ZERO
        return not (self - other).smallest_signed_equivalent().is_more_rotation_than(
            tolerance
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Turn):
            return NotImplemented
        return self.radians < other.radians

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Turn):
            return NotImplemented
        return self.radians <= other.radians

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Turn):
            return NotImplemented
        return self.radians > other.radians

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Turn):
            return NotImplemented
        return self.radians >= other.radians

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Turn":
        if not isinstance(other, Turn):
            return NotImplemented
        return Turn(radians=self.radians + other.radians)

    def __sub__(self, other: object) -> "Turn":
        if not isinstance(other, Turn):
            return NotImplemented
        return Turn(radians=self.radians - other.radians)

    def __neg__(self) -> "Turn":
        """Обратный поворот: поворот на результат отменяет поворот на self"""
        return Turn(radians=-self.radians)

    def __abs__(self) -> "Turn":
        return self.abs_counter_clockwise()

    def __mul__(self, factor: object) -> "Turn":
        if isinstance(factor, bool) or not isinstance(factor, Real):
            return NotImplemented
        return Turn(radians=self.radians * float(factor))

    def __rmul__(self, factor: object) -> "Turn":
        if isinstance(factor, bool) or not isinstance(factor, Real):
            return NotImplemented
        return Turn(radians=float(factor) * self.radians)

    def __truediv__(self, divisor: object) -> "Turn | float":
        """
        Turn / число → Turn; Turn / Turn → безразмерное отношение (float).

        Raises:
            AngleDomainError: Если делитель нулевой
        """
        if isinstance(divisor, Turn):
            if divisor.radians == 0:
                raise AngleDomainError("cannot divide by a zero turn")
            return self.radians / divisor.radians
        if isinstance(divisor, bool) or not isinstance(divisor, Real):
            return NotImplemented
        if divisor == 0:
            raise AngleDomainError("cannot divide a turn by zero")
        return Turn(radians=self.radians / float(divisor))

    def __mod__(self, other: object) -> "Turn":
        """Остаток в радианах; знак как у делимого (усечённое деление)"""
        if not isinstance(other, Turn):
            return NotImplemented
        if other.radians == 0:
            raise AngleDomainError("cannot take remainder by a zero turn")
        return Turn(radians=math.fmod(self.radians, other.radians))

    # -------------------------------------------------------------------------
    # Отображение
    # -------------------------------------------------------------------------

    def describe(self, config: DisplayConfig | None = None) -> str:
        """Величина в оборотах и направление, например '0.25 clockwise turns'"""
        config = config or DEFAULT_DISPLAY_CONFIG
        if self.radians == 0:
            return "0 turns"

        turns = abs(self.radians / RADIANS_PER_ROTATION)
        sense = "clockwise" if self.radians <= 0 else "counterclockwise"
        return f"{config.fmt(turns)} {sense} turns"

    def __str__(self) -> str:
        return self.describe()


# =============================================================================
# COMPARERS
# =============================================================================


def _compare(a: float, b: float) -> int:
    return (a > b) - (a < b)


def compare_counter_clockwise(turn1: Turn, turn2: Turn) -> int:
    """Comparer: более против часовой = больше"""
    return _compare(turn1.radians, turn2.radians)


def compare_clockwise(turn1: Turn, turn2: Turn) -> int:
    """Comparer: более по часовой = больше"""
    return _compare(-turn1.radians, -turn2.radians)


def compare_absolute_rotation(turn1: Turn, turn2: Turn) -> int:
    """Comparer: больше абсолютного поворота (в любую сторону) = больше"""
    return _compare(abs(turn1.radians), abs(turn2.radians))


# =============================================================================
# CONSTANTS
# =============================================================================

# Тождественный поворот
TURN_ZERO: Final[Turn] = Turn(radians=0.0)

# 1 полный оборот против часовой
ONE_TURN_COUNTER_CLOCKWISE: Final[Turn] = Turn(radians=RADIANS_PER_ROTATION)

# 1/(2π) оборота против часовой
ONE_RADIAN_COUNTER_CLOCKWISE: Final[Turn] = Turn(radians=1.0)

# 1/360 оборота против часовой
ONE_DEGREE_COUNTER_CLOCKWISE: Final[Turn] = Turn(
    radians=RADIANS_PER_ROTATION / DEGREES_PER_ROTATION
)

# 1/400 оборота против часовой
ONE_GRADIAN_COUNTER_CLOCKWISE: Final[Turn] = Turn(
    radians=RADIANS_PER_ROTATION / GRADIANS_PER_ROTATION
)

ONE_TURN_CLOCKWISE: Final[Turn] = -ONE_TURN_COUNTER_CLOCKWISE
ONE_RADIAN_CLOCKWISE: Final[Turn] = -ONE_RADIAN_COUNTER_CLOCKWISE
ONE_DEGREE_CLOCKWISE: Final[Turn] = -ONE_DEGREE_COUNTER_CLOCKWISE
ONE_GRADIAN_CLOCKWISE: Final[Turn] = -ONE_GRADIAN_COUNTER_CLOCKWISE
