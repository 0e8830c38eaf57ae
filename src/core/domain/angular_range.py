"""
Range — Непрерывная дуга направлений

Immutable Pydantic модель: дуга от start (сторона по часовой) на span
против часовой. span ∈ [0, 1 оборот]; больший span ограничивается полным
оборотом.

ВАЖНО: дуга в полный оборот покрывает все направления, но две такие дуги
равны только при совпадении start (они НЕ схлопываются в одно значение).
"""

import logging
from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.config import DEFAULT_DISPLAY_CONFIG, DisplayConfig
from src.core.domain.basis import Basis
from src.core.domain.direction import (
    ALONG_NEGATIVE_X,
    ALONG_NEGATIVE_Y,
    ALONG_POSITIVE_X,
    ALONG_POSITIVE_Y,
    Direction,
)
from src.core.domain.turn import ONE_TURN_COUNTER_CLOCKWISE, Turn

LOG = logging.getLogger(__name__)


# =============================================================================
# RANGE MODEL
# =============================================================================


class Range(BaseModel):
    """
    Дуга направлений [start, start + span] (обе границы включительно).

    Immutable модель (frozen=True). Равенство покомпонентное по (start, span).
    """

    start: Direction = Field(..., description="Сторона дуги по часовой (включительно)")
    span: Turn = Field(..., description="Поворот против часовой от start, в [0, 1 оборот]")

    model_config = {"frozen": True}

    @field_validator("span")
    @classmethod
    def clamp_span(cls, v: Turn) -> Turn:
        """Отрицательный span запрещён, больше полного оборота → полный оборот"""
        if v.is_clockwise:
            raise ValueError(f"span must not be clockwise, got {v.radians}")
        if v.is_more_counter_clockwise_than(ONE_TURN_COUNTER_CLOCKWISE):
            return ONE_TURN_COUNTER_CLOCKWISE
        return v

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def from_start_to_finish(
        cls, start: Direction, finish: Direction, move_clockwise: bool
    ) -> "Range":
        """
        Дуга, покрываемая вращением от start до finish.

        Направление вращения задаётся move_clockwise.
        """
        if move_clockwise:
            return cls.from_start_to_finish(finish, start, move_clockwise=False)
        return cls(start=start, span=(finish - start).smallest_counter_clockwise_equivalent())

    @classmethod
    def from_center_and_max_deviation(cls, center: Direction, max_deviation: Turn) -> "Range":
        """
        Направления, достижимые из center поворотом не более чем на max_deviation
        в любую сторону. Знак max_deviation не важен.
        """
        deviation = max_deviation.abs_counter_clockwise()
        return cls(start=center - deviation, span=deviation * 2)

    @classmethod
    def from_start_to_finish_increasing_in_basis(
        cls, start: Direction | float, finish: Direction | float, basis: Basis
    ) -> "Range":
        """
        Дуга от start до finish в положительном направлении базиса.

        start/finish — Direction или сырые углы в единицах базиса.
        """
        return cls.from_start_to_finish(
            _as_direction(start, basis),
            _as_direction(finish, basis),
            move_clockwise=basis.is_clockwise_positive,
        )

    @classmethod
    def from_start_to_finish_decreasing_in_basis(
        cls, start: Direction | float, finish: Direction | float, basis: Basis
    ) -> "Range":
        """
        Дуга от start до finish в отрицательном направлении базиса.

        start/finish — Direction или сырые углы в единицах базиса.
        """
        return cls.from_start_to_finish(
            _as_direction(start, basis),
            _as_direction(finish, basis),
            move_clockwise=not basis.is_clockwise_positive,
        )

    # -------------------------------------------------------------------------
    # Стороны и центр
    # -------------------------------------------------------------------------

    @property
    def clockwise_side(self) -> Direction:
        return self.start

    @property
    def counter_clockwise_side(self) -> Direction:
        return self.start + self.span

    @property
    def center(self) -> Direction:
        """Центр дуги: до обеих сторон равный абсолютный поворот"""
        return self.start + self.span / 2

    def side(self, clockwise_side: bool) -> Direction:
        return self.clockwise_side if clockwise_side else self.counter_clockwise_side

    # -------------------------------------------------------------------------
    # Запросы
    # -------------------------------------------------------------------------

    def contains(self, direction: Direction) -> bool:
        """Лежит ли направление в дуге (границы включительно)"""
        offset = (direction - self.start).smallest_counter_clockwise_equivalent()
        return not offset.is_more_counter_clockwise_than(self.span)

    def clamp(self, direction: Direction) -> Direction:
        """
        Принудительно внутрь дуги, с минимальным поворотом.

        Направление вне дуги заменяется ближайшей стороной (по той стороне
        от центра, где оно лежит).
        """
        offset = (direction - self.center).smallest_signed_equivalent()
        if not offset.is_more_rotation_than(self.span / 2):
            return direction

        clamped = self.side(offset.is_clockwise)
        LOG.debug("Clamped %s to %s", direction, clamped)
        return clamped

    def inverse(self) -> "Range":
        """Дополнительная дуга; граничные направления общие"""
        return Range(
            start=self.counter_clockwise_side,
            span=ONE_TURN_COUNTER_CLOCKWISE - self.span,
        )

    def is_close(self, other: "Range", tolerance: Turn) -> bool:
        """Покомпонентное равенство с толерантностью (start и span)"""
        return self.start.is_close(other.start, tolerance) and self.span.is_close(
            other.span, tolerance
        )

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, turn: object) -> "Range":
        if not isinstance(turn, Turn):
            return NotImplemented
        return Range(start=self.start + turn, span=self.span)

    def __sub__(self, turn: object) -> "Range":
        if not isinstance(turn, Turn):
            return NotImplemented
        return Range(start=self.start - turn, span=self.span)

    # -------------------------------------------------------------------------
    # Отображение
    # -------------------------------------------------------------------------

    def describe(self, config: DisplayConfig | None = None) -> str:
        config = config or DEFAULT_DISPLAY_CONFIG
        turns = abs(self.span / ONE_TURN_COUNTER_CLOCKWISE)
        return f"Span: {config.fmt(turns)} turns, Center: {self.center.describe(config)}"

    def __str__(self) -> str:
        return self.describe()


def _as_direction(value: Direction | float, basis: Basis) -> Direction:
    if isinstance(value, Direction):
        return value
    return basis.angle_to_dir(value)


# =============================================================================
# CONSTANTS
# =============================================================================

_HALF_TURN: Final[Turn] = ONE_TURN_COUNTER_CLOCKWISE * 0.5
_QUARTER_TURN: Final[Turn] = ONE_TURN_COUNTER_CLOCKWISE * 0.25

RANGE_ALL_DIRECTIONS: Final[Range] = Range(
    start=ALONG_POSITIVE_X, span=ONE_TURN_COUNTER_CLOCKWISE
)

# Полуплоскости
RANGE_POSITIVE_Y: Final[Range] = Range(start=ALONG_POSITIVE_X, span=_HALF_TURN)
RANGE_NEGATIVE_Y: Final[Range] = Range(start=ALONG_NEGATIVE_X, span=_HALF_TURN)
RANGE_POSITIVE_X: Final[Range] = Range(start=ALONG_NEGATIVE_Y, span=_HALF_TURN)
RANGE_NEGATIVE_X: Final[Range] = Range(start=ALONG_POSITIVE_Y, span=_HALF_TURN)

# Квадранты
RANGE_POSITIVE_X_POSITIVE_Y: Final[Range] = Range(start=ALONG_POSITIVE_X, span=_QUARTER_TURN)
RANGE_NEGATIVE_X_POSITIVE_Y: Final[Range] = Range(start=ALONG_POSITIVE_Y, span=_QUARTER_TURN)
RANGE_NEGATIVE_X_NEGATIVE_Y: Final[Range] = Range(start=ALONG_NEGATIVE_X, span=_QUARTER_TURN)
RANGE_POSITIVE_X_NEGATIVE_Y: Final[Range] = Range(start=ALONG_NEGATIVE_Y, span=_QUARTER_TURN)
