"""
Display Config — параметры текстового представления угловых значений

Текстовое представление (str) не является контрактом совместимости:
гарантируется только, что оно непустое и отражает описанные величины.
"""

from dataclasses import dataclass


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class DisplayConfig:
    """Конфигурация текстового представления Turn/Direction/Basis/Range.

    Используется методами describe(); str() использует DEFAULT_DISPLAY_CONFIG.
    """

    # Количество знаков после запятой в str()
    decimals: int = 3

    # Толерантность распознавания известных единиц (Radians/Degrees/...)
    unit_match_tolerance: float = 1e-6

    def __post_init__(self) -> None:
        if self.decimals < 0:
            raise ValueError(f"decimals must be non-negative, got {self.decimals}")
        if self.unit_match_tolerance < 0:
            raise ValueError(
                f"unit_match_tolerance must be non-negative, got {self.unit_match_tolerance}"
            )

    def fmt(self, value: float) -> str:
        """Форматирование числа с обрезкой хвостовых нулей (1.500 → 1.5)"""
        text = f"{value:.{self.decimals}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        if text == "-0":
            text = "0"
        return text


DEFAULT_DISPLAY_CONFIG = DisplayConfig()
