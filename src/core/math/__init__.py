"""
Core math modules для planar-angle

Математические примитивы для угловой арифметики с гарантией стабильности.
"""

from src.core.math.numerical_safeguards import (
    # Exceptions
    AngleDomainError,
    # NaN/Inf guards
    is_valid_float,
    require_finite,
    validate_positive,
    # Modular reduction
    centered_mod,
    proper_mod,
    sign,
)

__all__ = [
    # Numerical Safeguards: Exceptions
    "AngleDomainError",
    # Numerical Safeguards: NaN/Inf guards
    "is_valid_float",
    "require_finite",
    "validate_positive",
    # Numerical Safeguards: Modular reduction
    "centered_mod",
    "proper_mod",
    "sign",
]
