"""
Core math modules для machin-pi

Примитивы 64-битных limb и эмуляция 128-битного аккумулятора.
"""

from src.core.math.limb_arithmetic import (
    # Limb constants
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MASK,
    # Accumulator constants
    ACCUMULATOR_BITS,
    ACCUMULATOR_MAX,
    MAX_DIVISOR,
    # Accumulator operations
    complement_limb,
    fits_accumulator,
    split_accumulator,
    # Validation
    validate_divisor,
    validate_limb,
    validate_precision,
)

__all__ = [
    # Limb Arithmetic — Limb constants
    "LIMB_BASE",
    "LIMB_BITS",
    "LIMB_MASK",
    # Limb Arithmetic — Accumulator constants
    "ACCUMULATOR_BITS",
    "ACCUMULATOR_MAX",
    "MAX_DIVISOR",
    # Limb Arithmetic — Accumulator operations
    "complement_limb",
    "fits_accumulator",
    "split_accumulator",
    # Limb Arithmetic — Validation
    "validate_divisor",
    "validate_limb",
    "validate_precision",
]
