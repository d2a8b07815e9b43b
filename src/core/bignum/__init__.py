"""
Fixed-point arithmetic on vectors of 64-bit limbs.

Contains the raw LimbVector storage and the FixedPointNumber value type
with its cached leading-zero-limb count.
"""

from src.core.bignum.errors import (
    FixedPointUnderflow,
    PrecisionMismatchError,
    ZeroCacheCorruption,
)
from src.core.bignum.fixed_point import FixedPointNumber
from src.core.bignum.limb_vector import LimbVector

__all__ = [
    # Storage
    "LimbVector",
    # Value type
    "FixedPointNumber",
    # Exceptions
    "FixedPointUnderflow",
    "PrecisionMismatchError",
    "ZeroCacheCorruption",
]
