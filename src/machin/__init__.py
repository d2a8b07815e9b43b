"""
Machin driver: pi = 4 * (4*atan(1/5) - atan(1/239)) on fixed-point limbs.

Contains the run configuration, the driver, and the hex formatter.
"""

from src.machin.config import (
    DEFAULT_PRECISION_LIMBS,
    MACHIN_PRIMARY,
    MACHIN_SECONDARY,
    PiConfig,
)
from src.machin.formatting import format_hex_limbs, hex_fraction, pi_hex_string
from src.machin.pi_computation import PiComputationResult, compute_pi

__all__ = [
    # Config
    "DEFAULT_PRECISION_LIMBS",
    "MACHIN_PRIMARY",
    "MACHIN_SECONDARY",
    "PiConfig",
    # Driver
    "PiComputationResult",
    "compute_pi",
    # Formatting
    "format_hex_limbs",
    "hex_fraction",
    "pi_hex_string",
]
