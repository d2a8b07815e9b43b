"""
Series evaluators built on the fixed-point core.

Contains the alternating arctangent series used by the Machin driver.
"""

from src.series.arctan import (
    MAX_ARCTAN_ARGUMENT,
    MIN_ARCTAN_ARGUMENT,
    ArctanSeriesResult,
    ataninv,
    evaluate_arctan_series,
)

__all__ = [
    # Constants
    "MAX_ARCTAN_ARGUMENT",
    "MIN_ARCTAN_ARGUMENT",
    # Types
    "ArctanSeriesResult",
    # Functions
    "ataninv",
    "evaluate_arctan_series",
]
