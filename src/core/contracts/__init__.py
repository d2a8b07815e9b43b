"""
Contract Validation Module

Модуль для валидации JSON контрактов результата вычисления.
"""

from .validators import (
    ContractValidator,
    PiResultValidator,
    SchemaLoader,
    validate_pi_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PiResultValidator",
    # Functions
    "validate_pi_result",
]
