"""
PiComputation — pi по формуле Machin на fixed-point числах

    pi = 4 * (4 * atan(1/5) - atan(1/239))

Последовательность операций:
    x = ataninv(5); x.mul4(); x -= ataninv(239); x.mul4()

Первое умножение на 4 даёт 4*atan(1/5) ≈ 0.7896 < 1 (перенос 0).
Второе даёт pi ≈ 3.1416: целая часть 3 уходит в перенос за limb[0]
и отбрасывается из значения. Драйвер сохраняет её в результате, чтобы
граничное поведение было наблюдаемым.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.core.bignum.fixed_point import FixedPointNumber
from src.core.contracts.validators import validate_pi_result
from src.machin.config import PiConfig
from src.machin.formatting import hex_fraction, pi_hex_string
from src.series.arctan import ArctanSeriesResult, evaluate_arctan_series

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class PiComputationResult:
    """Результат вычисления pi."""

    # Дробная часть pi (целая часть отброшена mul4)
    value: FixedPointNumber
    # Перенос за limb[0] при финальном mul4 (для pi — 3)
    integer_part: int
    # Перенос при первом mul4 (для 4*atan(1/5) — 0)
    intermediate_carry: int

    # Диагностика рядов
    primary_series: ArctanSeriesResult
    secondary_series: ArctanSeriesResult

    config: PiConfig

    def hex_string(self) -> str:
        """pi в виде "3.243f6a88..."."""
        return pi_hex_string(self.integer_part, self.value)

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON-совместимый снапшот результата.

        Проверяется против контракта contracts/schema/pi_result.json.

        Raises:
            ValidationError: Если снапшот нарушает контракт
        """
        snapshot = {
            "schema_version": "1",
            "precision_limbs": self.config.precision_limbs,
            "integer_part": self.integer_part,
            "fraction_hex": hex_fraction(self.value),
            "leading_zero_limbs": self.value.zeros,
            "series": [
                _series_to_dict(self.primary_series, multiplier=4),
                _series_to_dict(self.secondary_series, multiplier=1),
            ],
            "zero_skip": self.config.zero_skip,
        }
        validate_pi_result(snapshot)
        return snapshot


def _series_to_dict(series: ArctanSeriesResult, multiplier: int) -> Dict[str, Any]:
    return {
        "denominator": series.x,
        "multiplier": multiplier,
        "final_denom": series.final_denom,
        "iterations": series.iterations,
    }


# =============================================================================
# DRIVER
# =============================================================================


def compute_pi(config: Optional[PiConfig] = None) -> PiComputationResult:
    """
    Вычисление pi по формуле Machin.

    Args:
        config: конфигурация (опционально, используется default)

    Returns:
        PiComputationResult с дробной частью pi и диагностикой
    """
    config = config or PiConfig()

    logger.info(
        "computing pi: precision=%d limbs, atan(1/%d), atan(1/%d), zero_skip=%s",
        config.precision_limbs,
        config.primary_denominator,
        config.secondary_denominator,
        config.zero_skip,
    )

    primary = evaluate_arctan_series(
        config.primary_denominator,
        config.precision_limbs,
        zero_skip=config.zero_skip,
        strict_subtraction=config.strict_subtraction,
    )
    x = primary.value.copy()
    intermediate_carry = x.mul4()

    secondary = evaluate_arctan_series(
        config.secondary_denominator,
        config.precision_limbs,
        zero_skip=config.zero_skip,
        strict_subtraction=config.strict_subtraction,
    )
    if config.strict_subtraction:
        x.checked_sub(secondary.value)
    else:
        x -= secondary.value

    integer_part = x.mul4()

    logger.info(
        "pi computed: integer_part=%d, final_denom(%d)=%d, final_denom(%d)=%d",
        integer_part,
        primary.x,
        primary.final_denom,
        secondary.x,
        secondary.final_denom,
    )

    return PiComputationResult(
        value=x,
        integer_part=integer_part,
        intermediate_carry=intermediate_carry,
        primary_series=primary,
        secondary_series=secondary,
        config=config,
    )
