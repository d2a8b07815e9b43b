"""
PiConfig — конфигурация вычисления pi по формуле Machin

Immutable Pydantic модель. Точность и знаменатели формулы задаются
здесь, а не в арифметическом ядре.

    pi = 4 * (4 * atan(1/primary) - atan(1/secondary))
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.series.arctan import MAX_ARCTAN_ARGUMENT, MIN_ARCTAN_ARGUMENT


# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Количество 64-битных limb результата
DEFAULT_PRECISION_LIMBS: Final[int] = 10000

# Знаменатели формулы Machin: pi/4 = 4*atan(1/5) - atan(1/239)
MACHIN_PRIMARY: Final[int] = 5
MACHIN_SECONDARY: Final[int] = 239


# =============================================================================
# CONFIG
# =============================================================================


class PiConfig(BaseModel):
    """
    Конфигурация вычисления pi.

    zero_skip=False переключает все операции на простой O(N) path
    (результат побитово совпадает с fast path).
    """

    precision_limbs: int = Field(
        DEFAULT_PRECISION_LIMBS, ge=1, description="Количество limb результата"
    )
    primary_denominator: int = Field(
        MACHIN_PRIMARY,
        ge=MIN_ARCTAN_ARGUMENT,
        le=MAX_ARCTAN_ARGUMENT,
        description="Знаменатель ряда с множителем 4",
    )
    secondary_denominator: int = Field(
        MACHIN_SECONDARY,
        ge=MIN_ARCTAN_ARGUMENT,
        le=MAX_ARCTAN_ARGUMENT,
        description="Знаменатель вычитаемого ряда",
    )
    zero_skip: bool = Field(True, description="Пропуск ведущих нулевых limb")
    strict_subtraction: bool = Field(
        False, description="Проверять предусловие self >= rhs при вычитании"
    )

    model_config = {"frozen": True}

    @field_validator("secondary_denominator")
    @classmethod
    def validate_secondary_larger(cls, v: int, info) -> int:
        """Проверка порядка знаменателей: secondary > primary"""
        if "primary_denominator" in info.data:
            primary = info.data["primary_denominator"]
            if v <= primary:
                raise ValueError(
                    f"secondary_denominator {v} must be greater than "
                    f"primary_denominator {primary}"
                )
        return v
