"""
Limb Arithmetic — примитивы 64-битных limb и 128-битного аккумулятора

Модуль задаёт единицы представления fixed-point чисел и эмулирует
двойную ширину (128 бит) поверх неограниченных Python int:
- Константы limb: ширина, основание B = 2^64, маска
- Аккумулятор двойной ширины: разбиение на (limb, carry)
- Побитовое дополнение limb для two's-complement вычитания
- Валидация делителей, limb и точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый limb лежит в [0, LIMB_BASE)
2. Промежуточное значение rem * B + limb никогда не превышает ACCUMULATOR_MAX
3. Делитель d удовлетворяет 1 <= d и d * B <= ACCUMULATOR_MAX + 1
4. Все операции детерминированы и воспроизводимы
"""

from typing import Final

# =============================================================================
# ПАРАМЕТРЫ LIMB
# =============================================================================

# Ширина одного limb в битах
LIMB_BITS: Final[int] = 64

# Основание позиционной системы B = 2^64
LIMB_BASE: Final[int] = 1 << LIMB_BITS

# Маска усечения до ширины limb
LIMB_MASK: Final[int] = LIMB_BASE - 1

# =============================================================================
# ПАРАМЕТРЫ АККУМУЛЯТОРА
# =============================================================================

# Ширина аккумулятора (double-width, как unsigned __int128)
ACCUMULATOR_BITS: Final[int] = 2 * LIMB_BITS

# Максимальное значение аккумулятора
ACCUMULATOR_MAX: Final[int] = (1 << ACCUMULATOR_BITS) - 1

# Максимальный делитель: остаток rem < d должен давать rem * B + limb <= ACCUMULATOR_MAX
MAX_DIVISOR: Final[int] = ACCUMULATOR_MAX // LIMB_BASE + 1


# =============================================================================
# ОПЕРАЦИИ НАД АККУМУЛЯТОРОМ
# =============================================================================


def split_accumulator(acc: int) -> tuple[int, int]:
    """
    Разбиение аккумулятора на младший limb и перенос.

    Эквивалент пары `limb = (uint64)acc; carry = acc >> 64`.

    Args:
        acc: Значение аккумулятора (>= 0)

    Returns:
        (low, carry): младшие LIMB_BITS бит и старшая часть

    Examples:
        >>> split_accumulator(5)
        (5, 0)
        >>> split_accumulator((1 << 64) + 7)
        (7, 1)
    """
    return acc & LIMB_MASK, acc >> LIMB_BITS


def complement_limb(limb: int) -> int:
    """
    Побитовое дополнение limb (~limb в пределах LIMB_BITS).

    Examples:
        >>> complement_limb(0) == LIMB_MASK
        True
        >>> complement_limb(LIMB_MASK)
        0
    """
    return ~limb & LIMB_MASK


def fits_accumulator(value: int) -> bool:
    """Проверка, что значение помещается в беззнаковый 128-битный аккумулятор."""
    return 0 <= value <= ACCUMULATOR_MAX


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_limb(value: int, name: str = "limb") -> None:
    """
    Валидация, что значение является корректным limb.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value не int или вне [0, LIMB_BASE)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")

    if not 0 <= value <= LIMB_MASK:
        raise ValueError(f"{name} must be in [0, 2^{LIMB_BITS}), got {value}")


def validate_divisor(value: int, name: str = "divisor") -> None:
    """
    Валидация делителя для long division по limb.

    Делитель должен быть положительным и достаточно малым, чтобы
    rem * B + limb (rem < d) не выходил за ACCUMULATOR_MAX.

    Args:
        value: Проверяемый делитель
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если делитель не int, < 1 или > MAX_DIVISOR
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")

    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}")

    # Худший шаг long division: (d - 1) * B + (B - 1)
    if not fits_accumulator((value - 1) * LIMB_BASE + LIMB_MASK):
        raise ValueError(
            f"{name} {value} exceeds accumulator width "
            f"(max {MAX_DIVISOR} for {ACCUMULATOR_BITS}-bit accumulator)"
        )


def validate_precision(value: int, name: str = "precision") -> None:
    """
    Валидация точности (количество limb).

    Raises:
        ValueError: Если value не int или < 1
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")

    if value < 1:
        raise ValueError(f"{name} must be at least 1 limb, got {value}")
