"""
Текстовое представление fixed-point чисел в шестнадцатеричном виде.
"""

from src.core.bignum.fixed_point import FixedPointNumber

# 16 hex-цифр на 64-битный limb
_LIMB_HEX_WIDTH = 16


def format_hex_limbs(number: FixedPointNumber, per_line: int = 4) -> str:
    """
    Limb числа группами по 16 hex-цифр.

    Каждый limb завершается пробелом, после каждых per_line limb —
    перевод строки.

    Raises:
        ValueError: Если per_line < 1
    """
    if per_line < 1:
        raise ValueError(f"per_line must be positive, got {per_line}")

    parts = []
    for i, limb in enumerate(number.digits):
        parts.append(f"{limb:0{_LIMB_HEX_WIDTH}x} ")
        if i % per_line == per_line - 1:
            parts.append("\n")
    return "".join(parts)


def hex_fraction(number: FixedPointNumber) -> str:
    """Дробная часть одной строкой hex-цифр, без разделителей."""
    return "".join(f"{limb:0{_LIMB_HEX_WIDTH}x}" for limb in number.digits)


def pi_hex_string(integer_part: int, number: FixedPointNumber) -> str:
    """
    Запись вида "3.243f6a88..." из целой части и дробных limb.

    Examples:
        >>> pi_hex_string(3, FixedPointNumber.from_limbs([0x243F6A8885A308D3]))
        '3.243f6a8885a308d3'
    """
    return f"{integer_part:x}.{hex_fraction(number)}"
