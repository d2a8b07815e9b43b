"""
Тесты для модуля Limb Arithmetic

Проверяет:
1. Константы limb и аккумулятора
2. Разбиение аккумулятора на (limb, carry)
3. Побитовое дополнение limb
4. Валидацию limb, делителей и точности
"""

import pytest

from src.core.math.limb_arithmetic import (
    ACCUMULATOR_BITS,
    ACCUMULATOR_MAX,
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MASK,
    MAX_DIVISOR,
    complement_limb,
    fits_accumulator,
    split_accumulator,
    validate_divisor,
    validate_limb,
    validate_precision,
)


class TestConstants:
    """Тесты констант"""

    def test_limb_constants(self) -> None:
        """Limb: 64 бита, основание 2^64"""
        assert LIMB_BITS == 64
        assert LIMB_BASE == 2**64
        assert LIMB_MASK == 0xFFFF_FFFF_FFFF_FFFF

    def test_accumulator_is_double_width(self) -> None:
        """Аккумулятор вдвое шире limb"""
        assert ACCUMULATOR_BITS == 128
        assert ACCUMULATOR_MAX == 2**128 - 1

    def test_max_divisor_keeps_long_division_in_accumulator(self) -> None:
        """Худший случай (d-1)*B + (B-1) помещается в аккумулятор"""
        worst = (MAX_DIVISOR - 1) * LIMB_BASE + LIMB_MASK
        assert worst == ACCUMULATOR_MAX
        assert fits_accumulator(worst)
        assert not fits_accumulator(worst + 1)


class TestSplitAccumulator:
    """Тесты для split_accumulator"""

    def test_no_carry(self) -> None:
        """Значение меньше B: перенос 0"""
        assert split_accumulator(12345) == (12345, 0)

    def test_carry(self) -> None:
        """Значение >= B: младший limb и перенос"""
        assert split_accumulator(3 * LIMB_BASE + 7) == (7, 3)

    def test_max_sum_of_two_limbs_and_carry(self) -> None:
        """carry + MASK + MASK даёт перенос 1"""
        low, carry = split_accumulator(1 + LIMB_MASK + LIMB_MASK)
        assert low == LIMB_MASK
        assert carry == 1


class TestComplementLimb:
    """Тесты для complement_limb"""

    def test_zero_and_mask(self) -> None:
        """~0 == MASK, ~MASK == 0"""
        assert complement_limb(0) == LIMB_MASK
        assert complement_limb(LIMB_MASK) == 0

    def test_limb_plus_complement_is_mask(self) -> None:
        """limb + ~limb == MASK"""
        for limb in (1, 0x1234_5678_9ABC_DEF0, LIMB_MASK - 1):
            assert limb + complement_limb(limb) == LIMB_MASK


class TestValidation:
    """Тесты валидации"""

    def test_valid_limbs(self) -> None:
        """Границы диапазона limb допустимы"""
        validate_limb(0)
        validate_limb(LIMB_MASK)

    @pytest.mark.parametrize("value", [-1, LIMB_BASE])
    def test_limb_out_of_range_raises(self, value: int) -> None:
        """Limb вне [0, 2^64) вызывает ошибку"""
        with pytest.raises(ValueError, match="must be in"):
            validate_limb(value)

    @pytest.mark.parametrize("value", [1.0, "1", True])
    def test_limb_wrong_type_raises(self, value) -> None:
        """Не-int limb вызывает ошибку"""
        with pytest.raises(ValueError, match="must be an int"):
            validate_limb(value)

    def test_valid_divisors(self) -> None:
        """Делители 1..MAX_DIVISOR допустимы"""
        validate_divisor(1)
        validate_divisor(25)
        validate_divisor(239 * 239)
        validate_divisor(MAX_DIVISOR)

    def test_zero_divisor_raises(self) -> None:
        """Деление на ноль запрещено"""
        with pytest.raises(ValueError, match="must be positive"):
            validate_divisor(0)

    def test_divisor_exceeding_accumulator_raises(self) -> None:
        """Делитель шире аккумулятора запрещён"""
        with pytest.raises(ValueError, match="exceeds accumulator width"):
            validate_divisor(MAX_DIVISOR + 1)

    def test_precision(self) -> None:
        """Точность должна быть >= 1"""
        validate_precision(1)
        with pytest.raises(ValueError, match="at least 1 limb"):
            validate_precision(0)
