"""
FixedPointNumber — fixed-point дробь в [0, 1) на векторе 64-битных limb

Значение: Σ limb[i] * B^-(i+1), B = 2^64, limb[0] — старший.

Кэш `zeros` (количество ведущих нулевых limb) поддерживается ТОЧНО
каждой мутирующей операцией через единый шаг нормализации
`recompute_zeros(start)`, где start — граница, известная из
предыдущего состояния. Операции используют кэш, чтобы пропускать
заведомо нулевые диапазоны limb (zero-skip fast path).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. limb[0:zeros] все нулевые
2. zeros == N (значение ровно 0) либо limb[zeros] != 0
3. Fast path и простой O(N) path дают побитово одинаковые limb
4. Перенос за limb[0] (целая часть) отбрасывается: mul4, +=, -=

Пример (Machin):
    >>> x = FixedPointNumber.reciprocal(5, precision=4)
    >>> x.is_zero()
    False
    >>> x.zeros
    0
"""

from fractions import Fraction

from src.core.bignum.errors import (
    FixedPointUnderflow,
    PrecisionMismatchError,
    ZeroCacheCorruption,
)
from src.core.bignum.limb_vector import LimbVector
from src.core.math.limb_arithmetic import (
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MASK,
    complement_limb,
    split_accumulator,
    validate_divisor,
)


class FixedPointNumber:
    """
    Беззнаковое fixed-point число с кэшем ведущих нулевых limb.

    Точность (количество limb N) задаётся при создании. Бинарные
    операции требуют одинаковой точности операндов.

    Args:
        precision: Количество limb N (>= 1)
        zero_skip: Использовать кэш zeros для пропуска нулевых limb
            (False — простой O(N) path, результат тот же)
    """

    __slots__ = ("_digits", "zeros", "zero_skip")

    def __init__(self, precision: int, zero_skip: bool = True):
        self._digits = LimbVector(precision)
        self.zeros = precision
        self.zero_skip = zero_skip

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def reciprocal(
        cls, x: int, precision: int, zero_skip: bool = True
    ) -> "FixedPointNumber":
        """Новое число, равное 1/x (см. set_inv)."""
        number = cls(precision, zero_skip=zero_skip)
        number.set_inv(x)
        return number

    @classmethod
    def from_limbs(cls, limbs, zero_skip: bool = True) -> "FixedPointNumber":
        """
        Новое число из готовых limb (старший первым).

        Raises:
            ValueError: Если limbs пустой или limb вне [0, 2^64)
        """
        vector = LimbVector.from_limbs(limbs)
        number = cls(len(vector), zero_skip=zero_skip)
        number._digits = vector
        number.recompute_zeros(0)
        return number

    @classmethod
    def from_fraction(
        cls, value: Fraction, precision: int, zero_skip: bool = True
    ) -> "FixedPointNumber":
        """
        Новое число из рациональной дроби с усечением вниз до N limb.

        Raises:
            ValueError: Если value вне [0, 1)
        """
        value = Fraction(value)
        if not 0 <= value < 1:
            raise ValueError(f"value must be in [0, 1), got {value}")

        scaled = value.numerator * (LIMB_BASE ** precision) // value.denominator
        number = cls(precision, zero_skip=zero_skip)
        number._digits = LimbVector.from_int(scaled, precision)
        number.recompute_zeros(0)
        return number

    def copy(self) -> "FixedPointNumber":
        """Независимая копия (limb не разделяются)."""
        clone = FixedPointNumber.__new__(FixedPointNumber)
        clone._digits = self._digits.copy()
        clone.zeros = self.zeros
        clone.zero_skip = self.zero_skip
        return clone

    # =========================================================================
    # ПРЕДСТАВЛЕНИЕ И КЭШ ZEROS
    # =========================================================================

    @property
    def precision(self) -> int:
        return len(self._digits)

    @property
    def digits(self) -> tuple[int, ...]:
        """Limb только для чтения, старший первым."""
        return tuple(self._digits.limbs)

    def set_zero(self) -> None:
        """Все limb в 0, zeros = N."""
        self._digits.fill_zero()
        self.zeros = self.precision

    def recompute_zeros(self, start: int = 0) -> None:
        """
        Нормализация кэша: поиск первого ненулевого limb начиная со start.

        Вызывающий гарантирует, что limb[0:start] нулевые.
        """
        self.zeros = self._digits.first_nonzero(start)

    def is_zero(self) -> bool:
        """O(1) проверка на ноль через кэш."""
        return self.zeros == self.precision

    def leading_zero_limbs(self) -> int:
        """Фактическое количество ведущих нулевых limb (O(N), без кэша)."""
        return self._digits.first_nonzero(0)

    def check_invariant(self) -> None:
        """
        Сверка кэша zeros с фактическим содержимым.

        Raises:
            ZeroCacheCorruption: Если кэш расходится с limb
        """
        actual = self.leading_zero_limbs()
        if self.zeros != actual:
            raise ZeroCacheCorruption(self.zeros, actual)

    def to_int(self) -> int:
        """Масштабированное целое: value * B^N."""
        return self._digits.to_int()

    def to_fraction(self) -> Fraction:
        """Точное рациональное значение Σ limb[i] * B^-(i+1)."""
        return Fraction(self._digits.to_int(), LIMB_BASE ** self.precision)

    def _require_same_precision(self, other: "FixedPointNumber") -> None:
        if self.precision != other.precision:
            raise PrecisionMismatchError(self.precision, other.precision)

    # =========================================================================
    # ИНИЦИАЛИЗАЦИЯ ОБРАТНЫМ ЗНАЧЕНИЕМ
    # =========================================================================

    def set_inv(self, x: int) -> None:
        """
        self = 1/x разложением long division по основанию B.

        rem = 1; для каждого limb: nom = rem * B, limb = nom / x,
        rem = nom % x. Периодический остаток продолжает разложение
        до последнего limb. Для x == 1 частное B усекается до 0
        (целая часть не хранится).

        Raises:
            ValueError: Если x < 1 или x * B не помещается в аккумулятор
        """
        validate_divisor(x, "x")

        limbs = self._digits.limbs
        rem = 1
        for i in range(len(limbs)):
            quotient, rem = divmod(rem << LIMB_BITS, x)
            limbs[i] = quotient & LIMB_MASK
        self.recompute_zeros(0)

    # =========================================================================
    # УМНОЖЕНИЕ НА 4
    # =========================================================================

    def mul4(self) -> int:
        """
        self = (4 * self) mod 1, in place.

        Проход от младшего limb к старшему с переносом двойной ширины.
        Перенос за limb[0] — целая часть результата — отбрасывается
        из значения и возвращается вызывающему.

        Returns:
            Отброшенная целая часть (0..3)
        """
        limbs = self._digits.limbs
        n = len(limbs)

        # Перенос может дойти не дальше limb zeros - 1
        stop = max(self.zeros - 1, 0) if self.zero_skip else 0

        carry = 0
        for i in range(n - 1, stop - 1, -1):
            limbs[i], carry = split_accumulator(carry + (limbs[i] << 2))

        self.recompute_zeros(stop)
        return carry

    # =========================================================================
    # ДЕЛЕНИЕ
    # =========================================================================

    def set_to_div(self, x: "FixedPointNumber", d: int) -> "FixedPointNumber":
        """
        self = x / d.

        Fast path: limb [self.zeros, x.zeros) обнуляются напрямую,
        long division идёт только по [x.zeros, N). Частное не может
        иметь меньше ведущих нулей, чем x, поэтому нормализация
        начинается с x.zeros.

        Raises:
            ValueError: Некорректный делитель
            PrecisionMismatchError: Разная точность self и x
        """
        self._require_same_precision(x)
        validate_divisor(d, "d")

        dst = self._digits.limbs
        src = x._digits.limbs
        n = len(dst)

        if self.zero_skip:
            start = x.zeros
            if self.zeros < start:
                self._digits.fill_zero(self.zeros, start)
        else:
            start = 0

        rem = 0
        for i in range(start, n):
            dst[i], rem = divmod((rem << LIMB_BITS) + src[i], d)

        self.recompute_zeros(start)
        return self

    def div_scalar(self, d: int) -> "FixedPointNumber":
        """
        self = self / d, in place, начиная с self.zeros.

        Raises:
            ValueError: Некорректный делитель
        """
        validate_divisor(d, "d")

        limbs = self._digits.limbs
        n = len(limbs)
        start = self.zeros if self.zero_skip else 0

        rem = 0
        for i in range(start, n):
            limbs[i], rem = divmod((rem << LIMB_BITS) + limbs[i], d)

        self.recompute_zeros(start)
        return self

    def __itruediv__(self, d: int) -> "FixedPointNumber":
        return self.div_scalar(d)

    # =========================================================================
    # СЛОЖЕНИЕ И ВЫЧИТАНИЕ
    # =========================================================================

    def __iadd__(self, rhs: "FixedPointNumber") -> "FixedPointNumber":
        """
        self += rhs (mod 1).

        Fast path: limb rhs ниже rhs.zeros нулевые, поэтому за ними
        идёт только распространение переноса по self. Перенос за
        limb[0] отбрасывается.
        """
        self._require_same_precision(rhs)

        dst = self._digits.limbs
        src = rhs._digits.limbs
        n = len(dst)
        carry = 0

        if not self.zero_skip:
            for i in range(n - 1, -1, -1):
                dst[i], carry = split_accumulator(carry + dst[i] + src[i])
            self.recompute_zeros(0)
            return self

        stop = rhs.zeros
        for i in range(n - 1, stop - 1, -1):
            dst[i], carry = split_accumulator(carry + dst[i] + src[i])

        i = stop - 1
        while carry and i >= 0:
            dst[i], carry = split_accumulator(dst[i] + 1)
            i -= 1

        # Перенос останавливается не выше limb min(zeros) - 1
        self.recompute_zeros(max(min(self.zeros, rhs.zeros) - 1, 0))
        return self

    def __isub__(self, rhs: "FixedPointNumber") -> "FixedPointNumber":
        """
        self -= rhs в дополнительном коде (mod 1).

        res = carry + limb + ~rhs_limb, +1 внесён как начальный carry.
        Fast path: как только i < rhs.zeros и carry == 1 (заём погашен),
        оставшиеся limb self не меняются и цикл завершается.

        Предусловие: self >= rhs. Нарушение даёт завернутый результат
        без ошибки; проверяемый вариант — checked_sub.
        """
        self._require_same_precision(rhs)

        dst = self._digits.limbs
        src = rhs._digits.limbs
        n = len(dst)
        carry = 1

        if not self.zero_skip:
            for i in range(n - 1, -1, -1):
                dst[i], carry = split_accumulator(
                    carry + dst[i] + complement_limb(src[i])
                )
            self.recompute_zeros(0)
            return self

        stop = rhs.zeros
        i = n - 1
        while i >= 0:
            if i < stop and carry == 1:
                break
            dst[i], carry = split_accumulator(
                carry + dst[i] + complement_limb(src[i])
            )
            i -= 1

        if i >= 0:
            # limb[0:i+1] не тронуты; limb i+1 мог обнулиться
            self.recompute_zeros(min(self.zeros, i + 1))
        else:
            self.recompute_zeros(0)
        return self

    def checked_sub(self, rhs: "FixedPointNumber") -> "FixedPointNumber":
        """
        self -= rhs с явной проверкой предусловия self >= rhs.

        Raises:
            FixedPointUnderflow: Если self < rhs (self не изменяется)
            PrecisionMismatchError: Разная точность операндов
        """
        self._require_same_precision(rhs)
        if self < rhs:
            raise FixedPointUnderflow(
                f"cannot subtract larger value: minuend has {self.zeros} "
                f"leading zero limbs, subtrahend has {rhs.zeros}"
            )
        self -= rhs
        return self

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def _compare(self, other: "FixedPointNumber") -> int:
        self._require_same_precision(other)

        # Больше ведущих нулей — меньше значение
        if self.zeros != other.zeros:
            return -1 if self.zeros > other.zeros else 1

        start = self.zeros
        left = self._digits.limbs
        right = other._digits.limbs
        for i in range(start, len(left)):
            if left[i] != right[i]:
                return -1 if left[i] < right[i] else 1
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedPointNumber):
            return NotImplemented
        if self.precision != other.precision:
            return False
        return self._digits == other._digits

    __hash__ = None

    def __lt__(self, other: "FixedPointNumber") -> bool:
        return self._compare(other) < 0

    def __le__(self, other: "FixedPointNumber") -> bool:
        return self._compare(other) <= 0

    def __gt__(self, other: "FixedPointNumber") -> bool:
        return self._compare(other) > 0

    def __ge__(self, other: "FixedPointNumber") -> bool:
        return self._compare(other) >= 0

    def __repr__(self) -> str:
        return (
            f"FixedPointNumber(precision={self.precision}, zeros={self.zeros})"
        )
