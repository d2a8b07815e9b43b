"""
LimbVector — хранилище фиксированной длины из беззнаковых 64-битных limb

Индекс 0 — старший limb. Никакой арифметической семантики: только
хранение, заполнение нулями, копирование и перевод в/из
масштабированного целого Σ limb[i] * B^(N-1-i).
"""

from typing import Iterable, Iterator

from src.core.math.limb_arithmetic import (
    LIMB_BITS,
    LIMB_MASK,
    validate_limb,
    validate_precision,
)


class LimbVector:
    """
    Последовательность N limb, старший limb первым.

    Хранится как list[int]; внутренние циклы арифметики работают
    со списком напрямую через `limbs`.
    """

    __slots__ = ("limbs",)

    def __init__(self, length: int):
        validate_precision(length, "length")
        self.limbs: list[int] = [0] * length

    @classmethod
    def from_limbs(cls, limbs: Iterable[int]) -> "LimbVector":
        """
        Создание вектора из готовых limb.

        Raises:
            ValueError: Если вектор пустой или limb вне [0, 2^64)
        """
        values = list(limbs)
        vector = cls(len(values))
        for i, value in enumerate(values):
            validate_limb(value, f"limbs[{i}]")
        vector.limbs = values
        return vector

    @classmethod
    def from_int(cls, value: int, length: int) -> "LimbVector":
        """
        Создание вектора из масштабированного целого.

        Args:
            value: Целое в [0, B^length)
            length: Количество limb

        Raises:
            ValueError: Если value не помещается в length limb
        """
        vector = cls(length)
        if value < 0 or value >> (LIMB_BITS * length):
            raise ValueError(
                f"value does not fit into {length} limbs of {LIMB_BITS} bits"
            )
        for i in range(length - 1, -1, -1):
            vector.limbs[i] = value & LIMB_MASK
            value >>= LIMB_BITS
        return vector

    def to_int(self) -> int:
        """Масштабированное целое Σ limb[i] * B^(N-1-i)."""
        value = 0
        for limb in self.limbs:
            value = (value << LIMB_BITS) | limb
        return value

    def fill_zero(self, start: int = 0, stop: int | None = None) -> None:
        """Обнуление limb в диапазоне [start, stop)."""
        if stop is None:
            stop = len(self.limbs)
        if start < stop:
            self.limbs[start:stop] = [0] * (stop - start)

    def first_nonzero(self, start: int = 0) -> int:
        """
        Индекс первого ненулевого limb начиная со start.

        Returns:
            Индекс или len(self), если все limb в [start, N) нулевые
        """
        limbs = self.limbs
        for i in range(start, len(limbs)):
            if limbs[i]:
                return i
        return len(limbs)

    def copy(self) -> "LimbVector":
        clone = LimbVector.__new__(LimbVector)
        clone.limbs = self.limbs[:]
        return clone

    def __len__(self) -> int:
        return len(self.limbs)

    def __getitem__(self, index: int) -> int:
        return self.limbs[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.limbs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LimbVector):
            return NotImplemented
        return self.limbs == other.limbs

    def __repr__(self) -> str:
        return f"LimbVector(length={len(self.limbs)})"
