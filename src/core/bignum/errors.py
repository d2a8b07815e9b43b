"""
Исключения fixed-point арифметики.

Переполнение в mul4 и wraparound в add/sub являются штатным усечением
и исключений не порождают. Исключения ниже фиксируют только нарушенные
контракты операций.
"""


class PrecisionMismatchError(ValueError):
    """
    Бинарная операция над числами разной точности (разное количество limb).
    """

    def __init__(self, left: int, right: int):
        self.left = left
        self.right = right
        super().__init__(
            f"precision mismatch: {left} limbs vs {right} limbs"
        )


class FixedPointUnderflow(Exception):
    """
    Checked-вычитание с уменьшаемым меньше вычитаемого.

    Представление не содержит отрицательных значений: без проверки
    результат молча заворачивается по модулю 1.
    """
    pass


class ZeroCacheCorruption(Exception):
    """
    Кэш leading-zero limb не совпадает с фактическим содержимым limb.
    """

    def __init__(self, cached: int, actual: int):
        self.cached = cached
        self.actual = actual
        super().__init__(
            f"leading-zero cache corrupted: cached={cached}, actual={actual}"
        )
