"""
Arctan Series — atan(1/x) знакочередующимся рядом на fixed-point числах

Ряд:
    atan(1/x) = 1/x - 1/(3x^3) + 1/(5x^5) - 1/(7x^7) + ...

Алгоритм (пара членов за итерацию):
    result = 1/x, term = 1/x, denom = 1, x2 = x*x
    пока term != 0:
        denom += 2; term /= x2; result -= term / denom
        denom += 2; term /= x2; result += term / denom

Критерий остановки детерминирован точностью: term делится на x2 >= 4
на каждом шаге и в конце концов обнуляется (zeros == N). Отдельного
допуска сходимости нет.
"""

import logging
from typing import Final, NamedTuple

from src.core.bignum.fixed_point import FixedPointNumber
from src.core.math.limb_arithmetic import LIMB_BITS, validate_divisor

logger = logging.getLogger(__name__)

# Минимальный аргумент: x2 = x*x >= 4, член ряда строго убывает
MIN_ARCTAN_ARGUMENT: Final[int] = 2

# Максимальный аргумент: x2 = x*x <= 2^64 (делитель long division)
MAX_ARCTAN_ARGUMENT: Final[int] = 1 << (LIMB_BITS // 2)


class ArctanSeriesResult(NamedTuple):
    """
    Результат суммирования ряда atan(1/x) с диагностикой.
    """
    value: FixedPointNumber  # Сумма ряда
    x: int  # Аргумент ряда (atan(1/x))
    final_denom: int  # Последний знаменатель (прокси количества членов)
    iterations: int  # Количество пар членов (вычитание + сложение)


def _validate_argument(x: int) -> None:
    if isinstance(x, bool) or not isinstance(x, int):
        raise ValueError(f"x must be an int, got {type(x).__name__}")

    if x < MIN_ARCTAN_ARGUMENT:
        raise ValueError(f"x must be >= {MIN_ARCTAN_ARGUMENT}, got {x}")

    # term /= x*x — делитель должен помещаться в аккумулятор
    validate_divisor(x * x, "x^2")


def evaluate_arctan_series(
    x: int,
    precision: int,
    zero_skip: bool = True,
    strict_subtraction: bool = False,
) -> ArctanSeriesResult:
    """
    Суммирование ряда atan(1/x) до исчерпания точности.

    Args:
        x: Целый аргумент (>= 2)
        precision: Количество limb N
        zero_skip: Zero-skip fast path для всех операций
        strict_subtraction: Проверять self >= rhs при каждом вычитании

    Returns:
        ArctanSeriesResult со значением и диагностикой

    Raises:
        ValueError: Если x < 2 или x*x превышает допустимый делитель
        FixedPointUnderflow: Только при strict_subtraction и нарушении
            предусловия вычитания
    """
    _validate_argument(x)

    result = FixedPointNumber.reciprocal(x, precision, zero_skip=zero_skip)
    term = result.copy()
    scratch = FixedPointNumber(precision, zero_skip=zero_skip)
    x2 = x * x
    denom = 1
    iterations = 0

    while not term.is_zero():
        denom += 2
        term /= x2
        scratch.set_to_div(term, denom)
        if strict_subtraction:
            result.checked_sub(scratch)
        else:
            result -= scratch

        denom += 2
        term /= x2
        scratch.set_to_div(term, denom)
        result += scratch

        iterations += 1

    logger.debug(
        "atan(1/%d) converged: precision=%d limbs, iterations=%d, final_denom=%d",
        x,
        precision,
        iterations,
        denom,
    )

    return ArctanSeriesResult(
        value=result,
        x=x,
        final_denom=denom,
        iterations=iterations,
    )


def ataninv(x: int, precision: int, zero_skip: bool = True) -> FixedPointNumber:
    """
    atan(1/x) с точностью N limb.

    Examples:
        >>> ataninv(5, precision=2).zeros
        0
    """
    return evaluate_arctan_series(x, precision, zero_skip=zero_skip).value
