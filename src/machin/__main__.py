"""
Запуск: python -m src.machin [precision_limbs]

Вычисляет pi и печатает hex-limb дробной части по 4 в строке.

Без аргумента используется точность PiConfig по умолчанию
(DEFAULT_PRECISION_LIMBS = 10000 limb). На этой ширине ряд atan(1/5)
требует около 69 000 итераций O(N) циклов на чистом Python, и расчёт
идёт очень долго. Для быстрой проверки передайте меньшую точность:

    python -m src.machin 64
"""

import logging
import sys

from pydantic import ValidationError

from src.machin.config import PiConfig
from src.machin.formatting import format_hex_limbs
from src.machin.pi_computation import compute_pi


def config_from_args(argv: list[str]) -> PiConfig:
    """
    PiConfig из аргументов командной строки.

    Raises:
        ValueError: Лишние аргументы, не целое число или точность < 1
    """
    args = argv[1:]
    if not args:
        return PiConfig()
    if len(args) > 1:
        raise ValueError(f"expected at most one argument, got {len(args)}")

    try:
        precision = int(args[0])
    except ValueError:
        raise ValueError(f"precision_limbs must be an integer, got {args[0]!r}")

    try:
        return PiConfig(precision_limbs=precision)
    except ValidationError as e:
        raise ValueError(
            f"invalid precision_limbs {precision}: {e.errors()[0]['msg']}"
        )


def main(argv: list[str]) -> int:
    try:
        config = config_from_args(argv)
    except ValueError as e:
        prog = argv[0] if argv else "python -m src.machin"
        sys.stderr.write(f"Error: {e}\n")
        sys.stderr.write(f"Usage: {prog} [precision_limbs]\n")
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    result = compute_pi(config)
    sys.stdout.write(format_hex_limbs(result.value))
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
