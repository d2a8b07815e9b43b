"""
Тесты для точки входа python -m src.machin
"""

import pytest

from src.machin.__main__ import config_from_args, main
from src.machin.config import DEFAULT_PRECISION_LIMBS


class TestConfigFromArgs:
    """Тесты разбора аргументов"""

    def test_default_precision(self) -> None:
        """Без аргументов — точность по умолчанию"""
        assert config_from_args(["machin"]).precision_limbs == DEFAULT_PRECISION_LIMBS

    def test_explicit_precision(self) -> None:
        """Первый аргумент задаёт precision_limbs"""
        assert config_from_args(["machin", "64"]).precision_limbs == 64

    @pytest.mark.parametrize(
        "args, message",
        [
            (["abc"], "must be an integer"),
            (["0"], "invalid precision_limbs 0"),
            (["4", "8"], "at most one argument"),
        ],
    )
    def test_invalid_arguments(self, args: list[str], message: str) -> None:
        """Некорректные аргументы — ValueError"""
        with pytest.raises(ValueError, match=message):
            config_from_args(["machin", *args])


class TestMain:
    """Тесты main"""

    def test_prints_hex_limbs(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Малая точность: limb pi печатаются в stdout"""
        assert main(["machin", "4"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("243f6a8885a308d3 13198a2e03707344 ")
        assert len(out.split()) == 4

    def test_usage_on_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Ошибка аргументов: код 1 и usage в stderr"""
        assert main(["machin", "-3"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Usage: machin [precision_limbs]" in captured.err
