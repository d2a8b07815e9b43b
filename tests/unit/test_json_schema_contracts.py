"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидатора снапшота pi_result:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов и constraints
- Согласованность длины fraction_hex с precision_limbs
"""

import copy
from pathlib import Path

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    PiResultValidator,
    SchemaLoader,
    validate_pi_result,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_pi_result():
    """Валидный pi_result для тестирования (2 limb)."""
    return {
        "schema_version": "1",
        "precision_limbs": 2,
        "integer_part": 3,
        "fraction_hex": "243f6a8885a308d313198a2e03707344",
        "leading_zero_limbs": 0,
        "series": [
            {"denominator": 5, "multiplier": 4, "final_denom": 29, "iterations": 7},
            {"denominator": 239, "multiplier": 1, "final_denom": 9, "iterations": 2},
        ],
        "zero_skip": True,
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    def test_loads_and_caches(self) -> None:
        """Схема загружается и кэшируется"""
        loader = SchemaLoader()
        schema = loader.load_schema("pi_result")
        assert schema["title"] == "pi_result"
        assert loader.load_schema("pi_result") is schema

    def test_missing_schema(self) -> None:
        """Несуществующая схема — FileNotFoundError"""
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Несуществующая директория — RuntimeError"""
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "missing")

    def test_invalid_schema_rejected(self, tmp_path: Path) -> None:
        """Схема, не прошедшая meta-валидацию, отклоняется"""
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# PI_RESULT CONTRACT
# =============================================================================


class TestPiResultContract:
    """Тесты контракта pi_result"""

    def test_valid_data(self, valid_pi_result) -> None:
        """Валидный снапшот проходит проверку"""
        validate_pi_result(valid_pi_result)
        assert PiResultValidator().is_valid(valid_pi_result)

    @pytest.mark.parametrize(
        "field",
        ["schema_version", "precision_limbs", "integer_part", "fraction_hex", "series"],
    )
    def test_missing_required_field(self, valid_pi_result, field: str) -> None:
        """Отсутствие required поля обнаруживается"""
        data = copy.deepcopy(valid_pi_result)
        del data[field]
        with pytest.raises(ValidationError):
            validate_pi_result(data)

    def test_integer_part_out_of_range(self, valid_pi_result) -> None:
        """Перенос mul4 не превышает 3"""
        data = copy.deepcopy(valid_pi_result)
        data["integer_part"] = 4
        with pytest.raises(ValidationError):
            validate_pi_result(data)

    def test_uppercase_hex_rejected(self, valid_pi_result) -> None:
        """fraction_hex — только строчные hex-цифры"""
        data = copy.deepcopy(valid_pi_result)
        data["fraction_hex"] = data["fraction_hex"].upper()
        with pytest.raises(ValidationError):
            validate_pi_result(data)

    def test_hex_length_must_match_precision(self, valid_pi_result) -> None:
        """Длина fraction_hex равна 16 * precision_limbs"""
        data = copy.deepcopy(valid_pi_result)
        data["precision_limbs"] = 3
        with pytest.raises(ValidationError, match="expected 48"):
            validate_pi_result(data)
        assert not PiResultValidator().is_valid(data)

    def test_leading_zeros_bounded(self, valid_pi_result) -> None:
        """leading_zero_limbs <= precision_limbs"""
        data = copy.deepcopy(valid_pi_result)
        data["leading_zero_limbs"] = 5
        with pytest.raises(ValidationError, match="exceeds precision_limbs"):
            validate_pi_result(data)

    def test_invalid_multiplier(self, valid_pi_result) -> None:
        """Множитель ряда — 1 или 4"""
        data = copy.deepcopy(valid_pi_result)
        data["series"][0]["multiplier"] = 2
        with pytest.raises(ValidationError):
            validate_pi_result(data)

    def test_extra_field_rejected(self, valid_pi_result) -> None:
        """Дополнительные поля запрещены"""
        data = copy.deepcopy(valid_pi_result)
        data["digits"] = [1, 2]
        with pytest.raises(ValidationError):
            validate_pi_result(data)

    def test_iter_errors_reports_all(self, valid_pi_result) -> None:
        """iter_errors возвращает все нарушения схемы"""
        data = copy.deepcopy(valid_pi_result)
        data["integer_part"] = -1
        data["zero_skip"] = "yes"
        errors = list(PiResultValidator().iter_errors(data))
        assert len(errors) == 2
