"""
JSON Schema Contract Validators

Модуль для валидации JSON снапшотов результата согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы:
- pi_result.json (снапшот вычисления pi)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self, schema_dir: Path | None = None):
        # Корень проекта: 4 уровня вверх от этого файла
        self._schema_dir = schema_dir or (
            Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        )
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'pi_result')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class PiResultValidator(ContractValidator):
    """
    Валидатор для pi_result контракта.

    Помимо схемы проверяет согласованность полей: длина fraction_hex
    равна 16 * precision_limbs, leading_zero_limbs <= precision_limbs.
    """

    def __init__(self):
        super().__init__("pi_result")

    def validate(self, data: Dict[str, Any]) -> None:
        super().validate(data)

        precision = data["precision_limbs"]
        if len(data["fraction_hex"]) != 16 * precision:
            raise jsonschema.ValidationError(
                f"fraction_hex has {len(data['fraction_hex'])} hex digits, "
                f"expected {16 * precision} for {precision} limbs"
            )
        if data["leading_zero_limbs"] > precision:
            raise jsonschema.ValidationError(
                f"leading_zero_limbs {data['leading_zero_limbs']} exceeds "
                f"precision_limbs {precision}"
            )

    def is_valid(self, data: Dict[str, Any]) -> bool:
        try:
            self.validate(data)
        except jsonschema.ValidationError:
            return False
        return True


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_pi_result(data: Dict[str, Any]) -> None:
    """
    Валидация снапшота результата вычисления pi.

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    PiResultValidator().validate(data)
