"""
JSON Schema Contract Validators

Модуль для валидации JSON payload значений BigInt согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы:
- bigint_value.json (одно значение, десятичный текст)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from src.bigint.domain.bigint import BigInt

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self):
        # Корень проекта (4 уровня вверх от этого файла)
        self._schema_dir = Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'bigint_value')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

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

    Инкапсулирует логику валидации данных против JSON Schema.
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
        try:
            self.validator.validate(data)
        except jsonschema.ValidationError as e:
            logger.debug("%s payload rejected: %s", self.schema_name, e.message)
            raise

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class BigIntValueValidator(ContractValidator):
    """Валидатор для bigint_value контракта."""

    def __init__(self):
        super().__init__("bigint_value")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_bigint_value(data: Dict[str, Any]) -> None:
    """
    Валидация bigint_value payload.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BigIntValueValidator().validate(data)


def load_bigint_value(data: Dict[str, Any]) -> BigInt:
    """
    Валидация payload и построение значения.

    Raises:
        ValidationError: Если данные не соответствуют схеме
        InvalidFormat: Если текст прошёл схему, но не является целым
            (например, завершающий перевод строки)
    """
    validate_bigint_value(data)
    return BigInt(data["value"])


def dump_bigint_value(value: BigInt) -> Dict[str, Any]:
    """Payload для значения; результат проходит validate_bigint_value."""
    return {"schema_version": "1", "value": value.to_text()}
