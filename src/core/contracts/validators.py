"""
JSON Schema Contract Validators

Модуль для валидации конфигурации числового поля согласно формальному
JSON Schema контракту и построения из неё Pydantic модели NumericStyle.
Использует библиотеку jsonschema для проверки соответствия данных схеме.

Схемы:
- numeric_style.json
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema
from jsonschema import Draft202012Validator

from src.core.domain.numeric_style import NumericStyle

log = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию ищет схемы в contracts/schema/ корня проекта.
    """

    DEFAULT_SCHEMA_DIR = Path(__file__).parents[3] / "contracts" / "schema"

    def __init__(self, schema_dir: Union[str, Path, None] = None):
        self._schema_dir = Path(schema_dir) if schema_dir is not None else self.DEFAULT_SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'numeric_style')

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
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        log.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class NumericStyleValidator:
    """
    Валидатор конфигурации числового поля против numeric_style.json.

    Проверяет структуру и типы; семантику (порядок границ диапазона,
    конечность) проверяет уже Pydantic модель NumericStyle.
    """

    SCHEMA_NAME = "numeric_style"

    def __init__(self):
        self.schema = _SCHEMA_LOADER.load_schema(self.SCHEMA_NAME)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение контракта
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Все нарушения контракта, а не только первое."""
        return self.validator.iter_errors(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_numeric_style(data: Dict[str, Any]) -> None:
    """
    Валидация конфигурации numeric_style.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    NumericStyleValidator().validate(data)


def load_numeric_style(data: Dict[str, Any]) -> NumericStyle:
    """
    Построение NumericStyle из конфигурации.

    Сначала контракт (структура и типы), затем Pydantic модель
    (семантика: порядок границ диапазона, конечность границ).

    Args:
        data: Конфигурация стиля (dict)

    Returns:
        Immutable NumericStyle

    Raises:
        jsonschema.ValidationError: Нарушение контракта
        pydantic.ValidationError: Нарушение инвариантов модели
    """
    validate_numeric_style(data)
    return NumericStyle.model_validate(data)


def load_numeric_style_file(path: Union[str, Path]) -> NumericStyle:
    """
    Загрузка NumericStyle из JSON файла.

    Raises:
        FileNotFoundError: Если файл не найден
        json.JSONDecodeError: Если файл не является валидным JSON
        jsonschema.ValidationError: Нарушение контракта
        pydantic.ValidationError: Нарушение инвариантов модели
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    log.debug("Loading numeric style from %s", path)
    return load_numeric_style(data)
