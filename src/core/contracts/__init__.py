"""
Contract Validation Module

Модуль для валидации JSON конфигурации числового поля.
"""

from .validators import (
    NumericStyleValidator,
    SchemaLoader,
    load_numeric_style,
    load_numeric_style_file,
    validate_numeric_style,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "NumericStyleValidator",
    # Functions
    "validate_numeric_style",
    "load_numeric_style",
    "load_numeric_style_file",
]
