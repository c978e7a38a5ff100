"""
Domain models and value objects.

Contains the numeric input style and its range.
"""

from src.core.domain.numeric_style import (
    DEFAULT_STYLE,
    KeyboardKind,
    NumericRange,
    NumericStyle,
)

__all__ = [
    "DEFAULT_STYLE",
    "KeyboardKind",
    "NumericRange",
    "NumericStyle",
]
