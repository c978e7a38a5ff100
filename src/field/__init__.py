"""Numeric field — контроллер связанного текста числового поля ввода.

- фильтр на каждое изменение текста
- реформат при появлении, окончании редактирования и commit
"""

from .text_field import (
    ChangeReason,
    NumericTextField,
    TextChange,
)

__all__ = [
    "ChangeReason",
    "NumericTextField",
    "TextChange",
]
