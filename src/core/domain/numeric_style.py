"""
NumericStyle — Конфигурация допустимого числового ввода

Immutable Pydantic модель, описывающая, какие символы разрешены в числовом
поле ввода (цифры, десятичный разделитель, минус, экспонента), и
необязательный рекомендательный диапазон значений.

Диапазон НЕ применяется фильтром и реформаттером: во время набора поле может
содержать значения вне диапазона. Проверка и clamp — ответственность вызывающего
кода (см. NumericStyle.contains / NumericStyle.clamp).
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.math.numerical_safeguards import clamp, is_valid_float, is_within

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Символы, зарезервированные фильтром (не могут быть десятичным разделителем)
RESERVED_MARKS: Final[str] = "0123456789-+eE"


# =============================================================================
# ENUMS
# =============================================================================


class KeyboardKind(str, Enum):
    """Тип экранной клавиатуры для поля"""

    DECIMAL_PAD = "decimal_pad"
    NUMBER_PAD = "number_pad"


# =============================================================================
# NESTED MODELS
# =============================================================================


class NumericRange(BaseModel):
    """
    Рекомендательный диапазон значений поля.

    Любая граница может быть открытой (None). Границы включительные.
    """

    lower: float | None = Field(None, description="Нижняя граница (None — открытая)")
    upper: float | None = Field(None, description="Верхняя граница (None — открытая)")

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("lower", "upper")
    @classmethod
    def validate_finite(cls, v: float | None) -> float | None:
        """Границы должны быть конечными; бесконечность выражается через None"""
        if v is not None and not is_valid_float(v):
            raise ValueError(f"range bound must be finite, got {v}")
        return v

    @field_validator("upper")
    @classmethod
    def validate_upper_not_below_lower(cls, v: float | None, info) -> float | None:
        """Проверка, что upper >= lower, если обе границы заданы"""
        lower = info.data.get("lower")
        if v is not None and lower is not None and v < lower:
            raise ValueError(f"upper {v} must be >= lower {lower}")
        return v

    @property
    def bounds(self) -> tuple[float, float]:
        """
        Замкнутые границы, открытые стороны заменены на -inf / +inf.

        Returns:
            (lower, upper)
        """
        lower = self.lower if self.lower is not None else float("-inf")
        upper = self.upper if self.upper is not None else float("inf")
        return lower, upper

    def contains(self, value: float) -> bool:
        return is_within(value, self.lower, self.upper)

    def clamp(self, value: float) -> float:
        return clamp(value, self.lower, self.upper)


# =============================================================================
# STYLE MODEL
# =============================================================================


class NumericStyle(BaseModel):
    """
    Стиль числового ввода.

    Immutable модель (frozen=True). По умолчанию разрешено всё:
    десятичный разделитель, отрицательные числа, экспонента; диапазон не задан.

    Examples:
        >>> NumericStyle(allow_decimal_separator=False).keyboard
        <KeyboardKind.NUMBER_PAD: 'number_pad'>
        >>> NumericStyle(range=(0, None)).bounds
        (0.0, inf)
    """

    allow_decimal_separator: bool = Field(
        True, description="Разрешён один десятичный разделитель"
    )
    allow_negative: bool = Field(True, description="Разрешён один ведущий минус")
    allow_exponent: bool = Field(
        True, description="Разрешён один маркер экспоненты e/E (со знаком)"
    )
    range: NumericRange | None = Field(
        None, description="Рекомендательный диапазон (None — без ограничений)"
    )
    decimal_mark: str = Field(
        ".", min_length=1, max_length=1, description="Символ десятичного разделителя"
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("range", mode="before")
    @classmethod
    def coerce_range_pair(cls, v):
        """Пара (lower, upper) принимается как сокращённая запись диапазона"""
        if isinstance(v, (tuple, list)):
            if len(v) != 2:
                raise ValueError(f"range pair must have 2 items, got {len(v)}")
            return {"lower": v[0], "upper": v[1]}
        return v

    @field_validator("decimal_mark")
    @classmethod
    def validate_decimal_mark(cls, v: str) -> str:
        """Разделитель не может совпадать с цифрой, знаком или маркером экспоненты"""
        if v in RESERVED_MARKS:
            raise ValueError(f"decimal_mark {v!r} clashes with a reserved character")
        return v

    @property
    def bounds(self) -> tuple[float, float]:
        """Замкнутые границы диапазона; без диапазона — (-inf, +inf)"""
        if self.range is None:
            return float("-inf"), float("inf")
        return self.range.bounds

    @property
    def keyboard(self) -> KeyboardKind:
        """Клавиатура с точкой, если дробные числа разрешены"""
        if self.allow_decimal_separator:
            return KeyboardKind.DECIMAL_PAD
        return KeyboardKind.NUMBER_PAD

    def contains(self, value: float) -> bool:
        """
        Проверка, что значение лежит в рекомендательном диапазоне.

        Args:
            value: Проверяемое значение

        Returns:
            True если диапазон не задан или значение в его пределах
        """
        if self.range is None:
            return is_within(value)
        return self.range.contains(value)

    def clamp(self, value: float) -> float:
        """
        Ограничение значения рекомендательным диапазоном.

        Фильтр и реформаттер этот метод не вызывают.
        """
        if self.range is None:
            return value
        return self.range.clamp(value)


DEFAULT_STYLE: Final[NumericStyle] = NumericStyle()
