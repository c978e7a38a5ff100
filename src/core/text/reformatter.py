"""
Numeric Reformatter — каноническое представление числа

Вызывается на границах сессии редактирования (появление поля, окончание
редактирования, commit). Парсит текст как double и выбирает представление
по величине:

- v == 0                   → "0"
- 1e-3 <= v < 1e5          → десятичная запись ("123", "0.5")
- v > 0 вне этого интервала → научная запись ("1.23456E5", "1E-4")
- -1e5 < v <= -1e-3        → десятичная запись ("-50")
- v < 0 вне этого интервала → текст возвращается без изменений

Нераспознанный текст возвращается без изменений.
"""

import logging
import re
from decimal import Decimal
from functools import lru_cache
from typing import Final

from src.core.math.numerical_safeguards import is_valid_float

log = logging.getLogger(__name__)

# =============================================================================
# ПОРОГИ ДЕСЯТИЧНОЙ ЗАПИСИ
# =============================================================================

# Минимальная величина для десятичной записи (включительно)
DECIMAL_STYLE_MIN_MAGNITUDE: Final[float] = 1e-3

# Максимальная величина для десятичной записи (не включительно)
DECIMAL_STYLE_MAX_MAGNITUDE: Final[float] = 1e5


# =============================================================================
# PARSING
# =============================================================================


@lru_cache(maxsize=None)
def _number_pattern(decimal_mark: str) -> re.Pattern[str]:
    mark = re.escape(decimal_mark)
    return re.compile(
        rf"[+-]?(?:[0-9]+(?:{mark}[0-9]*)?|{mark}[0-9]+)(?:[eE][+-]?[0-9]+)?"
    )


def parse_number(text: str, decimal_mark: str = ".") -> float | None:
    """
    Парсинг текста поля как double.

    Принимает необязательный знак, цифры с необязательным разделителем и
    необязательную экспоненту e/E со знаком. Окружающие пробелы игнорируются.

    Args:
        text: Текст поля
        decimal_mark: Символ десятичного разделителя

    Returns:
        Конечное значение float или None, если текст не число
        (включая переполнение до Inf)

    Examples:
        >>> parse_number("1.")
        1.0
        >>> parse_number("-2.5E-3")
        -0.0025
        >>> parse_number("1E") is None
        True
    """
    candidate = text.strip()
    if not _number_pattern(decimal_mark).fullmatch(candidate):
        return None

    value = float(candidate.replace(decimal_mark, "."))
    if not is_valid_float(value):
        return None
    return value


# =============================================================================
# RENDERING
# =============================================================================


def format_decimal(value: float, decimal_mark: str = ".") -> str:
    """
    Десятичная запись без группировки разрядов и без хвостового '.0'.

    Используется минимальное число цифр, достаточное для round-trip double.

    Examples:
        >>> format_decimal(123.0)
        '123'
        >>> format_decimal(-0.25)
        '-0.25'
    """
    if value == 0:
        return "0"
    text = f"{Decimal(repr(value)).normalize():f}"
    return text.replace(".", decimal_mark)


def format_scientific(value: float, decimal_mark: str = ".") -> str:
    """
    Научная запись: мантисса, маркер 'E', порядок со знаком.

    Examples:
        >>> format_scientific(123456.0)
        '1.23456E5'
        >>> format_scientific(0.0001)
        '1E-4'
    """
    dec = Decimal(repr(value)).normalize()
    sign, digits, _ = dec.as_tuple()

    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += decimal_mark + "".join(str(d) for d in digits[1:])

    prefix = "-" if sign else ""
    return f"{prefix}{mantissa}E{dec.adjusted()}"


# =============================================================================
# REFORMAT
# =============================================================================


def reformat(text: str, decimal_mark: str = ".", scientific: bool = True) -> str:
    """
    Приведение текста поля к каноническому представлению числа.

    Args:
        text: Текст поля (обычно уже отфильтрованный)
        decimal_mark: Символ десятичного разделителя
        scientific: Разрешена ли научная запись; без неё положительные
            значения вне интервала тоже выводятся десятичной записью

    Returns:
        Каноническая строка или исходный текст, если он не парсится;
        функция тотальна и не бросает исключений

    Examples:
        >>> reformat("0.0")
        '0'
        >>> reformat("123456")
        '1.23456E5'
        >>> reformat("-50")
        '-50'
        >>> reformat("abc")
        'abc'
        >>> reformat("123456", scientific=False)
        '123456'
    """
    value = parse_number(text, decimal_mark)
    if value is None:
        return text

    if value == 0:
        return "0"

    if value < 0:
        if -DECIMAL_STYLE_MAX_MAGNITUDE < value <= -DECIMAL_STYLE_MIN_MAGNITUDE:
            return format_decimal(value, decimal_mark)
        # KNOWN QUIRK: у отрицательных значений вне интервала нет научной записи,
        # в отличие от положительных. Не менять без подтверждения product owner.
        log.debug("Negative value %r outside decimal range, left as %r", value, text)
        return text

    if not scientific or DECIMAL_STYLE_MIN_MAGNITUDE <= value < DECIMAL_STYLE_MAX_MAGNITUDE:
        return format_decimal(value, decimal_mark)
    return format_scientific(value, decimal_mark)
