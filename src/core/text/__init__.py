"""
Text transforms for the numeric input field.

Filter (on every change) and reformatter (on editing boundaries).
"""

from src.core.text.numeric_filter import (
    DIGITS,
    EXPONENT_MARKER,
    EXPONENT_MARKERS,
    MINUS,
    filter_numeric_text,
)
from src.core.text.reformatter import (
    DECIMAL_STYLE_MAX_MAGNITUDE,
    DECIMAL_STYLE_MIN_MAGNITUDE,
    format_decimal,
    format_scientific,
    parse_number,
    reformat,
)

__all__ = [
    # Filter
    "DIGITS",
    "EXPONENT_MARKER",
    "EXPONENT_MARKERS",
    "MINUS",
    "filter_numeric_text",
    # Reformatter
    "DECIMAL_STYLE_MAX_MAGNITUDE",
    "DECIMAL_STYLE_MIN_MAGNITUDE",
    "format_decimal",
    "format_scientific",
    "parse_number",
    "reformat",
]
