"""
Numeric Text Filter — санитизация текста числового поля

Вызывается на каждое изменение текста. Оставляет только символы, разрешённые
стилем, соблюдая порядок и кратность:
- цифры 0-9 сохраняются всегда
- не более одного десятичного разделителя, только в мантиссе
- не более одного знака мантиссы, всегда на позиции 0
- не более одного маркера экспоненты (выводится как 'E'), только после цифры
- знак экспоненты допустим только сразу после маркера; знак после
  отброшенного маркера отбрасывается вместе с ним

Промежуточные состояния набора ('-', '.', '1.', '1E', '1E-') сохраняются,
даже если они не парсятся как число.

Диапазон стиля здесь не применяется.
"""

from typing import Final

from src.core.domain.numeric_style import DEFAULT_STYLE, NumericStyle

# =============================================================================
# СИМВОЛЫ
# =============================================================================

DIGITS: Final[str] = "0123456789"
MINUS: Final[str] = "-"
EXPONENT_MARKERS: Final[str] = "eE"
EXPONENT_MARKER: Final[str] = "E"


# =============================================================================
# FILTER
# =============================================================================


def filter_numeric_text(text: str, style: NumericStyle = DEFAULT_STYLE) -> str:
    """
    Удаление из текста всех символов, недопустимых для стиля.

    Сканирование слева направо. Минус, встреченный в мантиссе, переносится
    на позицию 0 (набор '5-' даёт '-5'); повторные знаки, разделители и
    маркеры отбрасываются молча.

    Args:
        text: Произвольная строка (в том числе пустая или мусорная)
        style: Стиль числового ввода

    Returns:
        Санитизированная строка; функция тотальна и не бросает исключений

    Examples:
        >>> filter_numeric_text("1-2-3")
        '-123'
        >>> filter_numeric_text("1.2.3")
        '1.23'
        >>> filter_numeric_text("1.5e-3x")
        '1.5E-3'
        >>> filter_numeric_text("1e5", NumericStyle(allow_exponent=False))
        '15'
    """
    mantissa: list[str] = []
    exponent: list[str] = []

    has_sign = False
    has_decimal = False
    has_digit = False
    in_exponent = False
    marker_rejected = False

    for ch in text:
        # Знак сразу после отброшенного маркера принадлежал экспоненте
        after_rejected_marker, marker_rejected = marker_rejected, False

        if ch in DIGITS:
            if in_exponent:
                exponent.append(ch)
            else:
                mantissa.append(ch)
                has_digit = True
        elif ch == MINUS:
            if not style.allow_negative or after_rejected_marker:
                continue
            if in_exponent:
                # Знак экспоненты считается отдельно от знака мантиссы:
                # не более одного, только сразу после маркера
                if not exponent:
                    exponent.append(ch)
            elif not has_sign:
                has_sign = True
        elif ch == style.decimal_mark:
            if style.allow_decimal_separator and not in_exponent and not has_decimal:
                has_decimal = True
                mantissa.append(ch)
        elif ch in EXPONENT_MARKERS:
            if style.allow_exponent and has_digit and not in_exponent:
                in_exponent = True
            else:
                marker_rejected = True

    result = "".join(mantissa)
    if has_sign:
        result = MINUS + result
    if in_exponent:
        result += EXPONENT_MARKER + "".join(exponent)
    return result
