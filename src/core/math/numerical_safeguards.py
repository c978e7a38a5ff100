"""
Numerical Safeguards — Safe Math Primitives

Примитивы для безопасной работы с float в числовом поле ввода:
- Проверка конечности (NaN/Inf никогда не попадают в отображаемый текст)
- Ограничение значения диапазоном с открытыми границами
- Проверка принадлежности диапазону

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не пропагируют в форматирование
2. Открытая граница (None) означает отсутствие ограничения с этой стороны
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math

# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf

    Examples:
        >>> is_valid_float(1e308)
        True
        >>> is_valid_float(float("1e400"))
        False
    """
    return math.isfinite(value)


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (None — открытая граница)
        max_value: Максимальное допустимое значение (None — открытая граница)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0, None)
        0.0
        >>> clamp(15.0, None, 10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def is_within(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> bool:
    """
    Проверка принадлежности значения замкнутому диапазону.

    NaN не принадлежит никакому диапазону.

    Args:
        value: Проверяемое значение
        min_value: Нижняя граница включительно (None — открытая)
        max_value: Верхняя граница включительно (None — открытая)

    Returns:
        True если min_value <= value <= max_value
    """
    if math.isnan(value):
        return False

    if min_value is not None and value < min_value:
        return False

    if max_value is not None and value > max_value:
        return False

    return True
