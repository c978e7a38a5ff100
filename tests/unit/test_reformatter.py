"""
Тесты для реформаттера текста числового поля

Проверяет:
1. Pass-through нераспознанного текста
2. Нормализацию нуля
3. Ветвление по величине (десятичная / научная запись)
4. Асимметрию отрицательных значений вне десятичного интервала
5. Парсинг и рендеринг (parse_number, format_decimal, format_scientific)
6. Согласованность с фильтром (hypothesis)
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from src.core.text import (
    filter_numeric_text,
    format_decimal,
    format_scientific,
    parse_number,
    reformat,
)

# =============================================================================
# PASS-THROUGH
# =============================================================================


class TestPassThrough:
    """Нераспознанный текст возвращается без изменений"""

    @pytest.mark.parametrize("text", ["", "abc", "-", ".", "-.", "1E", "1E-", "1.2.3", "inf", "nan"])
    def test_unparsable_unchanged(self, text: str) -> None:
        assert reformat(text) == text

    def test_overflow_unchanged(self) -> None:
        """Переполнение до Inf считается нераспознанным"""
        assert reformat("1E400") == "1E400"


# =============================================================================
# НОЛЬ
# =============================================================================


class TestZero:
    """Нормализация нуля"""

    @pytest.mark.parametrize("text", ["0", "0.0", "-0", "-0.000", "0E5", ".0", "1E-400"])
    def test_zero_normalized(self, text: str) -> None:
        assert reformat(text) == "0"


# =============================================================================
# ПОЛОЖИТЕЛЬНЫЕ
# =============================================================================


class TestPositive:
    """Положительные значения: десятичная запись в [1e-3, 1e5), иначе научная"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("123", "123"),
            ("123.0", "123"),
            ("1.", "1"),
            (".5", "0.5"),
            ("0.1", "0.1"),
            ("007", "7"),
            ("1.5E2", "150"),
            ("2e-3", "0.002"),
            ("0.001", "0.001"),
            ("99999", "99999"),
            ("99999.5", "99999.5"),
        ],
    )
    def test_decimal_style(self, text: str, expected: str) -> None:
        assert reformat(text) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("123456", "1.23456E5"),
            ("100000", "1E5"),
            ("0.0001", "1E-4"),
            ("0.00012", "1.2E-4"),
            ("0.000999", "9.99E-4"),
            ("1E20", "1E20"),
            ("5E-324", "5E-324"),
        ],
    )
    def test_scientific_style(self, text: str, expected: str) -> None:
        assert reformat(text) == expected

    def test_boundaries(self) -> None:
        """1e-3 включительно десятичная, 1e5 — уже научная"""
        assert reformat("1E-3") == "0.001"
        assert reformat("1E5") == "1E5"


# =============================================================================
# ОТРИЦАТЕЛЬНЫЕ
# =============================================================================


class TestNegative:
    """Отрицательные значения: десятичная запись в (-1e5, -1e-3], иначе без изменений"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("-50", "-50"),
            ("-50.0", "-50"),
            ("-0.001", "-0.001"),
            ("-99999.5", "-99999.5"),
            ("-1.5E2", "-150"),
        ],
    )
    def test_decimal_style(self, text: str, expected: str) -> None:
        assert reformat(text) == expected

    @pytest.mark.parametrize("text", ["-100000", "-123456", "-0.0001", "-1E9", "-1E-5"])
    def test_out_of_range_left_unchanged(self, text: str) -> None:
        """Известная асимметрия: научная запись только для положительных"""
        assert reformat(text) == text


# =============================================================================
# БЕЗ НАУЧНОЙ ЗАПИСИ
# =============================================================================


class TestScientificDisabled:
    """scientific=False: положительные значения вне интервала тоже десятичной записью"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("123456", "123456"),
            ("100000", "100000"),
            ("0.0001", "0.0001"),
            ("1E20", "100000000000000000000"),
            ("123", "123"),
            ("0.0", "0"),
        ],
    )
    def test_decimal_style_everywhere(self, text: str, expected: str) -> None:
        assert reformat(text, scientific=False) == expected

    def test_negative_asymmetry_unaffected(self) -> None:
        assert reformat("-123456", scientific=False) == "-123456"

    @given(st.floats(min_value=0, allow_nan=False, allow_infinity=False))
    def test_no_exponent_marker(self, x: float) -> None:
        out = reformat(filter_numeric_text(repr(x)), scientific=False)
        assert "E" not in out
        assert parse_number(out) == x


# =============================================================================
# DECIMAL MARK
# =============================================================================


class TestDecimalMark:
    """Нестандартный десятичный разделитель"""

    def test_comma_decimal_style(self) -> None:
        assert reformat("1,50", decimal_mark=",") == "1,5"
        assert reformat("-2,0", decimal_mark=",") == "-2"

    def test_comma_scientific_style(self) -> None:
        assert reformat("123456,7", decimal_mark=",") == "1,234567E5"

    def test_dot_is_not_a_number_with_comma_mark(self) -> None:
        assert reformat("1.5", decimal_mark=",") == "1.5"


# =============================================================================
# PARSING & RENDERING
# =============================================================================


class TestParseNumber:
    """Тесты для parse_number"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("12", 12.0),
            (" 12 ", 12.0),
            ("+5", 5.0),
            ("-2.5E-3", -0.0025),
            ("1.", 1.0),
            (".5", 0.5),
            ("1e3", 1000.0),
        ],
    )
    def test_numbers(self, text: str, expected: float) -> None:
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", ["", "-", ".", "1E", "e5", "1-2", "inf", "nan", "1E400", "١٢"])
    def test_not_numbers(self, text: str) -> None:
        assert parse_number(text) is None

    def test_custom_mark(self) -> None:
        assert parse_number("1,5", ",") == 1.5
        assert parse_number("1,5") is None


class TestFormatting:
    """Тесты для format_decimal / format_scientific"""

    def test_decimal_drops_trailing_zero_fraction(self) -> None:
        assert format_decimal(123.0) == "123"
        assert format_decimal(100.0) == "100"

    def test_decimal_shortest_round_trip(self) -> None:
        assert format_decimal(0.1) == "0.1"
        assert format_decimal(-0.25) == "-0.25"
        assert format_decimal(1 / 3) == "0.3333333333333333"

    def test_decimal_zero(self) -> None:
        assert format_decimal(0.0) == "0"
        assert format_decimal(-0.0) == "0"

    def test_decimal_no_grouping(self) -> None:
        assert format_decimal(12345.5) == "12345.5"

    def test_scientific(self) -> None:
        assert format_scientific(123456.0) == "1.23456E5"
        assert format_scientific(-123456.0) == "-1.23456E5"
        assert format_scientific(1e20) == "1E20"
        assert format_scientific(2.5e-7) == "2.5E-7"
        assert format_scientific(1.5, decimal_mark=",") == "1,5E0"


# =============================================================================
# СВОЙСТВА
# =============================================================================


class TestReformatProperties:
    """Реформат отфильтрованного текста конечных double"""

    @given(st.floats(allow_nan=False, allow_infinity=False))
    def test_output_survives_filter(self, x: float) -> None:
        """Результат реформата не изменяется фильтром"""
        out = reformat(filter_numeric_text(repr(x)))
        assert filter_numeric_text(out) == out

    @given(st.floats(allow_nan=False, allow_infinity=False))
    def test_value_preserved(self, x: float) -> None:
        """Реформат не меняет числовое значение"""
        out = reformat(filter_numeric_text(repr(x)))
        assert parse_number(out) == x

    @given(st.text(max_size=20))
    def test_total(self, text: str) -> None:
        """Реформат тотален на произвольных строках"""
        assert isinstance(reformat(text), str)
