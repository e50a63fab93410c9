"""Tests for value normalization."""

import pytest

from typesniff.analysis.typing.normalize import (
    normalize_boolean,
    normalize_number,
    strip_number_markers,
)


class TestStripNumberMarkers:
    """Tests for currency, grouping and percent stripping."""

    def test_currency_symbol(self):
        parsed = strip_number_markers("$2,345.50")
        assert parsed.residual == "2345.50"
        assert parsed.had_currency
        assert not parsed.had_percent
        assert parsed.is_numeric

    def test_currency_code_case_insensitive(self):
        parsed = strip_number_markers("12.5 eur")
        assert parsed.residual == "12.5"
        assert parsed.had_currency

    def test_percent(self):
        parsed = strip_number_markers("12 %")
        assert parsed.residual == "12"
        assert parsed.had_percent

    def test_non_numeric_residual(self):
        assert not strip_number_markers("12 apples").is_numeric
        assert not strip_number_markers("1.2.3").is_numeric


class TestNormalizeNumber:
    """Tests for normalize_number."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("$2,345.50", 2345.5),
            ("12%", 12),
            ("1,000", 1000),
            ("-42", -42),
            ("+7", 7),
            ("3.0", 3.0),
            ("£10", 10),
            ("250 GBP", 250),
        ],
    )
    def test_numeric_strings(self, value, expected):
        result = normalize_number(value)
        assert result == expected
        assert type(result) is type(expected)

    def test_huge_integers(self):
        """Digit strings past the int conversion limit parse as infinity."""
        assert normalize_number("1" * 400) == int("1" * 400)
        assert normalize_number("1" * 5000) == float("inf")

    @pytest.mark.parametrize("value", ["١٢٣", "１２", "$٥"])
    def test_non_ascii_digits_unchanged(self, value):
        assert normalize_number(value) == value

    def test_percentage_is_not_scaled(self):
        assert normalize_number("12%") == 12

    def test_native_numbers_pass_through(self):
        assert normalize_number(5) == 5
        assert normalize_number(2.5) == 2.5

    def test_booleans_pass_through(self):
        assert normalize_number(True) is True
        assert normalize_number(False) is False

    def test_empty_as_null(self):
        assert normalize_number("", empty_as_null=True) is None
        assert normalize_number("  ", empty_as_null=True) is None
        assert normalize_number("$", empty_as_null=True) is None

    def test_empty_kept_without_empty_as_null(self):
        assert normalize_number("") == ""
        assert normalize_number("  ") == "  "

    def test_none_stays_none(self):
        assert normalize_number(None) is None

    def test_unparseable_returns_original(self):
        assert normalize_number("abc") == "abc"
        assert normalize_number("12 apples") == "12 apples"


class TestNormalizeBoolean:
    """Tests for normalize_boolean."""

    @pytest.mark.parametrize(
        "value, expected",
        [("true", True), ("FALSE", False), (" True ", True), (True, True), (False, False)],
    )
    def test_boolean_values(self, value, expected):
        assert normalize_boolean(value) is expected

    @pytest.mark.parametrize("value", ["yes", "1", None, 0])
    def test_other_values_unchanged(self, value):
        assert normalize_boolean(value) == value
