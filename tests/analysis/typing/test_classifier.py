"""Tests for value classification."""

import pytest

from typesniff.analysis.typing.classifier import ValueClassifier, classify_value
from typesniff.analysis.typing.patterns import PatternConfig
from typesniff.core.models.base import BaseType, Format, ValueClass


class TestEmptyValues:
    """Empty values are not classified."""

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_empty_values_return_none(self, value):
        assert classify_value(value) is None


class TestRuleOrder:
    """Tests for the first-match-wins rule table."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (True, ValueClass(BaseType.BOOLEAN, Format.BOOLEAN)),
            ("TRUE", ValueClass(BaseType.BOOLEAN, Format.BOOLEAN)),
            (" false ", ValueClass(BaseType.BOOLEAN, Format.BOOLEAN)),
            ("2020-01-01", ValueClass(BaseType.DATE, "%Y-%m-%d")),
            ("12:30", ValueClass(BaseType.DATE, "%H:%M")),
            (42, ValueClass(BaseType.NUMBER, Format.INTEGER)),
            (4.0, ValueClass(BaseType.NUMBER, Format.INTEGER)),
            (4.5, ValueClass(BaseType.NUMBER, Format.FLOAT)),
            ("1,234", ValueClass(BaseType.NUMBER, Format.INTEGER)),
            ("-3.14", ValueClass(BaseType.NUMBER, Format.FLOAT)),
            ("$1,200.50", ValueClass(BaseType.NUMBER, Format.CURRENCY)),
            ("100 USD", ValueClass(BaseType.NUMBER, Format.CURRENCY)),
            ("€ 5", ValueClass(BaseType.NUMBER, Format.CURRENCY)),
            ("12%", ValueClass(BaseType.NUMBER, Format.PERCENTAGE)),
            ("https://example.com", ValueClass(BaseType.STRING, Format.URL)),
            ("jane@example.com", ValueClass(BaseType.STRING, Format.EMAIL)),
            ("2011-12", ValueClass(BaseType.STRING, Format.FINANCIAL_YEAR)),
            ('{"a": 1}', ValueClass(BaseType.STRING, Format.OBJECT)),
            ("[1, 2]", ValueClass(BaseType.STRING, Format.JSON)),
            ("hello world", ValueClass(BaseType.STRING, Format.TEXT)),
            ("customer_id", ValueClass(BaseType.STRING, Format.TEXT)),
        ],
    )
    def test_classification(self, value, expected):
        assert classify_value(value) == expected

    def test_percentage_wins_over_currency(self):
        """A value with both markers is a percentage."""
        assert classify_value("$5%") == ValueClass(BaseType.NUMBER, Format.PERCENTAGE)

    def test_four_digit_integer_is_a_number(self):
        """Years are only recognised at column level."""
        assert classify_value("1999") == ValueClass(BaseType.NUMBER, Format.INTEGER)

    @pytest.mark.parametrize("value", ["١٢٣", "１２", "١٫٥", "٥%"])
    def test_non_ascii_digits_are_text(self, value):
        """Only ASCII digits make a number."""
        assert classify_value(value) == ValueClass(BaseType.STRING, Format.TEXT)

    def test_huge_integer_is_integer(self):
        assert classify_value("9" * 400) == ValueClass(BaseType.NUMBER, Format.INTEGER)

    def test_invalid_embedded_json_is_text(self):
        """Parse failures of embedded JSON are swallowed."""
        assert classify_value("{not json}") == ValueClass(BaseType.STRING, Format.TEXT)


class TestPreferStringNumbers:
    """Tests for prefer_string_numbers."""

    @pytest.mark.parametrize("value", ["42", 42, "$1,200", "12%"])
    def test_numbers_become_text(self, value):
        result = classify_value(value, prefer_string_numbers=True)
        assert result == ValueClass(BaseType.STRING, Format.TEXT)

    def test_dates_and_booleans_unaffected(self):
        assert classify_value("2020-01-01", prefer_string_numbers=True).type is BaseType.DATE
        assert classify_value("true", prefer_string_numbers=True).type is BaseType.BOOLEAN


class TestCustomPatterns:
    """Tests for classifiers built with their own pattern configuration."""

    def test_custom_pattern_config(self):
        """Test that custom string patterns replace the bundled ones."""
        config = PatternConfig(
            {"string_patterns": [{"name": "sku", "pattern": r"^SKU-\d+$", "format": "SKU"}]}
        )
        classifier = ValueClassifier(config)
        assert classifier.classify("SKU-123") == ValueClass(BaseType.STRING, "SKU")
        assert classifier.classify("https://example.com") == ValueClass(BaseType.STRING, Format.TEXT)

    def test_rule_names_in_order(self):
        classifier = ValueClassifier()
        assert [name for name, _rule in classifier.rules] == [
            "boolean",
            "date",
            "number",
            "pattern",
            "json",
            "text",
        ]


class TestValueClass:
    """Tests for the ValueClass label."""

    def test_label_is_format(self):
        assert ValueClass(BaseType.NUMBER, Format.CURRENCY).label == "Currency"

    def test_label_falls_back_to_type(self):
        assert ValueClass(BaseType.STRING, "").label == "String"
