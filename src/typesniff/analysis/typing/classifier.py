"""Value classification.

Classifies one raw cell value into a base type and a format label by walking
an ordered rule table; the first rule that returns a classification wins:

1. Boolean      native bool or "true"/"false"
2. Date         any value the date format guesser recognises
3. Number       native numbers, currency, percentages, grouped numbers
4. Pattern      string sub-formats from config/patterns/default.yaml
5. JSON         embedded JSON objects/arrays
6. Text         everything else

Empty values (None, or blank after trimming) classify as None and are
excluded from column statistics. No input ever raises.
"""

from __future__ import annotations

import json
import re
from collections.abc import Callable
from functools import lru_cache
from typing import Any

from typesniff.analysis.temporal.patterns import guess_date_format
from typesniff.analysis.typing.normalize import strip_number_markers
from typesniff.analysis.typing.patterns import PatternConfig, default_pattern_config
from typesniff.core.models.base import BaseType, Format, ValueClass

_BOOLEAN = re.compile(r"^(true|false)$", re.IGNORECASE)

ValueRule = Callable[[Any, str, bool], ValueClass | None]


def _boolean_rule(value: Any, text: str, prefer_string_numbers: bool) -> ValueClass | None:
    if isinstance(value, bool) or _BOOLEAN.match(text):
        return ValueClass(BaseType.BOOLEAN, Format.BOOLEAN)
    return None


def _date_rule(value: Any, text: str, prefer_string_numbers: bool) -> ValueClass | None:
    fmt = guess_date_format(text)
    if fmt:
        return ValueClass(BaseType.DATE, fmt)
    return None


def _number_rule(value: Any, text: str, prefer_string_numbers: bool) -> ValueClass | None:
    if prefer_string_numbers:
        return None

    if isinstance(value, (int, float)):
        integral = isinstance(value, int) or value.is_integer()
        return ValueClass(BaseType.NUMBER, Format.INTEGER if integral else Format.FLOAT)

    parsed = strip_number_markers(text)
    if not parsed.is_numeric:
        return None

    if parsed.had_percent:
        fmt = Format.PERCENTAGE
    elif parsed.had_currency:
        fmt = Format.CURRENCY
    elif "." not in parsed.residual or float(parsed.residual).is_integer():
        fmt = Format.INTEGER
    else:
        fmt = Format.FLOAT
    return ValueClass(BaseType.NUMBER, fmt)


def _embedded_json_rule(value: Any, text: str, prefer_string_numbers: bool) -> ValueClass | None:
    is_object = text.startswith("{") and text.endswith("}")
    is_array = text.startswith("[") and text.endswith("]")
    if not (is_object or is_array):
        return None
    try:
        json.loads(text)
    except json.JSONDecodeError:
        return None
    return ValueClass(BaseType.STRING, Format.OBJECT if is_object else Format.JSON)


def _text_rule(value: Any, text: str, prefer_string_numbers: bool) -> ValueClass:
    # Identifier-like tokens, sentences and long strings are all plain text
    return ValueClass(BaseType.STRING, Format.TEXT)


class ValueClassifier:
    """Ordered, first-match-wins value classifier."""

    def __init__(self, pattern_config: PatternConfig | None = None):
        self.pattern_config = pattern_config or default_pattern_config()
        self.rules: tuple[tuple[str, ValueRule], ...] = (
            ("boolean", _boolean_rule),
            ("date", _date_rule),
            ("number", _number_rule),
            ("pattern", self._pattern_rule),
            ("json", _embedded_json_rule),
            ("text", _text_rule),
        )

    def _pattern_rule(self, value: Any, text: str, prefer_string_numbers: bool) -> ValueClass | None:
        pattern = self.pattern_config.first_match(text)
        if pattern is None:
            return None
        return ValueClass(pattern.inferred_type, pattern.format)

    def classify(self, value: Any, prefer_string_numbers: bool = False) -> ValueClass | None:
        """Classify one value.

        Args:
            value: Raw cell value (str, int, float, bool or None)
            prefer_string_numbers: Skip numeric detection entirely

        Returns:
            ValueClass, or None for empty values
        """
        if value is None:
            return None
        text = str(value).strip()
        if not text:
            return None

        for _name, rule in self.rules:
            result = rule(value, text, prefer_string_numbers)
            if result is not None:
                return result
        return None


@lru_cache
def default_classifier() -> ValueClassifier:
    """Classifier using the configured pattern file."""
    return ValueClassifier()


def classify_value(value: Any, prefer_string_numbers: bool = False) -> ValueClass | None:
    """Classify one value with the default classifier."""
    return default_classifier().classify(value, prefer_string_numbers)
