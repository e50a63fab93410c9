"""Value normalization to native Python types.

Shared by the value classifier (to decide whether a string is numeric) and by
the dataset formatter (to coerce values of Number and Boolean columns).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

_CURRENCY_SYMBOL = re.compile(r"^[$€£]\s?")
_CURRENCY_CODE = re.compile(r"\s?(USD|EUR|GBP|AUD|CAD|NZD|JPY|CNY|INR)$", re.IGNORECASE)
_NUMERIC = re.compile(r"[+-]?\d+(?:\.\d+)?", re.ASCII)


@dataclass(frozen=True)
class NumericText:
    """A value with its currency, grouping and percent markers stripped."""

    residual: str
    had_currency: bool = False
    had_percent: bool = False

    @property
    def is_numeric(self) -> bool:
        return _NUMERIC.fullmatch(self.residual) is not None

    def to_number(self) -> int | float:
        """Parse the residual; callers check is_numeric first.

        Integers beyond the int string-conversion limit parse as float (inf).
        """
        if "." in self.residual:
            return float(self.residual)
        try:
            return int(self.residual)
        except ValueError:
            return float(self.residual)


def strip_number_markers(text: str) -> NumericText:
    """Strip one currency symbol, one currency code, grouping commas and one trailing %.

    Args:
        text: Trimmed value text

    Returns:
        NumericText with the residual and which markers were present
    """
    had_currency = False
    had_percent = False

    residual, count = _CURRENCY_SYMBOL.subn("", text, count=1)
    if count:
        had_currency = True

    residual, count = _CURRENCY_CODE.subn("", residual, count=1)
    if count:
        had_currency = True

    residual = residual.replace(",", "")

    if residual.endswith("%"):
        had_percent = True
        residual = residual[:-1].strip()

    return NumericText(residual=residual, had_currency=had_currency, had_percent=had_percent)


def normalize_number(value: Any, empty_as_null: bool = False) -> Any:
    """Normalize a number-like value by removing grouping, currency and percent.

    Percentages keep their magnitude: "12%" becomes 12, not 0.12.

    Args:
        value: Raw cell value
        empty_as_null: Return None for None/blank values instead of the original

    Returns:
        int or float on success, otherwise the original value
    """
    # bool is an int subclass; it is not a number here
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value
    if value is None:
        return None

    text = str(value).strip()
    if not text:
        return None if empty_as_null else value

    parsed = strip_number_markers(text)
    if not parsed.residual:
        return None if empty_as_null else value
    if parsed.is_numeric:
        return parsed.to_number()
    return value


def normalize_boolean(value: Any) -> Any:
    """Convert "true"/"false" (case-insensitive) strings to booleans.

    Other values are returned unchanged.
    """
    if isinstance(value, bool) or value is None:
        return value
    text = str(value).strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    return value
