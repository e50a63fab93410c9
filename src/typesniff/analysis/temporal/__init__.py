"""Date and time format guessing."""

from typesniff.analysis.temporal.patterns import (
    guess_column_date_format,
    guess_date_format,
    parse_date_value,
)

__all__ = [
    "guess_column_date_format",
    "guess_date_format",
    "parse_date_value",
]
