"""Date and time format guessing.

Maps single values to strftime-style format tokens and aggregates the guesses
over a whole column. The guesses are heuristics: an ambiguous day/month value
such as "03/04/2020" resolves to month-first with no confidence signal.
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any

from typesniff.core.models.base import Format


@dataclass(frozen=True)
class DateRule:
    """One entry of the ordered date pattern table."""

    name: str
    regex: re.Pattern[str]
    build: Callable[[re.Match[str], str], str]


def _time_format(m: re.Match[str], value: str) -> str:
    seconds = ":%S" if m.group(3) else ""
    if m.group(4):
        return f"%I:%M{seconds} %p"
    return f"%H:%M{seconds}"


def _iso_format(m: re.Match[str], value: str) -> str:
    fmt = "%Y-%m-%d"
    if m.group(4):
        fmt += "T" if "T" in value else " "
        fmt += "%H:%M"
        if m.group(6):
            fmt += ":%S"
        if m.group(7):
            fmt += ".%f"
    if m.group(8):
        fmt += "%z"
    return fmt


def _day_month_year_format(m: re.Match[str], value: str) -> str:
    first, sep, second = int(m.group(1)), m.group(2), int(m.group(3))
    if first > 12 and second <= 12:
        return f"%d{sep}%m{sep}%Y"
    # second > 12 means month-first; ambiguous values also default to month-first
    return f"%m{sep}%d{sep}%Y"


DATE_RULES: tuple[DateRule, ...] = (
    DateRule(
        "time",
        re.compile(
            r"^([01]?\d|2[0-3]):([0-5]\d)(?::([0-5]\d))?(?:\s*(AM|PM))?$", re.IGNORECASE | re.ASCII
        ),
        _time_format,
    ),
    DateRule(
        "iso_datetime",
        re.compile(
            r"^(\d{4})-(\d{2})-(\d{2})"
            r"(?:[T\s](\d{2}):(\d{2})(?::(\d{2}))?(?:\.(\d+))?)?"
            r"(Z|[+-]\d{2}:?\d{2})?$",
            re.ASCII,
        ),
        _iso_format,
    ),
    DateRule("ymd_slash", re.compile(r"^\d{4}/\d{2}/\d{2}$", re.ASCII), lambda m, v: "%Y/%m/%d"),
    DateRule(
        "day_month_year",
        re.compile(r"^(\d{1,2})([/\-])(\d{1,2})\2(\d{4})$", re.ASCII),
        _day_month_year_format,
    ),
    DateRule("dd_mm_yyyy_dash", re.compile(r"^\d{2}-\d{2}-\d{4}$", re.ASCII), lambda m, v: "%d-%m-%Y"),
    DateRule("dd_mm_yyyy_slash", re.compile(r"^\d{2}/\d{2}/\d{4}$", re.ASCII), lambda m, v: "%d/%m/%Y"),
)


def guess_date_format(value: Any) -> str | None:
    """Guess a strftime format for a single value.

    Args:
        value: Value to inspect (converted to text and trimmed)

    Returns:
        Format token such as "%Y-%m-%d", or None if not a recognised date/time
    """
    text = str(value).strip()
    if not text:
        return None
    for rule in DATE_RULES:
        m = rule.regex.match(text)
        if m:
            return rule.build(m, text)
    return None


def guess_column_date_format(
    rows: Iterable[Any],
    column: str,
    is_empty: Callable[[Any], bool] | None = None,
) -> str | None:
    """Guess one date format for a whole column.

    Args:
        rows: Row mappings (non-mapping rows are skipped)
        column: Key of the column in the rows
        is_empty: Optional predicate for values to skip in addition to None/""

    Returns:
        The format when every parsable value agrees, "mixed" when several
        formats appear, None when no value parses as a date
    """
    counts: Counter[str] = Counter()
    for row in rows:
        if not isinstance(row, Mapping):
            continue
        raw = row.get(column)
        if raw is None or raw == "" or (is_empty is not None and is_empty(raw)):
            continue
        fmt = guess_date_format(raw)
        if fmt:
            counts[fmt] += 1

    if not counts:
        return None
    if len(counts) == 1:
        return next(iter(counts))
    return Format.MIXED


def parse_date_value(value: Any, fmt: str) -> date | time | datetime | int | Any:
    """Parse a value with a guessed column format.

    Year columns ("%Y") become ints, date-only formats dates, time-only
    formats times and everything else datetimes. Values that do not parse are
    returned unchanged.
    """
    if value is None or isinstance(value, (date, time)):
        return value
    text = str(value).strip()
    # strptime accepts non-ASCII digits
    if not text or not text.isascii():
        return value

    if fmt == Format.YEAR:
        return int(text) if text.isdigit() else value

    try:
        parsed = datetime.strptime(text, fmt)
    except ValueError:
        return value

    has_date = "%Y" in fmt or "%d" in fmt
    has_time = "%H" in fmt or "%I" in fmt
    if has_date and not has_time and "%z" not in fmt:
        return parsed.date()
    if has_time and not has_date:
        return parsed.time()
    return parsed
