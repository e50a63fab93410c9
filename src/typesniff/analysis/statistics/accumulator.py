"""Per-column running statistics.

One ColumnAccumulator exists per column for the duration of a single
inference call. It is folded over every non-empty cell of the column in row
order and discarded once the schema resolver has produced a descriptor.
"""

from __future__ import annotations

import math
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from typesniff.analysis.typing.normalize import normalize_number
from typesniff.core.models.base import BaseType, Format, ValueClass

_LIST_SEPARATORS = re.compile(r"[;,|]")


def is_likely_list(text: str, max_mean_length: int = 30) -> bool:
    """Check whether a string looks like a delimited list.

    Requires at least two non-empty parts separated by ",", ";" or "|" with a
    mean part length of at most max_mean_length.
    """
    parts = [p.strip() for p in _LIST_SEPARATORS.split(text)]
    parts = [p for p in parts if p]
    if len(parts) < 2:
        return False
    return sum(len(p) for p in parts) / len(parts) <= max_mean_length


def distinct_key(value: Any) -> str:
    """Key used for distinct-value tracking."""
    if isinstance(value, str):
        return value.strip()
    return str(value)


@dataclass
class NumericAccumulator:
    """Running sum, sum of squares and range of numeric observations."""

    count: int = 0
    total: float = 0.0
    total_sq: float = 0.0
    minimum: float = math.inf
    maximum: float = -math.inf

    def add(self, n: float) -> None:
        self.count += 1
        self.total += n
        self.total_sq += n * n
        self.minimum = min(self.minimum, n)
        self.maximum = max(self.maximum, n)

    @property
    def mean(self) -> float:
        return self.total / self.count

    @property
    def stdev(self) -> float:
        """Sample standard deviation, clamped at zero variance."""
        if self.count < 2:
            return 0.0
        variance = (self.total_sq - self.total * self.total / self.count) / (self.count - 1)
        return math.sqrt(max(0.0, variance))


@dataclass
class TextAccumulator:
    """Running length statistics of string observations."""

    count: int = 0
    min_len: int | None = None
    max_len: int = 0
    sum_len: int = 0

    def add(self, text: str) -> None:
        length = len(text)
        self.count += 1
        self.sum_len += length
        self.min_len = length if self.min_len is None else min(self.min_len, length)
        self.max_len = max(self.max_len, length)

    @property
    def avg_len(self) -> float:
        return self.sum_len / self.count


@dataclass
class ColumnAccumulator:
    """Mutable inference state of one column."""

    name: str
    source_name: str | None = None
    list_max_mean_length: int = 30
    year_min: int = 1800
    year_max: int = 2100

    types: set[BaseType] = field(default_factory=set)
    formats_by_type: dict[BaseType, set[str]] = field(default_factory=dict)
    non_empty_count: int = 0
    format_counts: Counter[str] = field(default_factory=Counter)
    type_counts: Counter[BaseType] = field(default_factory=Counter)
    unique_values: set[str] = field(default_factory=set)
    value_counts: Counter[str] = field(default_factory=Counter)

    # String observations
    str_seen: dict[str, None] = field(default_factory=dict)  # insertion-ordered set
    has_string_duplicate: bool = False
    str_value_counts: Counter[str] = field(default_factory=Counter)
    max_str_value_count: int = 0
    str_obs_count: int = 0
    text_format_counts: Counter[str] = field(default_factory=Counter)
    list_count: int = 0
    text_stats: TextAccumulator = field(default_factory=TextAccumulator)

    # Number observations
    last_num: float | None = None
    num_count: int = 0
    is_sequential: bool = True
    num_four_digit_count: int = 0
    num_in_range_count: int = 0
    num_stats: NumericAccumulator = field(default_factory=NumericAccumulator)

    @property
    def is_empty(self) -> bool:
        return self.non_empty_count == 0

    def observe(self, value: Any, value_class: ValueClass) -> None:
        """Fold one non-empty, classified cell value into the column state."""
        base_type = value_class.type
        label = value_class.label

        self.types.add(base_type)
        self.formats_by_type.setdefault(base_type, set()).add(value_class.format)
        self.non_empty_count += 1
        self.format_counts[label] += 1
        self.type_counts[base_type] += 1

        key = distinct_key(value)
        if key:
            self.unique_values.add(key)

        number = None
        if base_type is BaseType.NUMBER:
            number = self._observe_number(value)
        elif base_type is BaseType.STRING:
            self._observe_string(key, value_class)

        self.value_counts[str(number) if number is not None else key] += 1

    def _observe_string(self, text: str, value_class: ValueClass) -> None:
        self.str_obs_count += 1
        if text in self.str_seen:
            self.has_string_duplicate = True
        else:
            self.str_seen[text] = None

        count = self.str_value_counts[text] + 1
        self.str_value_counts[text] = count
        self.max_str_value_count = max(self.max_str_value_count, count)

        if value_class.format == Format.TEXT:
            self.text_format_counts[value_class.format] += 1
        if is_likely_list(text, self.list_max_mean_length):
            self.list_count += 1
        self.text_stats.add(text)

    def _observe_number(self, value: Any) -> int | float | None:
        n = normalize_number(value, empty_as_null=False)
        if isinstance(n, bool) or not isinstance(n, (int, float)):
            return None
        # Integers too large for a float are left out of the statistics
        try:
            x = float(n)
        except OverflowError:
            return None
        if not math.isfinite(x):
            return None

        self.num_stats.add(x)

        if self.num_count and n - self.last_num != 1:
            self.is_sequential = False
        self.last_num = n
        self.num_count += 1

        if x.is_integer():
            if 1000 <= n <= 9999:
                self.num_four_digit_count += 1
            if self.year_min <= n <= self.year_max:
                self.num_in_range_count += 1
        return n

    @property
    def looks_like_years(self) -> bool:
        """Every numeric observation is a four-digit integer in the year range."""
        return (
            self.num_count > 0
            and self.num_four_digit_count == self.num_count
            and self.num_in_range_count == self.num_count
        )
