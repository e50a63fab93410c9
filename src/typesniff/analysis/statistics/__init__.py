"""Per-column running statistics."""

from typesniff.analysis.statistics.accumulator import (
    ColumnAccumulator,
    NumericAccumulator,
    TextAccumulator,
    is_likely_list,
)

__all__ = [
    "ColumnAccumulator",
    "NumericAccumulator",
    "TextAccumulator",
    "is_likely_list",
]
