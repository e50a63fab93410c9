"""Schema resolution.

Turns the accumulated state of every column into an immutable
ColumnDescriptor:

- Columns without non-empty observations become String/None (or are dropped).
- Columns with more than one base type become String/"mixed"; their
  statistics still cover every observation.
- Number columns of four-digit integers in the year range become Date/"%Y".
- Date columns get one format guessed across the raw column values.
- Other columns get their single observed format, or "mixed".

With prefer_string_numbers a final pass downgrades Number columns to
String/"mixed" unless every raw value is empty or a plain decimal literal.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from typesniff.analysis.schema.models import ColumnDescriptor, NumericStats, TextStats
from typesniff.analysis.statistics.accumulator import ColumnAccumulator
from typesniff.analysis.temporal.patterns import guess_column_date_format
from typesniff.core.logging import get_logger
from typesniff.core.models.base import BaseType, Format

logger = get_logger(__name__)

_PLAIN_DECIMAL = re.compile(r"-?\d+(\.\d+)?", re.ASCII)

# Formats that rule out reading a Number column as years
_NON_YEAR_FORMATS = frozenset({Format.CURRENCY, Format.PERCENTAGE, Format.FLOAT})


@dataclass
class ResolutionContext:
    """Inputs shared by the resolution of every column of one inference run."""

    rows: Sequence[Any]
    total_rows: int
    prefer_string_numbers: bool = False
    drop_empty_columns: bool = False
    is_empty: Callable[[Any], bool] | None = None
    top_k: int = 5
    category_label_limit: int = 10


def _common_stats(acc: ColumnAccumulator, ctx: ResolutionContext) -> dict[str, Any]:
    non_empty = acc.non_empty_count
    distinct = len(acc.unique_values)
    total = ctx.total_rows
    completeness = non_empty / total if total else 0.0
    is_unique = distinct == non_empty and non_empty > 0
    top_k = sorted(acc.value_counts.items(), key=lambda item: item[1], reverse=True)
    return {
        "name": acc.name,
        "source_name": acc.source_name,
        "tally": dict(acc.format_counts),
        "completeness": completeness,
        "distinct_count": distinct,
        "cardinality": distinct / non_empty if non_empty else 0.0,
        "top_k": top_k[: ctx.top_k],
        "uniqueness_ratio": distinct / total if total else 0.0,
        "is_unique": is_unique,
        "is_primary_key": is_unique and completeness == 1,
    }


def _categories_label(acc: ColumnAccumulator, limit: int) -> str:
    distinct = list(acc.str_seen)
    if len(distinct) == 1:
        return "Zero-variance column"
    if len(distinct) < limit:
        return "Categories: " + ", ".join(distinct)
    return "Categories"


def refine_probably(acc: ColumnAccumulator, top_label: str, top_count: int, category_label_limit: int) -> str:
    """Best-guess label for String and mixed columns.

    Delimited lists and percentages compete with the top tally label by
    observation count; ties go to the more specific label, in table order.
    A winning "Text" label with repeated values becomes a categories label.
    """
    candidates = (
        (Format.LIST, acc.list_count),
        (Format.PERCENTAGE, acc.format_counts[Format.PERCENTAGE]),
        (top_label, top_count),
    )
    label, _count = max(candidates, key=lambda candidate: candidate[1])

    if label == Format.TEXT and acc.has_string_duplicate:
        return _categories_label(acc, category_label_limit)
    return label


def _resolve_format(acc: ColumnAccumulator, ctx: ResolutionContext) -> tuple[BaseType, str | None]:
    (only_type,) = acc.types
    formats = acc.formats_by_type.get(only_type, set())

    if only_type is BaseType.NUMBER and not formats & _NON_YEAR_FORMATS and acc.looks_like_years:
        return BaseType.DATE, Format.YEAR

    if only_type is BaseType.DATE:
        column_key = acc.source_name if acc.source_name is not None else acc.name
        return only_type, guess_column_date_format(ctx.rows, column_key, ctx.is_empty)

    if len(formats) == 1:
        (only_format,) = formats
        return only_type, only_format or None
    return only_type, Format.MIXED


def resolve_column(acc: ColumnAccumulator, ctx: ResolutionContext) -> ColumnDescriptor | None:
    """Resolve one column, or None when an empty column is dropped."""
    if acc.is_empty:
        if ctx.drop_empty_columns:
            return None
        return ColumnDescriptor(
            name=acc.name,
            source_name=acc.source_name,
            type=BaseType.STRING,
            format=None,
            tally={},
            completeness=0.0,
            distinct_count=0,
            cardinality=0.0,
            uniqueness_ratio=0.0,
            is_unique=False,
            is_primary_key=False,
        )

    fields = _common_stats(acc, ctx)
    top_label, top_count = acc.format_counts.most_common(1)[0]
    score = top_count / acc.non_empty_count
    probably = top_label if score < 1 else None

    if len(acc.types) > 1:
        return ColumnDescriptor(
            type=BaseType.STRING,
            format=Format.MIXED,
            repeating=acc.has_string_duplicate,
            score=score,
            probably=refine_probably(acc, top_label, top_count, ctx.category_label_limit),
            **fields,
        )

    column_type, column_format = _resolve_format(acc, ctx)
    fields.update(type=column_type, format=column_format, score=score, probably=probably)

    if column_type is BaseType.STRING:
        fields["probably"] = refine_probably(acc, top_label, top_count, ctx.category_label_limit)
        fields["repeating"] = acc.has_string_duplicate
        text = acc.text_stats
        if text.count:
            fields["text_stats"] = TextStats(
                min_len=text.min_len or 0, max_len=text.max_len, avg_len=text.avg_len
            )
    elif column_type in (BaseType.NUMBER, BaseType.DATE):
        fields["sequential"] = acc.num_count >= 2 and acc.is_sequential
        ns = acc.num_stats
        if column_type is BaseType.NUMBER and ns.count:
            fields["num_stats"] = NumericStats(
                min=ns.minimum, max=ns.maximum, mean=ns.mean, stdev=ns.stdev
            )

    return ColumnDescriptor(**fields)


def _all_plain_decimals(rows: Iterable[Any], column_key: str, is_empty: Callable[[Any], bool] | None) -> bool:
    for row in rows:
        if not isinstance(row, Mapping):
            continue
        value = row.get(column_key)
        if value is None or value == "" or (is_empty is not None and is_empty(value)):
            continue
        if isinstance(value, bool) or _PLAIN_DECIMAL.fullmatch(str(value)) is None:
            return False
    return True


def resolve_schema(
    accumulators: Iterable[ColumnAccumulator], ctx: ResolutionContext
) -> list[ColumnDescriptor]:
    """Resolve every accumulated column, in encounter order."""
    results = []
    for acc in accumulators:
        descriptor = resolve_column(acc, ctx)
        if descriptor is None:
            logger.debug("empty_column_dropped", column=acc.name)
            continue
        logger.debug(
            "column_resolved",
            column=descriptor.name,
            type=descriptor.type.value,
            format=descriptor.format,
            score=descriptor.score,
        )
        results.append(descriptor)

    if ctx.prefer_string_numbers:
        for i, descriptor in enumerate(results):
            if descriptor.type is not BaseType.NUMBER:
                continue
            column_key = descriptor.source_name if descriptor.source_name is not None else descriptor.name
            if not _all_plain_decimals(ctx.rows, column_key, ctx.is_empty):
                results[i] = descriptor.model_copy(
                    update={"type": BaseType.STRING, "format": Format.MIXED}
                )
    return results
