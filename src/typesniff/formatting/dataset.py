"""Dataset formatting.

Re-derives the schema of a dataset and rewrites every row so that values
match the inferred column types:

- Number columns: "1,234.5", "$2,000", "12%" -> 1234.5, 2000, 12
- Boolean columns: "true"/"FALSE" -> True/False
- Date columns (convert_dates): parsed with the column's strftime format
- String columns (best_guess): numeric-looking values of columns whose best
  guess is a numeric format are coerced like Number columns

Other values are copied unchanged.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping
from dataclasses import dataclass
from functools import partial
from typing import Any

from typesniff.analysis.schema.inference import Rows, get_schema, load_rows, null_marker_matcher
from typesniff.analysis.schema.models import ColumnDescriptor
from typesniff.analysis.temporal.patterns import parse_date_value
from typesniff.analysis.typing.normalize import normalize_boolean, normalize_number
from typesniff.core.logging import get_logger
from typesniff.core.models.base import BaseType, Format

logger = get_logger(__name__)

Coercer = Callable[[Any], Any]


@dataclass
class ColumnPlan:
    """How one schema column is read from input rows and written to output rows."""

    descriptor: ColumnDescriptor
    source_key: str
    coerce: Coercer | None
    coerced: int = 0
    unchanged: int = 0

    def apply(self, value: Any) -> Any:
        if self.coerce is None:
            self.unchanged += 1
            return value
        result = self.coerce(value)
        if result is value:
            self.unchanged += 1
        else:
            self.coerced += 1
        return result


def _number_coercer(empty_as_null: bool, is_empty: Callable[[Any], bool] | None) -> Coercer:
    def coerce(value: Any) -> Any:
        if empty_as_null and is_empty is not None and is_empty(value):
            return None
        return normalize_number(value, empty_as_null=empty_as_null)

    return coerce


def _column_coercer(
    descriptor: ColumnDescriptor,
    *,
    number_empty_as_null: bool,
    is_empty: Callable[[Any], bool] | None,
    convert_dates: bool,
    best_guess: bool,
) -> Coercer | None:
    if descriptor.type is BaseType.NUMBER:
        return _number_coercer(number_empty_as_null, is_empty)
    if descriptor.type is BaseType.BOOLEAN:
        return normalize_boolean
    if descriptor.type is BaseType.DATE:
        if convert_dates and descriptor.format not in (None, Format.MIXED):
            return partial(parse_date_value, fmt=descriptor.format)
        return None
    if best_guess and descriptor.probably in Format.NUMERIC:
        return normalize_number
    return None


def data_format(
    data: Rows | str | bytes,
    *,
    prefer_string_numbers: bool = False,
    number_empty_as_null: bool = True,
    sanitize_keys: bool = False,
    drop_empty_columns: bool = False,
    use_null_markers_for_inference: bool = False,
    null_markers: Collection[str] | None = None,
    convert_dates: bool = False,
    best_guess: bool = False,
    report: bool = False,
    report_ignored: bool = False,
) -> list[Any]:
    """Coerce dataset values to native types according to the inferred schema.

    Args:
        data: Row mappings, or JSON text holding an array of row objects
        prefer_string_numbers: Passed to schema inference
        number_empty_as_null: Blank values of Number columns become None
        sanitize_keys: Emit rows keyed by sanitized column names
        drop_empty_columns: Leave columns without non-empty values out of
            the output rows
        use_null_markers_for_inference: Treat null markers as empty, both for
            inference and for Number columns
        null_markers: Markers to use instead of config/null_values.yaml
        convert_dates: Parse Date columns with their inferred format
        best_guess: Coerce numeric values of String columns whose best guess
            is a numeric format
        report: Log a column_formatted event per column
        report_ignored: Log a column_ignored event per dropped column

    Returns:
        New rows; non-mapping input rows are passed through unchanged
    """
    rows = load_rows(data)
    schema = get_schema(
        rows,
        prefer_string_numbers=prefer_string_numbers,
        sanitize_keys=sanitize_keys,
        use_null_markers_for_inference=use_null_markers_for_inference,
        null_markers=null_markers,
    )
    is_empty = null_marker_matcher(null_markers) if use_null_markers_for_inference else None

    plans = []
    for descriptor in schema:
        if drop_empty_columns and descriptor.non_empty_count == 0:
            if report_ignored:
                logger.info("column_ignored", column=descriptor.name, reason="empty")
            continue
        source_key = descriptor.source_name if sanitize_keys and descriptor.source_name else descriptor.name
        coerce = _column_coercer(
            descriptor,
            number_empty_as_null=number_empty_as_null,
            is_empty=is_empty,
            convert_dates=convert_dates,
            best_guess=best_guess,
        )
        plans.append(ColumnPlan(descriptor=descriptor, source_key=source_key, coerce=coerce))

    rebuild = sanitize_keys or drop_empty_columns
    out: list[Any] = []
    for row in rows:
        if not isinstance(row, Mapping):
            out.append(row)
            continue
        dst = {} if rebuild else dict(row)
        for plan in plans:
            if plan.source_key not in row:
                continue
            dst[plan.descriptor.name] = plan.apply(row[plan.source_key])
        out.append(dst)

    if report:
        for plan in plans:
            logger.info(
                "column_formatted",
                column=plan.descriptor.name,
                type=plan.descriptor.type.value,
                format=plan.descriptor.format,
                coerced=plan.coerced,
                unchanged=plan.unchanged,
            )
    return out
