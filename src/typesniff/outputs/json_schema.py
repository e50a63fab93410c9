"""JSON Schema (draft 2020-12) rendering of inferred column descriptors."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from typesniff.analysis.schema.inference import get_schema
from typesniff.analysis.schema.models import ColumnDescriptor
from typesniff.analysis.typing.patterns import PatternConfig, default_pattern_config
from typesniff.core.models.base import BaseType, Format

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

_YEAR_PATTERN = r"^(?:18|19|20|21)\d{2}$"
_CALENDAR_DATE = re.compile(r"^%Y[-/]%m[-/]%d$")


def _date_keywords(fmt: str | None) -> dict[str, Any]:
    if not fmt or fmt == Format.MIXED:
        return {}
    if fmt == Format.YEAR:
        return {"pattern": _YEAR_PATTERN}
    if _CALENDAR_DATE.match(fmt):
        return {"format": "date"}
    has_time = "%H" in fmt or "%I" in fmt
    if has_time and "%Y" in fmt:
        return {"format": "date-time"}
    if has_time:
        return {"format": "time"}
    return {}


def column_json_schema(column: ColumnDescriptor, patterns: PatternConfig | None = None) -> dict[str, Any]:
    """JSON Schema of a single column."""
    if column.type is BaseType.NUMBER:
        schema: dict[str, Any] = {"type": "integer" if column.format == Format.INTEGER else "number"}
        if column.num_stats:
            if math.isfinite(column.num_stats.min):
                schema["minimum"] = column.num_stats.min
            if math.isfinite(column.num_stats.max):
                schema["maximum"] = column.num_stats.max
        return schema

    if column.type is BaseType.BOOLEAN:
        return {"type": "boolean"}

    if column.type is BaseType.DATE:
        return {"type": "string", **_date_keywords(column.format)}

    patterns = patterns or default_pattern_config()
    schema = {"type": "string", **patterns.json_schema_for(column.format)}
    if column.text_stats:
        schema["minLength"] = max(0, column.text_stats.min_len)
        schema["maxLength"] = max(0, column.text_stats.max_len)
    return schema


_BASE_TYPES = frozenset(t.value for t in BaseType)


def _is_descriptor(item: Any) -> bool:
    """ColumnDescriptor, or a mapping shaped like ``ColumnDescriptor.to_dict()``."""
    if isinstance(item, ColumnDescriptor):
        return True
    return (
        isinstance(item, Mapping)
        and isinstance(item.get("name"), str)
        and item.get("type") in _BASE_TYPES
    )


def _as_schema(input_: Iterable[Any], options: dict[str, Any]) -> list[ColumnDescriptor]:
    items: Sequence[Any] = list(input_)
    if all(_is_descriptor(item) for item in items):
        return [ColumnDescriptor.model_validate(item) for item in items]
    return get_schema(items, **options)


def to_json_schema(schema_or_rows: Iterable[Any], **options: Any) -> dict[str, Any]:
    """Convert column descriptors (or raw rows) into a JSON Schema object.

    Args:
        schema_or_rows: ColumnDescriptors or their to_dict() mappings, or
            row mappings to infer descriptors from
        **options: get_schema options used when rows are given

    Returns:
        Draft 2020-12 object schema; "required" lists the columns with
        completeness 1 and is omitted when empty
    """
    columns = _as_schema(schema_or_rows, options)
    patterns = default_pattern_config()

    properties = {column.name: column_json_schema(column, patterns) for column in columns}
    required = [column.name for column in columns if column.completeness == 1]

    out: dict[str, Any] = {
        "$schema": JSON_SCHEMA_DIALECT,
        "type": "object",
        "properties": properties,
    }
    if required:
        out["required"] = required
    return out
