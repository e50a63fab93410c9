"""Schema inference entry point.

get_schema folds every cell of every row into per-column accumulators in a
single pass, then hands the accumulators to the resolver.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Collection, Iterable, Mapping
from typing import Any

from typesniff.analysis.schema.models import ColumnDescriptor
from typesniff.analysis.schema.resolution import ResolutionContext, resolve_schema
from typesniff.analysis.statistics.accumulator import ColumnAccumulator
from typesniff.analysis.typing.classifier import ValueClassifier, default_classifier
from typesniff.core.config import Settings, get_settings
from typesniff.core.logging import get_logger
from typesniff.sources.keys import KeySanitizer
from typesniff.sources.null_values import NullMarkerMatcher, load_null_value_config

logger = get_logger(__name__)

Rows = Iterable[Mapping[str, Any]]


class SchemaInputError(ValueError):
    """Raised when JSON text does not decode to an array of rows."""


def load_rows(data: Rows | str | bytes) -> list[Any]:
    """Materialize rows from an iterable or from JSON text.

    Raises:
        json.JSONDecodeError: If JSON text cannot be parsed
        SchemaInputError: If JSON text does not hold an array
    """
    if isinstance(data, (str, bytes, bytearray)):
        parsed = json.loads(data)
        if not isinstance(parsed, list):
            raise SchemaInputError(
                f"Expected a JSON array of row objects, got {type(parsed).__name__}"
            )
        return parsed
    return list(data)


def null_marker_matcher(null_markers: Collection[str] | None = None) -> NullMarkerMatcher:
    """Matcher for explicit markers, or for the configured null_values.yaml."""
    if null_markers is not None:
        return NullMarkerMatcher(null_markers)
    return load_null_value_config().matcher()


def accumulate_columns(
    rows: Iterable[Any],
    *,
    prefer_string_numbers: bool = False,
    sanitize_keys: bool = False,
    is_empty: Callable[[Any], bool] | None = None,
    classifier: ValueClassifier | None = None,
    settings: Settings | None = None,
) -> dict[str, ColumnAccumulator]:
    """Fold all rows into per-column accumulators.

    Columns are registered in key-encounter order. Non-mapping rows are skipped.
    """
    classifier = classifier or default_classifier()
    settings = settings or get_settings()
    sanitizer = KeySanitizer() if sanitize_keys else None
    accumulators: dict[str, ColumnAccumulator] = {}

    for row in rows:
        if not isinstance(row, Mapping):
            continue

        for raw_key, value in row.items():
            name = sanitizer(raw_key) if sanitizer else str(raw_key)
            acc = accumulators.get(name)
            if acc is None:
                acc = ColumnAccumulator(
                    name=name,
                    source_name=str(raw_key) if sanitizer else None,
                    list_max_mean_length=settings.list_max_mean_length,
                    year_min=settings.year_min,
                    year_max=settings.year_max,
                )
                accumulators[name] = acc

            if is_empty is not None and is_empty(value):
                continue
            value_class = classifier.classify(value, prefer_string_numbers)
            if value_class is None:
                continue
            acc.observe(value, value_class)

    return accumulators


def get_schema(
    data: Rows | str | bytes,
    *,
    prefer_string_numbers: bool = False,
    sanitize_keys: bool = False,
    use_null_markers_for_inference: bool = False,
    drop_empty_columns: bool = False,
    null_markers: Collection[str] | None = None,
) -> list[ColumnDescriptor]:
    """Infer a column descriptor for every column of a dataset.

    Args:
        data: Row mappings, or JSON text holding an array of row objects
        prefer_string_numbers: Treat numeric-looking strings as String
        sanitize_keys: Normalize column names; descriptors keep the raw key
            as source_name
        use_null_markers_for_inference: Treat configured null markers
            ("N/A", "-", "#N/A", ...) like empty values
        drop_empty_columns: Omit columns without any non-empty value
        null_markers: Markers to use instead of config/null_values.yaml

    Returns:
        Column descriptors in column encounter order

    Raises:
        json.JSONDecodeError: If data is JSON text that cannot be parsed
        SchemaInputError: If data is JSON text that is not an array
    """
    settings = get_settings()
    rows = load_rows(data)
    is_empty = null_marker_matcher(null_markers) if use_null_markers_for_inference else None

    accumulators = accumulate_columns(
        rows,
        prefer_string_numbers=prefer_string_numbers,
        sanitize_keys=sanitize_keys,
        is_empty=is_empty,
        settings=settings,
    )

    ctx = ResolutionContext(
        rows=rows,
        total_rows=len(rows),
        prefer_string_numbers=prefer_string_numbers,
        drop_empty_columns=drop_empty_columns,
        is_empty=is_empty,
        top_k=settings.top_k_values,
        category_label_limit=settings.category_label_limit,
    )
    schema = resolve_schema(accumulators.values(), ctx)

    logger.debug("schema_inferred", rows=len(rows), columns=len(schema))
    return schema
