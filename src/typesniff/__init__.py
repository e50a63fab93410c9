"""typesniff - type and format inference for untyped tabular data.

Example:
    from typesniff import data_format, get_schema, to_json_schema

    rows = [{"age": "32", "paid": "$1,200.50"}, {"age": "23", "paid": "$80"}]
    schema = get_schema(rows)
    schema[1].format  # "Currency"
    data_format(rows)  # [{"age": 32, "paid": 1200.5}, {"age": 23, "paid": 80}]
"""

__version__ = "0.1.0"

from typesniff.analysis.schema import (
    ColumnDescriptor,
    NumericStats,
    SchemaInputError,
    TextStats,
    get_schema,
)
from typesniff.analysis.temporal import guess_column_date_format, guess_date_format
from typesniff.analysis.typing import classify_value, normalize_boolean, normalize_number
from typesniff.core.models.base import BaseType, Result
from typesniff.formatting import data_format
from typesniff.outputs import to_json_schema

__all__ = [
    "BaseType",
    "ColumnDescriptor",
    "NumericStats",
    "Result",
    "SchemaInputError",
    "TextStats",
    "classify_value",
    "data_format",
    "get_schema",
    "guess_column_date_format",
    "guess_date_format",
    "normalize_boolean",
    "normalize_number",
    "to_json_schema",
    "__version__",
]
