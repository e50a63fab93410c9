"""Schema inference and resolution."""

from typesniff.analysis.schema.inference import SchemaInputError, get_schema
from typesniff.analysis.schema.models import ColumnDescriptor, NumericStats, TextStats

__all__ = [
    "ColumnDescriptor",
    "NumericStats",
    "SchemaInputError",
    "TextStats",
    "get_schema",
]
