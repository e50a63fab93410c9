"""CLI command implementations."""

from typesniff.cli.commands import format_rows, json_schema, schema

__all__ = [
    "format_rows",
    "json_schema",
    "schema",
]
