"""Renderers for inferred schemas."""

from typesniff.outputs.json_schema import column_json_schema, to_json_schema

__all__ = ["column_json_schema", "to_json_schema"]
