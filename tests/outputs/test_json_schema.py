"""Tests for JSON Schema rendering."""

import pytest
from jsonschema import Draft202012Validator, FormatChecker

from typesniff.analysis.schema.inference import get_schema
from typesniff.analysis.schema.models import ColumnDescriptor, NumericStats, TextStats
from typesniff.core.models.base import BaseType, Format
from typesniff.outputs.json_schema import JSON_SCHEMA_DIALECT, column_json_schema, to_json_schema


class TestColumnJsonSchema:
    """Tests for single-column schemas."""

    def test_integer(self):
        column = ColumnDescriptor(
            name="n",
            type=BaseType.NUMBER,
            format=Format.INTEGER,
            num_stats=NumericStats(min=1, max=9, mean=5, stdev=1),
        )
        assert column_json_schema(column) == {"type": "integer", "minimum": 1, "maximum": 9}

    def test_currency_is_number(self):
        column = ColumnDescriptor(name="n", type=BaseType.NUMBER, format=Format.CURRENCY)
        assert column_json_schema(column) == {"type": "number"}

    def test_boolean(self):
        column = ColumnDescriptor(name="b", type=BaseType.BOOLEAN, format=Format.BOOLEAN)
        assert column_json_schema(column) == {"type": "boolean"}

    @pytest.mark.parametrize(
        "fmt, keywords",
        [
            ("%Y-%m-%d", {"format": "date"}),
            ("%Y/%m/%d", {"format": "date"}),
            ("%Y-%m-%dT%H:%M:%S", {"format": "date-time"}),
            ("%H:%M", {"format": "time"}),
            ("%d/%m/%Y", {}),
            (Format.MIXED, {}),
        ],
    )
    def test_dates(self, fmt, keywords):
        column = ColumnDescriptor(name="d", type=BaseType.DATE, format=fmt)
        assert column_json_schema(column) == {"type": "string", **keywords}

    def test_year(self):
        column = ColumnDescriptor(name="y", type=BaseType.DATE, format=Format.YEAR)
        schema = column_json_schema(column)
        assert schema["type"] == "string"
        assert schema["pattern"]

    def test_string_formats(self):
        column = ColumnDescriptor(
            name="e",
            type=BaseType.STRING,
            format=Format.EMAIL,
            text_stats=TextStats(min_len=5, max_len=30, avg_len=12.5),
        )
        assert column_json_schema(column) == {
            "type": "string",
            "format": "email",
            "minLength": 5,
            "maxLength": 30,
        }

    def test_plain_text(self):
        column = ColumnDescriptor(name="s", type=BaseType.STRING, format=Format.TEXT)
        assert column_json_schema(column) == {"type": "string"}


class TestToJsonSchema:
    """Tests for whole-dataset schemas."""

    def test_from_rows(self, customer_rows):
        schema = to_json_schema(customer_rows)
        assert schema["$schema"] == JSON_SCHEMA_DIALECT
        assert schema["type"] == "object"
        assert schema["properties"]["id"]["type"] == "integer"
        assert schema["properties"]["balance"]["type"] == "number"
        assert schema["properties"]["email"]["format"] == "email"
        assert schema["properties"]["signup"]["format"] == "date"
        assert "discount" not in schema["required"]
        assert "id" in schema["required"]

    def test_from_descriptors(self):
        columns = get_schema([{"a": "1"}, {"a": ""}])
        schema = to_json_schema(columns)
        assert list(schema["properties"]) == ["a"]
        assert "required" not in schema

    def test_options_passed_to_inference(self):
        schema = to_json_schema([{"n": "1"}, {"n": "2"}], prefer_string_numbers=True)
        assert schema["properties"]["n"]["type"] == "string"

    def test_empty_dataset(self):
        schema = to_json_schema([])
        assert schema["properties"] == {}
        assert "required" not in schema

    def test_valid_against_meta_schema(self, customer_rows):
        schema = to_json_schema(customer_rows)
        Draft202012Validator.check_schema(schema)

    def test_source_rows_validate(self):
        """Rows validate against the schema inferred from them."""
        rows = [{"id": 1, "name": "Alice", "tags": "a"}, {"id": 2, "name": "Bob", "tags": "b"}]
        validator = Draft202012Validator(to_json_schema(rows), format_checker=FormatChecker())
        for row in rows:
            validator.validate(row)


class TestDescriptorMappings:
    """Tests for descriptors given as to_dict() mappings."""

    def test_round_trip_from_dicts(self):
        """Serialized descriptors render like the descriptors themselves."""
        columns = get_schema([{"a": "1", "b": "x"}, {"a": "2", "b": "y"}])
        from_dicts = to_json_schema([column.to_dict() for column in columns])
        assert from_dicts == to_json_schema(columns)
        assert list(from_dicts["properties"]) == ["a", "b"]
        assert from_dicts["properties"]["a"]["type"] == "integer"

    def test_descriptor_keys_are_not_columns(self):
        columns = get_schema([{"a": "1"}, {"a": "2"}])
        schema = to_json_schema([column.to_dict() for column in columns])
        assert "name" not in schema["properties"]
        assert "type" not in schema["properties"]

    def test_rows_with_name_column_are_inferred(self, customer_rows):
        """Rows whose "type" is no base type are treated as data."""
        rows = [{"name": "Widget", "type": "tool"}, {"name": "Gadget", "type": "toy"}]
        assert list(to_json_schema(rows)["properties"]) == ["name", "type"]
        assert "email" in to_json_schema(customer_rows)["properties"]
