"""Tests for CSV and JSON row sources."""

import json

import pytest

from typesniff.sources.loader import load_csv_rows, load_json_rows, load_rows


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "people.csv"
    path.write_text("id,name,age\n1,Alice,32\n2,,23\n", encoding="utf-8")
    return path


class TestLoadCsvRows:
    """Tests for DuckDB-backed CSV loading."""

    def test_rows_are_all_text(self, csv_file):
        result = load_csv_rows(csv_file)
        assert result.success
        rows = result.unwrap()
        assert rows[0] == {"id": "1", "name": "Alice", "age": "32"}
        assert rows[1]["age"] == "23"

    def test_empty_fields_are_none(self, csv_file):
        rows = load_csv_rows(csv_file).unwrap()
        assert rows[1]["name"] is None

    def test_missing_file(self, tmp_path):
        result = load_csv_rows(tmp_path / "absent.csv")
        assert not result.success
        assert "not found" in result.error

    def test_path_with_quote(self, tmp_path):
        path = tmp_path / "o'brien.csv"
        path.write_text("a\nx\n", encoding="utf-8")
        assert load_csv_rows(path).unwrap() == [{"a": "x"}]


class TestLoadJsonRows:
    """Tests for JSON loading."""

    def test_array_of_objects(self, tmp_path):
        path = tmp_path / "rows.json"
        path.write_text(json.dumps([{"a": 1}, {"a": "2"}]), encoding="utf-8")
        assert load_json_rows(path).unwrap() == [{"a": 1}, {"a": "2"}]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "rows.json"
        path.write_text("[{", encoding="utf-8")
        result = load_json_rows(path)
        assert not result.success
        assert "Invalid JSON" in result.error

    def test_not_an_array(self, tmp_path):
        path = tmp_path / "rows.json"
        path.write_text('{"a": 1}', encoding="utf-8")
        assert not load_json_rows(path).success


class TestLoadRows:
    """Tests for extension dispatch."""

    def test_csv(self, csv_file):
        assert len(load_rows(csv_file).unwrap()) == 2

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "rows.xlsx"
        path.write_bytes(b"")
        result = load_rows(path)
        assert not result.success
        assert "Unsupported" in result.error

    def test_unwrap_failed_result_raises(self, tmp_path):
        with pytest.raises(ValueError):
            load_rows(tmp_path / "absent.json").unwrap()
