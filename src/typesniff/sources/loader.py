"""Row sources for CSV and JSON files.

CSV files are untyped: every field is loaded as text (VARCHAR) so that type
inference sees the raw values. Empty fields load as None.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import duckdb

from typesniff.core.logging import get_logger
from typesniff.core.models.base import Result

logger = get_logger(__name__)

Row = dict[str, Any]


def load_csv_rows(path: Path) -> Result[list[Row]]:
    """Load a CSV file as a list of all-text row mappings.

    Args:
        path: CSV file with a header row

    Returns:
        Result containing the rows in file order
    """
    if not path.exists():
        return Result.fail(f"CSV file not found: {path}")

    conn = duckdb.connect(":memory:")
    try:
        escaped = str(path).replace("'", "''")
        cursor = conn.execute(f"""
            SELECT * FROM read_csv('{escaped}', header = true, all_varchar = true)
        """)
        columns = [d[0] for d in cursor.description]
        rows = [dict(zip(columns, record, strict=True)) for record in cursor.fetchall()]
    except duckdb.Error as e:
        return Result.fail(f"Failed to read CSV: {e}")
    finally:
        conn.close()

    logger.debug("csv_loaded", path=str(path), rows=len(rows), columns=len(columns))
    return Result.ok(rows)


def load_json_rows(path: Path) -> Result[list[Row]]:
    """Load a JSON file holding an array of row objects."""
    if not path.exists():
        return Result.fail(f"JSON file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        return Result.fail(f"Invalid JSON in {path}: {e}")

    if not isinstance(data, list):
        return Result.fail(f"Expected a JSON array of row objects in {path}")

    logger.debug("json_loaded", path=str(path), rows=len(data))
    return Result.ok(data)


def load_rows(path: Path) -> Result[list[Row]]:
    """Load rows from a .csv or .json file, chosen by extension."""
    suffix = path.suffix.lower()
    if suffix == ".json":
        return load_json_rows(path)
    if suffix in (".csv", ".tsv", ".txt"):
        return load_csv_rows(path)
    return Result.fail(f"Unsupported file type: {path.suffix or path.name}")
