"""Schema command - infer column types, formats and statistics."""

from __future__ import annotations

from rich.table import Table as RichTable

from typesniff.analysis.schema.inference import get_schema
from typesniff.analysis.schema.models import ColumnDescriptor
from typesniff.cli.common import (
    DropEmptyColumnsFlag,
    JsonFlag,
    NullMarkersFlag,
    PreferStringNumbersFlag,
    SanitizeKeysFlag,
    SourceArg,
    VerboseOption,
    console,
    emit_json,
    read_rows,
    setup_logging,
)
from typesniff.core.logging import log_context


def schema(
    source: SourceArg,
    prefer_string_numbers: PreferStringNumbersFlag = False,
    sanitize_keys: SanitizeKeysFlag = False,
    null_markers: NullMarkersFlag = False,
    drop_empty_columns: DropEmptyColumnsFlag = False,
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Infer the schema of a CSV or JSON file.

    Examples:

        typesniff schema data.csv

        typesniff schema data.csv --null-markers --json
    """
    setup_logging(verbose)
    rows = read_rows(source)

    with log_context(source=source.name):
        columns = get_schema(
            rows,
            prefer_string_numbers=prefer_string_numbers,
            sanitize_keys=sanitize_keys,
            use_null_markers_for_inference=null_markers,
            drop_empty_columns=drop_empty_columns,
        )

    if json_output:
        emit_json([column.to_dict() for column in columns], None)
        return

    _print_schema(columns, len(rows))


def _percent(ratio: float) -> str:
    return f"{ratio * 100:.0f}%"


def _print_schema(columns: list[ColumnDescriptor], total_rows: int) -> None:
    console.print(f"\n[bold]{len(columns)} columns, {total_rows} rows[/bold]\n")

    table = RichTable(show_header=True, header_style="bold")
    table.add_column("Column")
    table.add_column("Type")
    table.add_column("Format")
    table.add_column("Probably")
    table.add_column("Complete", justify="right")
    table.add_column("Distinct", justify="right")
    table.add_column("Top values")

    for column in columns:
        top = ", ".join(f"{value} ({count})" for value, count in column.top_k[:3])
        flags = []
        if column.is_primary_key:
            flags.append("[cyan]key[/cyan]")
        if column.sequential:
            flags.append("[cyan]seq[/cyan]")
        name = column.name if not flags else f"{column.name} {' '.join(flags)}"
        table.add_row(
            name,
            column.type.value,
            column.format or "-",
            column.probably or "",
            _percent(column.completeness),
            str(column.distinct_count),
            top,
        )

    console.print(table)
