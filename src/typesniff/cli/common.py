"""Shared CLI utilities and constants."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console

from typesniff.core.config import get_settings
from typesniff.core.logging import configure_logging
from typesniff.core.models.base import Result
from typesniff.sources.loader import Row, load_rows

# Shared console instance
console = Console()

# Common type aliases for typer options
SourceArg = Annotated[
    Path,
    typer.Argument(
        help="CSV or JSON file to inspect",
        dir_okay=False,
        file_okay=True,
        resolve_path=True,
    ),
]

OutputOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Write the result to this file instead of stdout",
        dir_okay=False,
        resolve_path=True,
    ),
]

JsonFlag = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Output as JSON for scripting",
    ),
]

PreferStringNumbersFlag = Annotated[
    bool,
    typer.Option(
        "--prefer-string-numbers",
        help="Keep numeric-looking values as strings",
    ),
]

SanitizeKeysFlag = Annotated[
    bool,
    typer.Option(
        "--sanitize-keys",
        help="Normalize column names (invisible characters, whitespace, duplicates)",
    ),
]

NullMarkersFlag = Annotated[
    bool,
    typer.Option(
        "--null-markers",
        help="Treat markers such as N/A, -, #N/A as empty values",
    ),
]

DropEmptyColumnsFlag = Annotated[
    bool,
    typer.Option(
        "--drop-empty-columns",
        help="Leave out columns without any non-empty value",
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-v=INFO, -vv=DEBUG)",
    ),
]


def setup_logging(verbosity: int = 0, log_format: str | None = None) -> None:
    """Configure structured logging based on verbosity level.

    Args:
        verbosity: 0=WARNING, 1=INFO, 2+=DEBUG
        log_format: "console" or "json"; defaults to TYPESNIFF_LOG_FORMAT
    """
    log_format = log_format or get_settings().log_format
    if verbosity >= 2:
        level = "DEBUG"
    elif verbosity >= 1:
        level = "INFO"
    else:
        level = "WARNING"

    configure_logging(
        log_level=level,
        log_format=log_format,
        show_timestamps=verbosity >= 1,
        color=log_format == "console",
        configure_stdlib=True,
    )


def read_rows(path: Path) -> list[Row]:
    """Load rows from a source file, exiting with status 1 on failure."""
    result: Result[list[Row]] = load_rows(path)
    if not result.success:
        console.print(f"[red]{result.error}[/red]")
        raise typer.Exit(1)
    return result.unwrap()


def emit_json(payload: Any, output: Path | None) -> None:
    """Write JSON to a file, or print it to stdout."""
    text = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    console.print(f"[green]Written to {output}[/green]")
