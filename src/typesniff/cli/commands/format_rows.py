"""Format command - write a cleaned copy of a dataset as JSON."""

from __future__ import annotations

from typing import Annotated

import typer

from typesniff.cli.common import (
    DropEmptyColumnsFlag,
    NullMarkersFlag,
    OutputOption,
    PreferStringNumbersFlag,
    SanitizeKeysFlag,
    SourceArg,
    VerboseOption,
    emit_json,
    read_rows,
    setup_logging,
)
from typesniff.core.logging import log_context
from typesniff.formatting.dataset import data_format


def format_rows(
    source: SourceArg,
    output: OutputOption = None,
    prefer_string_numbers: PreferStringNumbersFlag = False,
    sanitize_keys: SanitizeKeysFlag = False,
    null_markers: NullMarkersFlag = False,
    drop_empty_columns: DropEmptyColumnsFlag = False,
    keep_empty_strings: Annotated[
        bool,
        typer.Option(
            "--keep-empty-strings",
            help="Keep blank values of Number columns instead of writing null",
        ),
    ] = False,
    convert_dates: Annotated[
        bool,
        typer.Option("--convert-dates", help="Parse Date columns with their inferred format"),
    ] = False,
    best_guess: Annotated[
        bool,
        typer.Option(
            "--best-guess",
            help="Coerce numbers in text columns that are probably numeric",
        ),
    ] = False,
    report: Annotated[
        bool,
        typer.Option("--report", help="Log per-column coercion counts and dropped columns"),
    ] = False,
    verbose: VerboseOption = 0,
) -> None:
    """Coerce dataset values to native types and write them as JSON.

    Examples:

        typesniff format data.csv -o cleaned.json

        typesniff format data.csv --sanitize-keys --drop-empty-columns --report
    """
    # Reports are logged at INFO
    setup_logging(max(verbose, 1) if report else verbose)
    rows = read_rows(source)

    with log_context(source=source.name):
        formatted = data_format(
            rows,
            prefer_string_numbers=prefer_string_numbers,
            number_empty_as_null=not keep_empty_strings,
            sanitize_keys=sanitize_keys,
            drop_empty_columns=drop_empty_columns,
            use_null_markers_for_inference=null_markers,
            convert_dates=convert_dates,
            best_guess=best_guess,
            report=report,
            report_ignored=report,
        )

    emit_json(formatted, output)
