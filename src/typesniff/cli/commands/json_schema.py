"""JSON Schema command - render the inferred schema as JSON Schema."""

from __future__ import annotations

from typesniff.cli.common import (
    NullMarkersFlag,
    OutputOption,
    PreferStringNumbersFlag,
    SourceArg,
    VerboseOption,
    emit_json,
    read_rows,
    setup_logging,
)
from typesniff.outputs.json_schema import to_json_schema


def json_schema(
    source: SourceArg,
    output: OutputOption = None,
    prefer_string_numbers: PreferStringNumbersFlag = False,
    null_markers: NullMarkersFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Write a draft 2020-12 JSON Schema describing the rows of a file.

    Examples:

        typesniff json-schema data.csv -o data.schema.json
    """
    setup_logging(verbose)
    rows = read_rows(source)
    emit_json(
        to_json_schema(
            rows,
            prefer_string_numbers=prefer_string_numbers,
            use_null_markers_for_inference=null_markers,
        ),
        output,
    )
