"""Main CLI application entry point."""

from __future__ import annotations

import typer

from typesniff.cli.commands import format_rows, json_schema, schema

app = typer.Typer(
    name="typesniff",
    help="typesniff - infer column types, formats and statistics of tabular data.",
    no_args_is_help=True,
)

# Register commands
app.command("schema")(schema.schema)
app.command("format")(format_rows.format_rows)
app.command("json-schema")(json_schema.json_schema)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
