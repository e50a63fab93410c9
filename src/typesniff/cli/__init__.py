"""CLI for typesniff.

Provides commands for inferring schemas and cleaning datasets.

Usage:
    typesniff schema data.csv
    typesniff format data.csv -o cleaned.json --sanitize-keys
    typesniff json-schema data.csv

Environment:
    Settings can be overridden with TYPESNIFF_* variables or a .env file.
"""

from typesniff.cli.main import app, main

__all__ = ["app", "main"]
