"""Output handlers for GitHub Exporter."""

from github_exporter.output.console import Console
from github_exporter.output.csv_writer import CSV_COLUMNS, write_csv
from github_exporter.output.json_writer import read_json, write_json
from github_exporter.output.paths import OutputFormat, resolve_output_path

__all__ = [
    "Console",
    "CSV_COLUMNS",
    "OutputFormat",
    "read_json",
    "resolve_output_path",
    "write_csv",
    "write_json",
]
