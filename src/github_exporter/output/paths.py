"""Output format selection and output file naming."""

import os
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Optional


class OutputFormat(str, Enum):
    """Supported output formats. Anything unrecognised prints a table."""

    JSON = "json"
    CSV = "csv"
    TEXT = "text"

    @classmethod
    def parse(cls, value: Optional[str]) -> "OutputFormat":
        if value == cls.JSON.value:
            return cls.JSON
        if value == cls.CSV.value:
            return cls.CSV
        return cls.TEXT


def output_directory(output: str | Path) -> Path:
    """Directory that hosts the generated export file.

    A bare filename resolves to the current directory. A path ending in a
    separator names the directory itself.
    """
    text = str(output)
    if text.endswith(("/", os.sep)):
        return Path(text)
    return Path(text).parent


def export_filename(kind: str, fmt: OutputFormat, today: Optional[date] = None) -> str:
    """Build ``github-<kind>-export-<YYYYMMDD>.<ext>``."""
    stamp = (today or date.today()).strftime("%Y%m%d")
    return f"github-{kind}-export-{stamp}.{fmt.value}"


def resolve_output_path(
    output: str | Path,
    kind: str,
    fmt: OutputFormat,
    today: Optional[date] = None,
) -> Optional[Path]:
    """Resolve where an export is written.

    Returns:
        The file path for JSON and CSV, None when writing to stdout
    """
    if fmt is OutputFormat.TEXT:
        return None
    return output_directory(output) / export_filename(kind, fmt, today)
