"""CSV output writer for a single record kind."""

import csv
from pathlib import Path

from github_exporter.models.records import (
    Commit,
    Export,
    Issue,
    PullRequest,
    Record,
    Release,
    Watch,
)

CSV_COLUMNS = ["Type", "Repo", "ID", "Title", "State", "Author", "Date"]


def record_to_row(record: Record) -> list[str]:
    """Map a record onto the fixed CSV columns."""
    if isinstance(record, Commit):
        return [
            "Commit",
            record.repo,
            record.sha,
            record.message,
            "",
            record.author,
            str(record.date),
        ]
    if isinstance(record, (PullRequest, Issue)):
        return [
            type(record).__name__,
            record.repo,
            str(record.number),
            record.title,
            record.state,
            record.author,
            str(record.date),
        ]
    if isinstance(record, Release):
        return [
            "Release",
            record.repo,
            record.tag_name,
            record.name,
            "",
            record.author,
            str(record.date),
        ]
    if isinstance(record, Watch):
        # The action goes in the Author column; existing consumers read it there
        return ["Watch", record.repo, "", "", "", record.action, str(record.date)]
    raise TypeError(f"Cannot write {type(record).__name__} to CSV")


def write_csv(export: Export, output_path: Path, kind: str) -> Path:
    """Write the collection matching ``kind`` as CSV.

    An unknown kind writes the header row only.

    Args:
        export: Export holding the records
        output_path: Destination file
        kind: Record kind to write

    Returns:
        Path to written file

    Raises:
        OSError: If the file cannot be created, e.g. its directory is missing
    """
    records = export.records(kind) or []

    with open(output_path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(CSV_COLUMNS)
        writer.writerows(record_to_row(r) for r in records)

    return output_path
