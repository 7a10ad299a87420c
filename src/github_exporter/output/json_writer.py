"""JSON output writer for exports."""

import json
from pathlib import Path

from github_exporter.models.records import Export


def write_json(export: Export, output_path: Path) -> Path:
    """Write the whole export, every collection included, as indented JSON.

    Args:
        export: Export to serialize
        output_path: Destination file

    Returns:
        Path to written file

    Raises:
        OSError: If the file cannot be created, e.g. its directory is missing
    """
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(export.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
        f.write("\n")

    return output_path


def read_json(path: Path) -> Export:
    """Load an export previously written by write_json."""
    with open(path, encoding="utf-8") as f:
        return Export.model_validate(json.load(f))
