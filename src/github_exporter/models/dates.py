"""Timestamp helpers shared by the models."""

from datetime import datetime, timezone

# Stand-in for timestamps the API omits
UNKNOWN_DATE = datetime.min.replace(tzinfo=timezone.utc)


def parse_datetime(value: str | None) -> datetime | None:
    """Parse ISO datetime string."""
    if not value:
        return None
    try:
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        return datetime.fromisoformat(value)
    except (ValueError, TypeError):
        return None
