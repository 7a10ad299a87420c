"""Data models for GitHub Exporter."""

from github_exporter.models.events import (
    EventPayload,
    EventType,
    GitHubEvent,
    IssuesPayload,
    PullRequestPayload,
    PushPayload,
    ReleasePayload,
    WatchPayload,
    parse_event_payload,
)
from github_exporter.models.records import (
    Commit,
    Export,
    ExportKind,
    Issue,
    PullRequest,
    Record,
    Release,
    Watch,
)

__all__ = [
    "Record",
    "Commit",
    "PullRequest",
    "Issue",
    "Release",
    "Watch",
    "Export",
    "ExportKind",
    "EventType",
    "GitHubEvent",
    "EventPayload",
    "PushPayload",
    "PullRequestPayload",
    "IssuesPayload",
    "ReleasePayload",
    "WatchPayload",
    "parse_event_payload",
]
