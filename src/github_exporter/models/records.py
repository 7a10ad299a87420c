"""Flat export records and the export aggregate."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from github_exporter.models.dates import UNKNOWN_DATE, parse_datetime
from github_exporter.models.events import (
    GitHubEvent,
    IssuesPayload,
    PullRequestPayload,
    PushCommit,
    ReleasePayload,
    WatchPayload,
)


class ExportKind(str, Enum):
    """Record kinds that can be selected for export."""

    COMMITS = "commits"
    PULL_REQUESTS = "pull_requests"
    ISSUES = "issues"
    RELEASES = "releases"
    WATCH = "watch"

    @classmethod
    def parse(cls, value: str) -> "ExportKind | None":
        """Return the matching kind, or None if ``value`` is not a known kind."""
        try:
            return cls(value)
        except ValueError:
            return None


class Record(BaseModel):
    """Base for immutable export records."""

    model_config = ConfigDict(frozen=True)


class Commit(Record):
    """Git commit data."""

    repo: str = ""
    sha: str = ""
    message: str = ""
    author: str = ""
    date: datetime = UNKNOWN_DATE

    @classmethod
    def from_api(cls, data: dict[str, Any], repo: str) -> "Commit":
        """Create from GitHub Commits API response."""
        commit_data = data.get("commit") or {}
        author_data = commit_data.get("author") or {}
        return cls(
            repo=repo,
            sha=data.get("sha") or "",
            message=commit_data.get("message") or "",
            author=author_data.get("name") or "",
            date=parse_datetime(author_data.get("date")) or UNKNOWN_DATE,
        )

    @classmethod
    def from_push_event(cls, event: GitHubEvent, commit: PushCommit) -> "Commit":
        """Create from a PushEvent payload commit. The author is left empty."""
        return cls(
            repo=event.repo,
            sha=commit.sha,
            message=commit.message,
            date=event.created_at,
        )


class PullRequest(Record):
    """Pull request data."""

    repo: str = ""
    number: int = 0
    title: str = ""
    state: str = ""  # open, closed
    author: str = ""
    action: str = ""  # opened, closed, ... (events only)
    date: datetime = UNKNOWN_DATE

    @classmethod
    def from_api(cls, data: dict[str, Any], repo: str) -> "PullRequest":
        """Create from GitHub Pull Requests API response."""
        return cls(
            repo=repo,
            number=data.get("number") or 0,
            title=data.get("title") or "",
            state=data.get("state") or "",
            author=(data.get("user") or {}).get("login") or "",
            date=parse_datetime(data.get("created_at")) or UNKNOWN_DATE,
        )

    @classmethod
    def from_event(cls, event: GitHubEvent, payload: PullRequestPayload) -> "PullRequest":
        return cls(
            repo=event.repo,
            number=payload.pull_request.number,
            title=payload.pull_request.title or "",
            action=payload.action,
            date=event.created_at,
        )


class Issue(Record):
    """Issue data."""

    repo: str = ""
    number: int = 0
    title: str = ""
    state: str = ""  # open, closed
    author: str = ""
    action: str = ""
    date: datetime = UNKNOWN_DATE

    @staticmethod
    def is_pull_request(data: dict[str, Any]) -> bool:
        """Check whether an Issues API entry is backed by a pull request."""
        return data.get("pull_request") is not None

    @classmethod
    def from_api(cls, data: dict[str, Any], repo: str) -> "Issue":
        """Create from GitHub Issues API response."""
        return cls(
            repo=repo,
            number=data.get("number") or 0,
            title=data.get("title") or "",
            state=data.get("state") or "",
            author=(data.get("user") or {}).get("login") or "",
            date=parse_datetime(data.get("created_at")) or UNKNOWN_DATE,
        )

    @classmethod
    def from_event(cls, event: GitHubEvent, payload: IssuesPayload) -> "Issue":
        return cls(
            repo=event.repo,
            number=payload.issue.number,
            title=payload.issue.title or "",
            action=payload.action,
            date=event.created_at,
        )


class Release(Record):
    """Release data."""

    repo: str = ""
    tag_name: str = ""
    name: str = ""
    author: str = ""
    action: str = ""
    date: datetime = UNKNOWN_DATE

    @classmethod
    def from_api(cls, data: dict[str, Any], repo: str) -> "Release":
        """Create from GitHub Releases API response."""
        return cls(
            repo=repo,
            tag_name=data.get("tag_name") or "",
            name=data.get("name") or "",
            author=(data.get("author") or {}).get("login") or "",
            date=parse_datetime(data.get("created_at")) or UNKNOWN_DATE,
        )

    @classmethod
    def from_event(cls, event: GitHubEvent, payload: ReleasePayload) -> "Release":
        return cls(
            repo=event.repo,
            tag_name=payload.release.tag_name or "",
            name=payload.release.name or "",
            action=payload.action,
            date=event.created_at,
        )


class Watch(Record):
    """Star (watch) event data."""

    repo: str = ""
    author: str = ""
    action: str = ""  # "started"
    date: datetime = UNKNOWN_DATE

    @classmethod
    def from_event(cls, event: GitHubEvent, payload: WatchPayload) -> "Watch":
        return cls(
            repo=event.repo,
            action=payload.action,
            date=event.created_at,
        )


class Export(BaseModel):
    """Everything collected in one run. Field order is the JSON key order."""

    model_config = ConfigDict(frozen=True)

    commits: list[Commit] = Field(default_factory=list)
    pull_requests: list[PullRequest] = Field(default_factory=list)
    issues: list[Issue] = Field(default_factory=list)
    releases: list[Release] = Field(default_factory=list)
    watch: list[Watch] = Field(default_factory=list)

    def records(self, kind: str) -> list[Record] | None:
        """Return the collection for ``kind``, or None for an unknown kind."""
        export_kind = ExportKind.parse(kind)
        if export_kind is None:
            return None
        return getattr(self, export_kind.value)
