"""GitHub event and typed event payload models."""

from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Union

from pydantic import BaseModel, Field, ValidationError

from github_exporter.exceptions import PayloadParseError
from github_exporter.models.dates import UNKNOWN_DATE, parse_datetime


class EventType(str, Enum):
    """GitHub event types the exporter knows how to flatten."""

    PUSH = "PushEvent"
    PULL_REQUEST = "PullRequestEvent"
    ISSUES = "IssuesEvent"
    RELEASE = "ReleaseEvent"
    WATCH = "WatchEvent"
    OTHER = "Other"


class GitHubEvent(BaseModel):
    """GitHub event from the Events API, payload left undecoded."""

    id: str = ""
    type: str = ""
    actor: str = ""
    repo: str = ""
    created_at: datetime = UNKNOWN_DATE
    payload: Any = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "GitHubEvent":
        """Create from GitHub Events API response."""
        return cls(
            id=str(data.get("id") or ""),
            type=data.get("type") or "",
            actor=(data.get("actor") or {}).get("login") or "",
            repo=(data.get("repo") or {}).get("name") or "",
            created_at=parse_datetime(data.get("created_at")) or UNKNOWN_DATE,
            payload=data.get("payload"),
        )

    @property
    def event_type(self) -> EventType:
        """Get typed event type."""
        try:
            return EventType(self.type)
        except ValueError:
            return EventType.OTHER


class PushCommit(BaseModel):
    """Commit entry inside a PushEvent payload."""

    sha: str = ""
    message: str = ""


class PushPayload(BaseModel):
    event_type: ClassVar[EventType] = EventType.PUSH

    commits: list[PushCommit] = Field(default_factory=list)


class IssueRef(BaseModel):
    """Issue or pull request as embedded in an event payload."""

    number: int = 0
    title: str | None = None


class PullRequestPayload(BaseModel):
    event_type: ClassVar[EventType] = EventType.PULL_REQUEST

    action: str = ""
    pull_request: IssueRef = Field(default_factory=IssueRef)


class IssuesPayload(BaseModel):
    event_type: ClassVar[EventType] = EventType.ISSUES

    action: str = ""
    issue: IssueRef = Field(default_factory=IssueRef)


class ReleaseRef(BaseModel):
    tag_name: str | None = None
    name: str | None = None


class ReleasePayload(BaseModel):
    event_type: ClassVar[EventType] = EventType.RELEASE

    action: str = ""
    release: ReleaseRef = Field(default_factory=ReleaseRef)


class WatchPayload(BaseModel):
    event_type: ClassVar[EventType] = EventType.WATCH

    action: str = ""


EventPayload = Union[
    PushPayload,
    PullRequestPayload,
    IssuesPayload,
    ReleasePayload,
    WatchPayload,
]

PAYLOAD_MODELS: dict[EventType, type[BaseModel]] = {
    model.event_type: model
    for model in (PushPayload, PullRequestPayload, IssuesPayload, ReleasePayload, WatchPayload)
}


def parse_event_payload(event: GitHubEvent) -> EventPayload | None:
    """Decode the payload of ``event`` into its typed model.

    Returns:
        The typed payload, or None for event types the exporter ignores.

    Raises:
        PayloadParseError: If the payload does not match the event type.
    """
    model = PAYLOAD_MODELS.get(event.event_type)
    if model is None:
        return None

    try:
        return model.model_validate(event.payload)
    except ValidationError as e:
        raise PayloadParseError(
            event.type,
            event_id=event.id,
            reason=f"{e.error_count()} validation error(s)",
        ) from e
