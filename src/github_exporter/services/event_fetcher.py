"""Event-stream collector: flattens the user's activity feed."""

import logging

from github_exporter.exceptions import PayloadParseError
from github_exporter.models.events import (
    EventPayload,
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
from github_exporter.services.github_rest_client import GitHubRestClient

logger = logging.getLogger(__name__)


def records_from_event(
    event: GitHubEvent, payload: EventPayload
) -> tuple[ExportKind, list[Record]]:
    """Flatten one decoded event into the records it contributes."""
    if isinstance(payload, PushPayload):
        return ExportKind.COMMITS, [
            Commit.from_push_event(event, c) for c in payload.commits
        ]
    if isinstance(payload, PullRequestPayload):
        return ExportKind.PULL_REQUESTS, [PullRequest.from_event(event, payload)]
    if isinstance(payload, IssuesPayload):
        return ExportKind.ISSUES, [Issue.from_event(event, payload)]
    if isinstance(payload, ReleasePayload):
        return ExportKind.RELEASES, [Release.from_event(event, payload)]
    if isinstance(payload, WatchPayload):
        return ExportKind.WATCH, [Watch.from_event(event, payload)]
    raise TypeError(f"Unhandled payload type: {type(payload).__name__}")


class EventFetcher:
    """Builds an export of every supported kind from the user's events."""

    def __init__(self, rest_client: GitHubRestClient):
        self.rest_client = rest_client

    async def fetch(self) -> Export:
        """Walk every page of events performed by the authenticated user.

        Events by other actors are dropped, as are events whose payload cannot
        be decoded. A failed page request aborts the walk and nothing collected
        so far is returned.

        Returns:
            Export with whichever collections the events populated
        """
        user = await self.rest_client.get_authenticated_user()
        username = user.get("login", "")

        collected: dict[str, list[Record]] = {kind.value: [] for kind in ExportKind}
        seen = skipped = 0

        async for page in self.rest_client.iter_user_events(username):
            for data in page:
                seen += 1
                event = GitHubEvent.from_api(data)
                if event.actor != username:
                    continue

                try:
                    payload = parse_event_payload(event)
                except PayloadParseError as e:
                    skipped += 1
                    logger.debug("Skipping event: %s", e)
                    continue

                if payload is None:
                    continue

                kind, records = records_from_event(event, payload)
                collected[kind.value].extend(records)

        logger.debug(
            "Processed %d events for %s (%d unparseable)", seen, username, skipped
        )

        return Export(**collected)
