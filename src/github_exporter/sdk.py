"""GitHub Exporter SDK - High-level API for exporting GitHub activity."""

import logging
from enum import Enum
from typing import Optional

from github_exporter.config import DEFAULT_API_URL, Config
from github_exporter.exceptions import ConfigurationError, GitHubExporterError
from github_exporter.models.records import Export
from github_exporter.services.data_fetcher import DataFetcher
from github_exporter.services.event_fetcher import EventFetcher
from github_exporter.services.github_rest_client import GitHubRestClient
from github_exporter.utils.rate_limiter import get_rate_limiter

logger = logging.getLogger(__name__)


class FetchMode(str, Enum):
    """Where records come from: repository endpoints or the event stream."""

    REPOS = "repos"
    EVENTS = "events"

    @classmethod
    def parse(cls, value: Optional[str]) -> "FetchMode":
        """Only "events" selects the event stream; anything else reads repositories."""
        return cls.EVENTS if value == cls.EVENTS.value else cls.REPOS


class GitHubExporter:
    """High-level SDK for exporting the authenticated user's GitHub activity.

    Example usage:
        ```python
        from github_exporter import GitHubExporter

        async with GitHubExporter(token="ghp_xxx") as exporter:
            export = await exporter.fetch_repos("commits")
            events = await exporter.fetch_events()
        ```

    Args:
        token: GitHub personal access token (required)
        api_url: GitHub API base URL (default: https://api.github.com)
        config: Full configuration; takes precedence over token and api_url
    """

    def __init__(
        self,
        token: str | None = None,
        api_url: str = DEFAULT_API_URL,
        config: Config | None = None,
    ):
        self._config = config or Config(github_token=token, github_api_url=api_url)
        if not self._config.is_authenticated:
            raise ConfigurationError(
                "A GitHub token is required. Pass --token or set GITHUB_TOKEN."
            )
        self._rest_client: GitHubRestClient | None = None

    async def __aenter__(self) -> "GitHubExporter":
        """Async context manager entry."""
        self._rest_client = GitHubRestClient(
            config=self._config,
            rate_limiter=get_rate_limiter(),
        )
        logger.debug("GitHubExporter initialized (api=%s)", self._config.github_api_url)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close all HTTP connections."""
        if self._rest_client:
            await self._rest_client.close()
            self._rest_client = None

    def _client(self) -> GitHubRestClient:
        if self._rest_client is None:
            raise GitHubExporterError(
                "Client not initialized. Use 'async with GitHubExporter(...) as exporter:'"
            )
        return self._rest_client

    async def fetch_repos(self, kind: str) -> Export:
        """Export one record kind across the user's owned repositories."""
        return await DataFetcher(self._client()).fetch(kind)

    async def fetch_events(self) -> Export:
        """Export every supported kind from the user's event stream."""
        return await EventFetcher(self._client()).fetch()

    async def fetch(self, kind: str, mode: FetchMode = FetchMode.REPOS) -> Export:
        """Fetch with the strategy selected by ``mode``.

        ``kind`` only steers the repository strategy; the event stream always
        yields every kind it sees.
        """
        if mode is FetchMode.EVENTS:
            return await self.fetch_events()
        return await self.fetch_repos(kind)
