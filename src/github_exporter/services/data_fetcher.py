"""Repository-based collector: walks the user's owned repositories."""

import logging
from typing import Any

from github_exporter.exceptions import UnsupportedKindError
from github_exporter.models.records import (
    Commit,
    Export,
    ExportKind,
    Issue,
    PullRequest,
    Release,
)
from github_exporter.services.github_rest_client import GitHubRestClient

logger = logging.getLogger(__name__)

# Kinds that can be read from repository endpoints. Watch events only exist
# in the event stream.
SUPPORTED_KINDS = (
    ExportKind.COMMITS,
    ExportKind.PULL_REQUESTS,
    ExportKind.ISSUES,
    ExportKind.RELEASES,
)


class DataFetcher:
    """Exports one record kind across every repository the user owns."""

    def __init__(self, rest_client: GitHubRestClient):
        self.rest_client = rest_client

    @staticmethod
    def validate_kind(kind: str) -> ExportKind:
        """Return the ExportKind for ``kind`` or raise UnsupportedKindError."""
        export_kind = ExportKind.parse(kind)
        if export_kind not in SUPPORTED_KINDS:
            raise UnsupportedKindError(kind)
        return export_kind

    async def fetch(self, kind: str) -> Export:
        """Collect all records of ``kind`` from the user's owned repositories.

        Repositories are visited in the order the API lists them, and records
        keep the API's page order within each repository.

        Args:
            kind: One of commits, pull_requests, issues, releases

        Returns:
            Export with only the requested collection populated

        Raises:
            UnsupportedKindError: If ``kind`` is not supported (no request is made)
            GitHubAPIError: If any request fails
        """
        export_kind = self.validate_kind(kind)

        repos = await self.rest_client.get_owned_repos()
        user = await self.rest_client.get_authenticated_user()
        username = user.get("login", "")

        logger.debug(
            "Exporting %s for %s from %d repositories",
            export_kind.value,
            username,
            len(repos),
        )

        records = []
        for repo in repos:
            owner = (repo.get("owner") or {}).get("login", "")
            name = repo.get("name", "")
            records.extend(await self._fetch_repo(export_kind, owner, name, username))

        logger.debug("Collected %d %s", len(records), export_kind.value)

        return Export(**{export_kind.value: records})

    async def _fetch_repo(
        self,
        kind: ExportKind,
        owner: str,
        repo: str,
        username: str,
    ) -> list[Any]:
        """Fetch and convert one repository's records of ``kind``."""
        logger.debug("Fetching %s from %s/%s", kind.value, owner, repo)

        if kind is ExportKind.COMMITS:
            data = await self.rest_client.get_repo_commits(owner, repo, author=username)
            return [Commit.from_api(c, repo) for c in data]

        if kind is ExportKind.PULL_REQUESTS:
            data = await self.rest_client.get_repo_pulls(owner, repo)
            return [PullRequest.from_api(p, repo) for p in data]

        if kind is ExportKind.ISSUES:
            data = await self.rest_client.get_repo_issues(owner, repo)
            return [
                Issue.from_api(i, repo)
                for i in data
                if not Issue.is_pull_request(i)
            ]

        data = await self.rest_client.get_repo_releases(owner, repo)
        return [Release.from_api(r, repo) for r in data]
