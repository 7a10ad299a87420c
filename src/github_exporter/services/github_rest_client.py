"""GitHub REST API client."""

import logging
from typing import Any, AsyncIterator, Optional

import httpx

from github_exporter import __version__
from github_exporter.config import Config, get_config
from github_exporter.exceptions import (
    AuthenticationError,
    GitHubAPIError,
    GitHubNotFoundError,
    GitHubRateLimitError,
)
from github_exporter.utils.pagination import get_next_page_number, get_next_page_url
from github_exporter.utils.rate_limiter import RateLimiter, get_rate_limiter

logger = logging.getLogger(__name__)


def _json_body(response: httpx.Response) -> dict[str, Any]:
    """Decode an error body, tolerating empty or non-JSON content."""
    if not response.content:
        return {}
    try:
        body = response.json()
    except ValueError:
        return {"message": response.text}
    return body if isinstance(body, dict) else {"message": str(body)}


class GitHubRestClient:
    """Async client for GitHub REST API."""

    def __init__(
        self,
        config: Optional[Config] = None,
        rate_limiter: Optional[RateLimiter] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or get_config()
        self.rate_limiter = rate_limiter or get_rate_limiter()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_headers(self) -> dict[str, str]:
        """Get headers for API requests."""
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
            "User-Agent": f"github-exporter/{__version__}",
        }
        if self.config.github_token:
            headers["Authorization"] = f"Bearer {self.config.github_token}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.github_api_url,
                headers=self._get_headers(),
                timeout=self.config.request_timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "GitHubRestClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
    ) -> httpx.Response:
        """Make an API request, raising on any error status."""
        self.rate_limiter.check()

        client = await self._get_client()
        response = await client.request(method, endpoint, params=params)

        self.rate_limiter.update_from_headers(response.headers)

        if response.status_code < 400:
            return response

        body = _json_body(response)
        message = body.get("message", "Unknown error")

        if response.status_code == 401:
            raise AuthenticationError(
                f"Authentication failed: {message}",
                response_body=body,
            )
        elif response.status_code == 404:
            raise GitHubNotFoundError(
                f"Resource not found: {endpoint}",
                response_body=body,
            )
        elif response.status_code in (403, 429):
            if "rate limit" in message.lower() or self.rate_limiter.is_exhausted:
                raise GitHubRateLimitError(
                    "Rate limit exceeded",
                    status_code=response.status_code,
                    response_body=body,
                    reset_time=self.rate_limiter.reset_time,
                )
            raise GitHubAPIError(
                f"Forbidden: {message}",
                status_code=response.status_code,
                response_body=body,
            )
        elif response.status_code >= 500:
            raise GitHubAPIError(
                f"Server error: {response.status_code}",
                status_code=response.status_code,
            )
        raise GitHubAPIError(
            f"API error: {message}",
            status_code=response.status_code,
            response_body=body,
        )

    async def get(self, endpoint: str, **params: Any) -> Any:
        """Make a GET request and return JSON response."""
        response = await self._request("GET", endpoint, params=params or None)
        return response.json()

    async def iter_pages(
        self,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
    ) -> AsyncIterator[list[dict[str, Any]]]:
        """Yield each page of a paginated list endpoint, in order.

        Pages are followed through the ``next`` relation of the Link header;
        its absence ends the iteration.
        """
        query = dict(params or {})
        query.setdefault("per_page", self.config.per_page)

        url: Optional[str] = endpoint
        page = 1
        while url:
            # The next link already carries the query string
            response = await self._request(
                "GET", url, params=query if page == 1 else None
            )
            items = response.json()
            if not isinstance(items, list):
                raise GitHubAPIError(
                    f"Expected a list from {endpoint}, got {type(items).__name__}",
                    status_code=response.status_code,
                )

            logger.debug("Fetched page %d of %s (%d items)", page, endpoint, len(items))
            yield items

            link_header = response.headers.get("Link")
            url = get_next_page_url(link_header)
            page = get_next_page_number(link_header) or page + 1

    async def get_paginated(
        self,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
    ) -> list[dict[str, Any]]:
        """Fetch all pages of a paginated endpoint.

        Args:
            endpoint: API endpoint
            params: Extra query parameters for the first request

        Returns:
            List of all items across all pages, in page order
        """
        all_items: list[dict[str, Any]] = []
        async for items in self.iter_pages(endpoint, params):
            all_items.extend(items)
        return all_items

    # Convenience methods for the endpoints the exporter uses

    async def get_authenticated_user(self) -> dict[str, Any]:
        """Get the profile of the user the token belongs to."""
        return await self.get("/user")

    async def get_owned_repos(self) -> list[dict[str, Any]]:
        """Get repositories owned by the authenticated user."""
        return await self.get_paginated("/user/repos", {"affiliation": "owner"})

    async def get_repo_commits(
        self,
        owner: str,
        repo: str,
        author: Optional[str] = None,
    ) -> list[dict[str, Any]]:
        """Get repository commits, optionally filtered by author."""
        params = {"author": author} if author else None
        return await self.get_paginated(f"/repos/{owner}/{repo}/commits", params)

    async def get_repo_pulls(self, owner: str, repo: str) -> list[dict[str, Any]]:
        """Get repository pull requests (API default state)."""
        return await self.get_paginated(f"/repos/{owner}/{repo}/pulls")

    async def get_repo_issues(self, owner: str, repo: str) -> list[dict[str, Any]]:
        """Get repository issues. GitHub includes pull requests in this list."""
        return await self.get_paginated(f"/repos/{owner}/{repo}/issues")

    async def get_repo_releases(self, owner: str, repo: str) -> list[dict[str, Any]]:
        """Get repository releases."""
        return await self.get_paginated(f"/repos/{owner}/{repo}/releases")

    def iter_user_events(self, username: str) -> AsyncIterator[list[dict[str, Any]]]:
        """Iterate pages of events performed by ``username``."""
        return self.iter_pages(f"/users/{username}/events")
