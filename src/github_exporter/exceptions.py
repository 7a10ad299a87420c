"""Exceptions for GitHub Exporter.

Exception Hierarchy:
    GitHubExporterError (base)
    ├── ConfigurationError (missing or invalid settings, raised before any request)
    ├── UnsupportedKindError (record kind the repository fetcher cannot export)
    ├── PayloadParseError (one event payload could not be decoded)
    ├── RateLimitExceededError (local rate limit tracking, before making request)
    └── GitHubAPIError (HTTP API errors with status codes)
        ├── AuthenticationError (401 bad credentials)
        ├── GitHubRateLimitError (403 rate limit from API response)
        └── GitHubNotFoundError (404 not found)

Usage:
    - PayloadParseError is the only error the exporter recovers from: the
      offending event is skipped and the run continues.
    - Everything else aborts the run; the CLI prints a one-line message.
"""

__all__ = [
    "GitHubExporterError",
    "ConfigurationError",
    "UnsupportedKindError",
    "PayloadParseError",
    "RateLimitExceededError",
    "GitHubAPIError",
    "AuthenticationError",
    "GitHubRateLimitError",
    "GitHubNotFoundError",
]


class GitHubExporterError(Exception):
    """Base exception for all GitHub Exporter errors."""

    pass


class ConfigurationError(GitHubExporterError):
    """Raised when required configuration (such as the API token) is missing."""

    pass


class UnsupportedKindError(GitHubExporterError):
    """Raised when a record kind cannot be exported by the repository fetcher."""

    def __init__(self, kind: str):
        super().__init__(f"unsupported kind: {kind}")
        self.kind = kind


class PayloadParseError(GitHubExporterError):
    """Raised when an event payload does not match its declared event type."""

    def __init__(self, event_type: str, event_id: str = "", reason: str = ""):
        message = f"Could not parse {event_type} payload"
        if event_id:
            message += f" for event {event_id}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.event_type = event_type
        self.event_id = event_id


class RateLimitExceededError(GitHubExporterError):
    """Raised by the local rate limiter when the quota is known to be spent.

    This is a preemptive exception raised before making a request. Unlike
    GitHubRateLimitError, this does not involve an actual API call.
    """

    pass


class GitHubAPIError(GitHubExporterError):
    """Base exception for GitHub API errors (HTTP responses with error status codes)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: dict | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class AuthenticationError(GitHubAPIError):
    """Raised when the token is rejected (HTTP 401)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = 401,
        response_body: dict | None = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)


class GitHubRateLimitError(GitHubAPIError):
    """Raised when GitHub API returns a rate limit error (HTTP 403).

    For preemptive rate limiting (before making requests), see RateLimitExceededError.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = 403,
        response_body: dict | None = None,
        reset_time: float | None = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)
        self.reset_time = reset_time


class GitHubNotFoundError(GitHubAPIError):
    """Raised when a GitHub resource is not found (HTTP 404)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = 404,
        response_body: dict | None = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)
