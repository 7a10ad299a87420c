"""GitHub Exporter - Export your GitHub activity to JSON, CSV or the terminal.

Two collection strategies are available:
- Repository mode: one record kind across every repository you own
- Event mode: commits, pull requests, issues, releases and stars from your
  public event stream

Example usage:
    ```python
    from github_exporter import GitHubExporter

    async with GitHubExporter(token="ghp_xxx") as exporter:
        export = await exporter.fetch_repos("releases")
        print(f"Releases: {len(export.releases)}")
    ```
"""

try:
    from github_exporter._version import version as __version__
except ImportError:
    __version__ = "0.0.0.dev0"

from github_exporter.config import Config
from github_exporter.exceptions import (
    AuthenticationError,
    ConfigurationError,
    GitHubAPIError,
    GitHubExporterError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    PayloadParseError,
    RateLimitExceededError,
    UnsupportedKindError,
)
from github_exporter.models import (
    Commit,
    Export,
    ExportKind,
    Issue,
    PullRequest,
    Release,
    Watch,
)
from github_exporter.sdk import FetchMode, GitHubExporter

__all__ = [
    # Main SDK class
    "GitHubExporter",
    "FetchMode",
    # Configuration
    "Config",
    # Exceptions
    "GitHubExporterError",
    "ConfigurationError",
    "UnsupportedKindError",
    "PayloadParseError",
    "RateLimitExceededError",
    "GitHubAPIError",
    "AuthenticationError",
    "GitHubRateLimitError",
    "GitHubNotFoundError",
    # Models
    "Commit",
    "PullRequest",
    "Issue",
    "Release",
    "Watch",
    "Export",
    "ExportKind",
]
