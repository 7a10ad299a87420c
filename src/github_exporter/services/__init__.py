"""Services for GitHub data collection."""

from github_exporter.services.data_fetcher import DataFetcher
from github_exporter.services.event_fetcher import EventFetcher
from github_exporter.services.github_rest_client import GitHubRestClient

__all__ = [
    "GitHubRestClient",
    "DataFetcher",
    "EventFetcher",
]
