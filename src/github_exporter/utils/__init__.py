"""Utility modules for GitHub Exporter."""

from github_exporter.utils.pagination import (
    get_next_page_number,
    get_next_page_url,
    parse_link_header,
)
from github_exporter.utils.rate_limiter import RateLimiter, get_rate_limiter, reset_rate_limiter

__all__ = [
    "RateLimiter",
    "get_rate_limiter",
    "reset_rate_limiter",
    "parse_link_header",
    "get_next_page_url",
    "get_next_page_number",
]
