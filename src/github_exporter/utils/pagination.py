"""Pagination utilities for GitHub API."""

import re
from typing import Optional
from urllib.parse import parse_qs, urlparse

LINK_PATTERN = re.compile(r'<([^>]+)>;\s*rel="([^"]+)"')


def parse_link_header(link_header: Optional[str]) -> dict[str, str]:
    """Parse GitHub's Link header into a dictionary of rel -> url.

    Example Link header:
    <https://api.github.com/user/repos?page=2>; rel="next",
    <https://api.github.com/user/repos?page=5>; rel="last"

    Returns:
        dict: {"next": "url", "last": "url", "prev": "url", "first": "url"}
    """
    if not link_header:
        return {}

    return {rel: url for url, rel in LINK_PATTERN.findall(link_header)}


def get_next_page_url(link_header: Optional[str]) -> Optional[str]:
    """Extract the 'next' page URL from a Link header.

    None means the current page is the last one.
    """
    return parse_link_header(link_header).get("next")


def get_next_page_number(link_header: Optional[str]) -> Optional[int]:
    """Extract the page number of the 'next' link, if there is one."""
    next_url = get_next_page_url(link_header)
    if not next_url:
        return None

    page_values = parse_qs(urlparse(next_url).query).get("page", [])
    if page_values:
        try:
            return int(page_values[0])
        except ValueError:
            return None

    return None
