"""Rate limit tracking for GitHub REST API requests.

The exporter never waits for a quota reset: once the headers report that the
quota is spent, the next request fails immediately.
"""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Mapping, Optional

from github_exporter.exceptions import RateLimitExceededError

logger = logging.getLogger(__name__)

# Log a warning once remaining requests drop below this
LOW_REMAINING_THRESHOLD = 10


def format_time_remaining(seconds: float) -> str:
    """Format seconds into a human-friendly string."""
    if seconds <= 0:
        return "now"

    seconds = int(seconds)

    if seconds < 60:
        return f"{seconds} second{'s' if seconds != 1 else ''}"
    elif seconds < 3600:
        minutes, secs = divmod(seconds, 60)
        if secs > 0:
            return f"{minutes} min {secs} sec"
        return f"{minutes} minute{'s' if minutes != 1 else ''}"
    else:
        hours, rest = divmod(seconds, 3600)
        minutes = rest // 60
        if minutes > 0:
            return f"{hours} hr {minutes} min"
        return f"{hours} hour{'s' if hours != 1 else ''}"


def format_reset_time(reset_timestamp: float) -> str:
    """Format reset timestamp to a human-readable local time."""
    return datetime.fromtimestamp(reset_timestamp).strftime("%H:%M:%S")


@dataclass
class RateLimiter:
    """Tracks the REST quota reported by GitHub response headers."""

    limit: int = 5000
    remaining: int = 5000
    reset_time: float = field(default_factory=lambda: time.time() + 3600)

    @property
    def is_exhausted(self) -> bool:
        """Check if rate limit is exhausted."""
        return self.remaining <= 0

    @property
    def seconds_until_reset(self) -> float:
        """Get seconds until rate limit resets."""
        return max(0, self.reset_time - time.time())

    def check(self) -> None:
        """Raise if the quota is spent and has not reset yet."""
        if self.is_exhausted and self.seconds_until_reset > 0:
            raise RateLimitExceededError(
                f"Rate limit exceeded ({self.limit} requests). "
                f"Resets in {format_time_remaining(self.seconds_until_reset)} "
                f"(at {format_reset_time(self.reset_time)})"
            )

    def update_from_headers(self, headers: Mapping[str, str]) -> None:
        """Update state from GitHub API response headers."""
        if "x-ratelimit-limit" in headers:
            self.limit = int(headers["x-ratelimit-limit"])
        if "x-ratelimit-remaining" in headers:
            self.remaining = int(headers["x-ratelimit-remaining"])
        if "x-ratelimit-reset" in headers:
            self.reset_time = float(headers["x-ratelimit-reset"])

        if 0 < self.remaining < LOW_REMAINING_THRESHOLD:
            logger.warning(
                "Only %d/%d API requests remaining", self.remaining, self.limit
            )


# Global rate limiter instance
_rate_limiter: Optional[RateLimiter] = None


def get_rate_limiter() -> RateLimiter:
    """Get or create the global rate limiter instance."""
    global _rate_limiter
    if _rate_limiter is None:
        _rate_limiter = RateLimiter()
    return _rate_limiter


def reset_rate_limiter() -> None:
    """Reset the global rate limiter (useful for testing)."""
    global _rate_limiter
    _rate_limiter = None
