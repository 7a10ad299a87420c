"""Tests for rate limiter module."""

import time

import pytest

from github_exporter.exceptions import RateLimitExceededError
from github_exporter.utils.rate_limiter import (
    LOW_REMAINING_THRESHOLD,
    RateLimiter,
    format_reset_time,
    format_time_remaining,
    get_rate_limiter,
    reset_rate_limiter,
)


class TestFormatTimeRemaining:
    """Tests for format_time_remaining function."""

    def test_zero_and_negative(self):
        assert format_time_remaining(0) == "now"
        assert format_time_remaining(-10) == "now"

    def test_seconds_only(self):
        assert format_time_remaining(30) == "30 seconds"
        assert format_time_remaining(1) == "1 second"

    def test_minutes(self):
        assert format_time_remaining(60) == "1 minute"
        assert format_time_remaining(120) == "2 minutes"
        assert format_time_remaining(90) == "1 min 30 sec"

    def test_hours(self):
        assert format_time_remaining(3600) == "1 hour"
        assert format_time_remaining(5400) == "1 hr 30 min"


class TestFormatResetTime:
    """Tests for format_reset_time function."""

    def test_formats_timestamp(self):
        """Test that timestamp is formatted as HH:MM:SS."""
        result = format_reset_time(1700000000)
        assert len(result.split(":")) == 3


class TestRateLimiter:
    """Tests for RateLimiter state tracking."""

    def test_update_from_headers(self):
        limiter = RateLimiter()
        limiter.update_from_headers(
            {
                "x-ratelimit-limit": "5000",
                "x-ratelimit-remaining": "4999",
                "x-ratelimit-reset": "1700000000",
            }
        )

        assert limiter.limit == 5000
        assert limiter.remaining == 4999
        assert limiter.reset_time == 1700000000.0

    def test_check_passes_with_quota(self):
        RateLimiter(remaining=1).check()

    def test_check_raises_when_exhausted(self):
        """Test that an exhausted quota fails before any request is sent."""
        limiter = RateLimiter(remaining=0, reset_time=time.time() + 600)

        with pytest.raises(RateLimitExceededError, match="Resets in"):
            limiter.check()

    def test_check_passes_after_reset(self):
        """Test that an exhausted quota whose reset time passed is usable."""
        RateLimiter(remaining=0, reset_time=time.time() - 1).check()

    def test_low_remaining_logs_warning(self, caplog):
        limiter = RateLimiter()
        limiter.update_from_headers({"x-ratelimit-remaining": str(LOW_REMAINING_THRESHOLD - 1)})

        assert "API requests remaining" in caplog.text


class TestGlobalRateLimiter:
    def test_reset(self):
        first = get_rate_limiter()
        assert get_rate_limiter() is first

        reset_rate_limiter()
        assert get_rate_limiter() is not first
