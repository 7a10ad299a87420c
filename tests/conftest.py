"""Pytest configuration and fixtures."""

from typing import Any, Callable

import httpx
import pytest

from github_exporter.config import Config, set_config
from github_exporter.utils.rate_limiter import reset_rate_limiter

API_URL = "https://api.github.test"


@pytest.fixture(autouse=True)
def reset_globals():
    """Reset global state before each test."""
    reset_rate_limiter()
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def test_config():
    """Create a test configuration."""
    config = Config(github_token="test_token", github_api_url=API_URL)
    set_config(config)
    return config


@pytest.fixture
def github_api() -> Callable[..., httpx.MockTransport]:
    """Build a MockTransport from a ``{path: response}`` routing table.

    Values may be a single httpx.Response or a list consumed one per request.
    Every request is recorded on ``transport.requests``.
    """

    def build(routes: dict[str, Any]) -> httpx.MockTransport:
        requests: list[httpx.Request] = []
        queues = {
            path: list(value) if isinstance(value, list) else value
            for path, value in routes.items()
        }

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            value = queues.get(request.url.path)
            if value is None:
                return httpx.Response(404, json={"message": "Not Found"})
            if isinstance(value, list):
                return value.pop(0)
            return value

        transport = httpx.MockTransport(handler)
        transport.requests = requests
        return transport

    return build

