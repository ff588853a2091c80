"""
Pytest configuration and fixtures for leaderboard client tests.
Provides stub transports serving in-memory listings, plus sample payloads.
"""

from collections.abc import Callable
from typing import Any

import pytest
from core.utils.constants import DEFAULT_API_URL, ENV_API_URL, ENV_HTTP_TIMEOUT
from helpers import ListingServer, StubAdapter, night_payload, run_payload


@pytest.fixture(autouse=True)
def api_env(monkeypatch):
    monkeypatch.delenv(ENV_API_URL, raising=False)
    monkeypatch.delenv(ENV_HTTP_TIMEOUT, raising=False)


@pytest.fixture
def stub_adapter() -> Callable[[Callable[..., Any]], StubAdapter]:
    """
    Factory wrapping a handler into a recording stub adapter.

    Usage:
        adapter = stub_adapter(lambda **_: make_response(404, {}))
    """
    return StubAdapter


@pytest.fixture
def nights_server() -> Callable[..., StubAdapter]:
    """
    Factory for a stub adapter serving `count` nights.

    Usage:
        adapter = nights_server(25)
    """

    def _serve(count: int, *, total: int | None = None) -> StubAdapter:
        items = [night_payload(f"night-{i}", float(i)) for i in range(count)]
        return StubAdapter(ListingServer(items, total=total))

    return _serve


@pytest.fixture
def sample_night() -> dict[str, Any]:
    return night_payload()


@pytest.fixture
def sample_run() -> dict[str, Any]:
    return run_payload()


@pytest.fixture
def api_url() -> str:
    return DEFAULT_API_URL
