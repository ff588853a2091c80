"""Stub transports and sample payloads shared by the tests."""

import json
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any


def make_response(status_code: int = 200, body: Any = None) -> SimpleNamespace:
    """Build a minimal response object; non-bytes bodies are JSON encoded."""
    if isinstance(body, bytes):
        content = body
    else:
        content = json.dumps(body).encode("utf-8")

    return SimpleNamespace(status_code=status_code, content=content)


class StubAdapter:
    """Minimal HttpAdapter stub recording every call."""

    def __init__(self, handler: Callable[..., Any]) -> None:
        self.handler = handler
        self.calls: list[dict[str, Any]] = []

    def get(self, *, url: str, params: dict[str, Any] | None = None) -> Any:
        self.calls.append({"url": url, "params": params})
        return self.handler(url=url, params=params)


class ListingServer:
    """Serves `{total, items}` pages sliced by the offset/limit query params."""

    def __init__(self, items: list[dict[str, Any]], *, total: int | None = None) -> None:
        self.items = items
        self.total = len(items) if total is None else total

    def __call__(self, *, url: str, params: dict[str, Any] | None = None) -> SimpleNamespace:
        params = params or {}
        offset = int(params.get("offset", 0))
        limit = int(params.get("limit", 10))

        return make_response(
            200,
            {"total": self.total, "items": self.items[offset : offset + limit]},
        )


def night_payload(uuid: str = "night-1", average_real_time: float = 312.5) -> dict[str, Any]:
    return {
        "uuid": uuid,
        "averageRealTime": average_real_time,
        "scope": "public",
        "verified": True,
        "season": 3,
        "squadSize": 2,
        "createdAt": "2024-02-10T21:14:00.000Z",
        "users": [
            {"uuid": "u-1", "ign": "Lotus", "role": "host", "scope": "public"},
            {"scope": "anonymous"},
        ],
    }


def run_payload(uuid: str = "run-1", real_time: float | None = 95.2) -> dict[str, Any]:
    return {
        "uuid": uuid,
        "verified": True,
        "lastHydrolystLimbBreakTime": 88.1,
        "realTime": real_time,
        "extractionTime": 7.3,
        "loadTime": 12.0,
        "medianLimbBreakTime": 4.2,
        "night": {
            "uuid": "night-1",
            "scope": "public",
            "verified": True,
            "season": 3,
            "squadSize": 4,
            "createdAt": "2024-02-10T21:14:00.000Z",
            "users": [{"uuid": "u-1", "ign": "Lotus", "role": "host", "scope": "public"}],
        },
        "eidolons": [
            {
                "result": "capture",
                "spawnDelay": 1.5,
                "spawnAnimationTime": 3.0,
                "firstLimbBreakTime": 10.2,
                "lastLimbBreakTime": 30.4,
                "medianLimbBreakTime": 5.1,
                "limbBreakTimes": [10.2, 15.0, 20.1, 30.4],
                "shrineTime": 2.0,
                "shardInsertionTimes": [1.1, 1.3, 0.9, 1.0],
                "capshotTime": 0.4,
            }
        ],
    }


