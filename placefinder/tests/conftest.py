from __future__ import annotations

import json
import time

import pytest


class FakeClock:
    """Manually advanced replacement for ``time.time``."""

    def __init__(self, start: float = 1_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeCompletion:
    """Stand-in for ``complete_search`` that records every call."""

    def __init__(self, payload: object = None, raw: str | None = None) -> None:
        self.raw = raw if raw is not None else json.dumps(payload)
        self.calls: list[str] = []
        self.error: Exception | None = None

    def __call__(self, query, config) -> str:
        self.calls.append(query)
        if self.error is not None:
            raise self.error
        return self.raw


def make_places(n: int = 7) -> list[dict]:
    return [
        {
            "title": f"Place {i}",
            "description": f"Description {i}",
            "locationDetails": f"{i} Main Street",
            "similarity": f"Reason {i}",
            "category": "Cafe, Bakery",
            "url": f"https://example.com/{i}",
        }
        for i in range(n)
    ]


@pytest.fixture
def clock(monkeypatch) -> FakeClock:
    # The rate limiter storage reads time.time directly.
    fake = FakeClock()
    monkeypatch.setattr(time, "time", fake)
    return fake


@pytest.fixture
def places() -> list[dict]:
    return make_places()


@pytest.fixture
def completion(places) -> FakeCompletion:
    return FakeCompletion({"results": places})
