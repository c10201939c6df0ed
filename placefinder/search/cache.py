from __future__ import annotations

import threading
import time
from typing import Any, Callable

_DEFAULT_TTL = 60 * 60  # 1 hour


def make_key(query: str) -> str:
    return query.strip().lower()


class ResultCache:
    """
    In-memory result cache keyed by normalized query text.

    Entries older than ``ttl`` seconds are treated as absent and dropped on
    lookup. There is no size-based eviction.
    """

    def __init__(
        self,
        ttl: float = _DEFAULT_TTL,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.ttl = ttl
        self._clock = clock
        self._entries: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> list[Any] | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry and self._clock() - entry["created_at"] < self.ttl:
                self._hits += 1
                return entry["results"]
            if entry:
                del self._entries[key]
            self._misses += 1
            return None

    def put(self, key: str, results: list[Any]) -> None:
        with self._lock:
            self._entries[key] = {"results": results, "created_at": self._clock()}

    def stats(self) -> dict:
        with self._lock:
            total = self._hits + self._misses
            return {
                "size": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(self._hits / total * 100, 1) if total > 0 else 0.0,
            }

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
