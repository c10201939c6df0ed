from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from .cache import ResultCache
from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .rate_limit import RateLimiter


@dataclass
class SearchState:
    """Process-local mutable state shared by all search requests."""

    cache: ResultCache
    limiter: RateLimiter

    @classmethod
    def from_config(
        cls,
        config: SearchConfig = DEFAULT_SEARCH_CONFIG,
        clock: Callable[[], float] = time.time,
    ) -> SearchState:
        return cls(
            cache=ResultCache(ttl=config.cache_ttl, clock=clock),
            limiter=RateLimiter(limit=config.rate_limit, window=config.rate_window),
        )

    def clear(self) -> None:
        self.cache.clear()
        self.limiter.reset()
