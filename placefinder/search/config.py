from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchConfig:
    rate_limit: int = 10  # requests per window per caller
    rate_window: float = 60.0  # seconds
    cache_ttl: float = 60.0 * 60  # 1 hour
    cache_placeholder_results: bool = False


DEFAULT_SEARCH_CONFIG = SearchConfig()
