from __future__ import annotations

import logging
import time
from typing import Any, Callable

from ..llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from ..llm.groq_client import complete_search
from .cache import make_key
from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .errors import (
    ConfigurationError,
    EmptyQueryError,
    RateLimitExceeded,
    SearchError,
    SearchFailedError,
)
from .normalizer import parse_model_output
from .state import SearchState

logger = logging.getLogger(__name__)

CompletionFn = Callable[[str, LLMConfig], str]


class SearchService:
    def __init__(
        self,
        state: SearchState | None = None,
        config: SearchConfig = DEFAULT_SEARCH_CONFIG,
        llm_config: LLMConfig = DEFAULT_LLM_CONFIG,
        complete: CompletionFn = complete_search,
    ) -> None:
        self.config = config
        self.llm_config = llm_config
        self.state = state or SearchState.from_config(config)
        self._complete = complete

    def check_rate_limit(self, caller_id: str) -> None:
        if not self.state.limiter.check_and_consume(caller_id):
            logger.warning("Rate limit exceeded for caller %s", caller_id)
            raise RateLimitExceeded()

    def resolve(self, query: str | None) -> list[Any]:
        """
        Return place recommendations for ``query``.

        Served from cache when a fresh entry exists for the normalized
        query; otherwise the model is asked once and its answer repaired
        into a result list. Failures are raised as ``SearchError``.
        """
        if not query or not query.strip():
            raise EmptyQueryError()

        key = make_key(query)
        cached = self.state.cache.get(key)
        if cached is not None:
            logger.info("Cache hit for %r", key)
            return cached

        if not self.llm_config.has_credentials:
            logger.error("Groq API key is missing")
            raise ConfigurationError()

        start_time = time.time()
        try:
            text = self._complete(query, self.llm_config)
            shape = parse_model_output(text)
        except SearchError:
            raise
        except Exception as exc:
            logger.exception("Search API error")
            raise SearchFailedError() from exc

        elapsed_ms = round((time.time() - start_time) * 1000, 1)
        logger.info(
            "Resolved %r to %d results (%s) in %sms",
            key, len(shape.results), shape.kind.value, elapsed_ms,
        )

        if not shape.is_placeholder or self.config.cache_placeholder_results:
            self.state.cache.put(key, shape.results)
        return shape.results
