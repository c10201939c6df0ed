from __future__ import annotations

import logging
import time
from typing import Callable

from fastapi import Depends, FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .llm.config import DEFAULT_LLM_CONFIG, LLMConfig
from .llm.groq_client import complete_search
from .search.config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .search.errors import SearchError
from .search.models import CacheStats, SearchRequest, SearchResponse
from .search.service import CompletionFn, SearchService
from .search.state import SearchState

logger = logging.getLogger(__name__)

SEARCH_PATH = "/api/search"


def get_search_service(request: Request) -> SearchService:
    return request.app.state.search_service


def enforce_rate_limit(
    request: Request,
    service: SearchService = Depends(get_search_service),
) -> None:
    """Consume one request from the caller's window; raise 429 when spent."""
    caller_id = request.headers.get("x-forwarded-for") or "unknown"
    service.check_rate_limit(caller_id)


async def search_error_handler(request: Request, exc: SearchError) -> JSONResponse:
    body = SearchResponse(error=exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(exclude_none=True),
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    if request.url.path == SEARCH_PATH:
        logger.info("Rejected malformed search request: %s", exc.errors())
        return JSONResponse(status_code=400, content={"results": []})
    return await request_validation_exception_handler(request, exc)


def create_app(
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
    llm_config: LLMConfig = DEFAULT_LLM_CONFIG,
    complete: CompletionFn = complete_search,
    clock: Callable[[], float] = time.time,
) -> FastAPI:
    app = FastAPI(title="Place Finder Search API", version="1.0.0")
    app.state.search_service = SearchService(
        state=SearchState.from_config(config, clock=clock),
        config=config,
        llm_config=llm_config,
        complete=complete,
    )
    app.add_exception_handler(SearchError, search_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # ── Public endpoints ─────────────────────────────────────────────────

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post(
        SEARCH_PATH,
        response_model=SearchResponse,
        response_model_exclude_unset=True,
        dependencies=[Depends(enforce_rate_limit)],
    )
    def search(
        body: SearchRequest,
        service: SearchService = Depends(get_search_service),
    ) -> SearchResponse:
        return SearchResponse(results=service.resolve(body.query))

    @app.get(f"{SEARCH_PATH}/stats", response_model=CacheStats)
    def search_stats(
        service: SearchService = Depends(get_search_service),
    ) -> CacheStats:
        return CacheStats(**service.state.cache.stats())

    return app


app = create_app()
