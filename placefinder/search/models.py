from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    query: str | None = Field(default=None, description="Free-text place query")


class ResultRecord(BaseModel):
    title: str
    description: str
    locationDetails: str | None = None
    similarity: str | None = Field(
        default=None, description="Why the place matches the query"
    )
    category: str = Field(..., description="One or more comma-separated tags")
    url: str | None = None


class SearchResponse(BaseModel):
    # Model output is passed through untouched, so entries are not validated
    # against ResultRecord.
    results: list[Any] = Field(default_factory=list)
    error: str | None = None


class CacheStats(BaseModel):
    size: int
    hits: int
    misses: int
    hit_rate: float
