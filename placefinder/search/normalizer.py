"""
Shape repair for model output.

The model is asked for ``{"results": [...]}`` but does not always comply.
``classify_response`` finds the most plausible result list in whatever JSON
came back and tags how it was found, so the caller can decide what to do
with each case (for example, whether to cache it).
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .errors import ResponseParseError
from .models import ResultRecord

logger = logging.getLogger(__name__)

PLACEHOLDER_RECORD = ResultRecord(
    title="Response Format Issue",
    description="The search service returned data in an unexpected format.",
    locationDetails="Please try a different search query",
    similarity="N/A",
    category="Error",
)


class ShapeKind(str, Enum):
    exact_shape = "exact_shape"
    single_array_field = "single_array_field"
    bare_array = "bare_array"
    unrecognized = "unrecognized"


@dataclass(frozen=True)
class ParsedShape:
    kind: ShapeKind
    results: list[Any] = field(default_factory=list)
    source_field: str | None = None

    @property
    def is_placeholder(self) -> bool:
        return self.kind is ShapeKind.unrecognized


def classify_response(parsed: Any) -> ParsedShape:
    """
    Locate the result list inside a decoded model response.

    Rules are tried in order and the first match wins:

    1. an object with a ``results`` list is used as-is;
    2. otherwise the first field (in document order) holding a list;
    3. otherwise a top-level list;
    4. otherwise a single placeholder record with category ``"Error"``.

    Entries are never type-checked; malformed items pass through.
    """
    if isinstance(parsed, dict):
        if isinstance(parsed.get("results"), list):
            return ParsedShape(ShapeKind.exact_shape, parsed["results"], "results")
        for key, value in parsed.items():
            if isinstance(value, list):
                return ParsedShape(ShapeKind.single_array_field, value, key)
    elif isinstance(parsed, list):
        return ParsedShape(ShapeKind.bare_array, parsed)

    return ParsedShape(
        ShapeKind.unrecognized,
        [PLACEHOLDER_RECORD.model_dump(exclude_none=True)],
    )


def _reject_constant(name: str) -> None:
    # NaN and Infinity are not JSON.
    raise ValueError(f"invalid JSON constant {name}")


def parse_model_output(text: str | None) -> ParsedShape:
    """Decode raw model text and classify it; empty text means no results."""
    try:
        parsed = json.loads(text or '{"results": []}', parse_constant=_reject_constant)
    except ValueError as exc:
        logger.exception("Failed to parse search results")
        raise ResponseParseError() from exc

    shape = classify_response(parsed)
    if shape.kind is ShapeKind.unrecognized:
        logger.warning("Model returned an unrecognized response shape: %.200s", text)
    elif shape.kind is not ShapeKind.exact_shape:
        logger.info("Recovered results from %s response shape", shape.kind.value)
    return shape
