from __future__ import annotations

import logging

from groq import Groq

from .config import DEFAULT_LLM_CONFIG, LLMConfig

logger = logging.getLogger(__name__)

RESULT_COUNT = 7

SYSTEM_PROMPT = f"""\
You are a travel assistant that helps people find places that are similar to \
other places they know. Given a query asking for similar locations, return a \
JSON object with a "results" array containing exactly {RESULT_COUNT} similar places.

Your response MUST be in this exact format:
{{
  "results": [
    {{
      "title": "Name of the place",
      "description": "Brief description",
      "locationDetails": "Address or location info",
      "similarity": "Why it's similar",
      "category": "Type of place",
      "url": "Optional link"
    }}
  ]
}}

Guidelines:
- Provide exactly {RESULT_COUNT} results when possible.
- Vary the wording of "similarity". Do not start every entry with the same \
phrase; point to the concrete qualities (atmosphere, food, architecture, \
crowd, price) that connect each place to the query.
- "category" may list several comma-separated tags, e.g. "Cafe, Bookshop".
- If the query has nothing to do with finding places, return \
{{"results": []}}.

This exact format with a "results" array is required. Do not return any other format."""


def complete_search(query: str, config: LLMConfig = DEFAULT_LLM_CONFIG) -> str:
    """
    Send ``query`` to the Groq chat completion API and return the raw
    message content.

    Errors from the SDK (network failures, timeouts, API errors) propagate
    to the caller unchanged; nothing is retried.
    """
    client = Groq(
        api_key=config.api_key,
        timeout=config.timeout,
        max_retries=config.max_retries,
    )
    logger.info("Requesting place recommendations from %s", config.model)
    response = client.chat.completions.create(
        model=config.model,
        messages=[
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": query},
        ],
        max_tokens=config.max_tokens,
        temperature=config.temperature,
        response_format={"type": "json_object"},
    )
    return response.choices[0].message.content or ""
