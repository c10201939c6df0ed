"""
Place search engine.

Responsibilities:
- Rate-limit callers with a fixed per-caller window.
- Cache resolved result lists by normalized query text.
- Ask the LLM for place recommendations on a cache miss.
- Repair the model's loosely structured JSON into a result list.
"""
