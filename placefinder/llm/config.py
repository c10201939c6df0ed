from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class LLMConfig:
    api_key: str = field(default_factory=lambda: os.getenv("GROQ_API_KEY", ""))
    model: str = "llama-3.3-70b-versatile"
    temperature: float = 0.7
    timeout: float = 30.0
    max_retries: int = 0
    max_tokens: int = 2048

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.api_key.strip())


DEFAULT_LLM_CONFIG = LLMConfig()
