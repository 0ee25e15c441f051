"""Centralised settings for the SiteRec pipeline.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_bool(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _env_optional_int(name: str) -> int | None:
    value = os.environ.get(name, "").strip()
    return int(value) if value else None


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Crawler
    # ------------------------------------------------------------------
    renderer: str = field(
        default_factory=lambda: os.environ.get("RENDERER", "playwright")
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "CRAWL_USER_AGENT",
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/58.0.3029.110 Safari/537.36",
        )
    )
    fetch_timeout: float = field(
        default_factory=lambda: float(os.environ.get("FETCH_TIMEOUT", "6.0"))
    )
    max_pages: int | None = field(
        default_factory=lambda: _env_optional_int("MAX_PAGES")
    )
    strict_host_match: bool = field(
        default_factory=lambda: _env_bool("STRICT_HOST_MATCH")
    )

    # ------------------------------------------------------------------
    # Keyword extraction model
    # ------------------------------------------------------------------
    llm_provider: str = field(
        default_factory=lambda: os.environ.get("LLM_PROVIDER", "openai")
    )
    openai_chat_model: str = field(
        default_factory=lambda: os.environ.get("OPENAI_CHAT_MODEL", "gpt-3.5-turbo-1106")
    )
    ollama_chat_model: str = field(
        default_factory=lambda: os.environ.get("OLLAMA_CHAT_MODEL", "llama3.1:8b")
    )
    max_keywords: int = field(
        default_factory=lambda: int(os.environ.get("MAX_KEYWORDS", "5"))
    )
    keyword_input_chars: int = field(
        default_factory=lambda: int(os.environ.get("KEYWORD_INPUT_CHARS", "12000"))
    )

    # ------------------------------------------------------------------
    # Keyword enrichment batching (external rate limit)
    # ------------------------------------------------------------------
    keyword_batch_size: int = field(
        default_factory=lambda: int(os.environ.get("KEYWORD_BATCH_SIZE", "5"))
    )
    keyword_batch_delay: float = field(
        default_factory=lambda: float(os.environ.get("KEYWORD_BATCH_DELAY", "20.0"))
    )

    # ------------------------------------------------------------------
    # Fixtures
    # ------------------------------------------------------------------
    fixtures_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("SITEREC_FIXTURES", "mock"))
    )

    @property
    def pages_fixture(self) -> Path:
        """Path to the crawled-pages fixture (``[{url, html, keywords?}]``)."""
        return self.fixtures_dir / "result_get_page_info.json"

    @property
    def users_fixture(self) -> Path:
        """Path to the visit-history fixture (``[{username, visited_pages, ...}]``)."""
        return self.fixtures_dir / "mock_user_data.json"


# Module-level singleton; import this everywhere:
#   from siterec.config import settings
settings = Settings()
