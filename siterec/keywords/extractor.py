"""Keyword extraction through a JSON-mode chat model.

Providers
---------
``openai`` (default)
    LangChain ``ChatOpenAI`` with ``response_format={"type": "json_object"}``.
    Requires ``OPENAI_API_KEY``.  Configure via ``OPENAI_CHAT_MODEL``.

``ollama``
    LangChain ``ChatOllama`` with ``format="json"``.
    Configure via ``OLLAMA_CHAT_MODEL``.

The model reply is validated against :class:`KeywordResponse`.  Any reply
that is empty, not JSON, or not shaped ``{"keywords": [str, ...]}`` yields an
empty keyword list instead of an error.
"""

from __future__ import annotations

from langchain_core.language_models.chat_models import BaseChatModel
from pydantic import BaseModel, ValidationError

from siterec.config import settings
from siterec.models import unique_keywords

_SYSTEM_PROMPT = "You are a helpful assistant designed to output JSON."


class KeywordResponse(BaseModel):
    keywords: list[str] = []


# ---------------------------------------------------------------------------
# LLM helper
# ---------------------------------------------------------------------------

def _get_llm() -> BaseChatModel:
    """Return a JSON-mode LangChain chat model based on ``settings``."""
    if settings.llm_provider == "ollama":
        from langchain_ollama import ChatOllama

        return ChatOllama(model=settings.ollama_chat_model, temperature=0, format="json")

    from langchain_openai import ChatOpenAI

    return ChatOpenAI(
        model=settings.openai_chat_model,
        temperature=0,
        model_kwargs={"response_format": {"type": "json_object"}},
    )


def _build_messages(text: str) -> list[tuple[str, str]]:
    return [
        ("system", _SYSTEM_PROMPT),
        (
            "assistant",
            f"If you give me the text of a web page, I will give you its "
            f"{settings.max_keywords} keywords as a JSON object of the form "
            '{"keywords": ["..."]}.',
        ),
        ("human", text[: settings.keyword_input_chars]),
    ]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse_keywords(raw: str | None) -> list[str]:
    """Return the keywords in a raw model reply, or ``[]`` if it is malformed."""
    if not raw:
        return []
    try:
        parsed = KeywordResponse.model_validate_json(raw)
    except ValidationError:
        return []
    return list(unique_keywords(parsed.keywords))[: settings.max_keywords]


def extract_keywords(text: str) -> list[str]:
    """Return at most ``settings.max_keywords`` keywords describing *text*.

    Blank text returns ``[]`` without calling the model.

    Raises:
        Whatever the underlying chat client raises for transport or auth
        errors; :func:`~siterec.keywords.enrichment.enrich_pages` turns those
        into empty keyword lists.
    """
    if not text.strip():
        return []
    llm = _get_llm()
    response = llm.invoke(_build_messages(text))
    raw = response.content if hasattr(response, "content") else str(response)
    return parse_keywords(raw if isinstance(raw, str) else None)
