"""JSON fixture loading and dumping for crawled pages and user histories.

File shapes
-----------
Pages::

    [{"url": "https://example.com/", "html": "<visible text>", "keywords": ["..."]}]

``keywords`` is optional.  ``html`` carries the extracted body text.

Users::

    [{"username": "alice", "visited_pages": ["https://example.com/"],
      "interests": [], "recommendations": []}]

``interests`` / ``recommendations`` are outputs of the pipeline; whatever a
fixture holds there is ignored on load.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from pydantic import BaseModel, TypeAdapter

from siterec.models import PageRecord, UserProfile, VisitHistory, unique_keywords


class PageFixture(BaseModel):
    url: str
    html: str = ""
    keywords: list[str] | None = None


class UserFixture(BaseModel):
    username: str
    visited_pages: list[str] = []
    interests: list[Any] = []
    recommendations: list[Any] | None = None


_pages_adapter = TypeAdapter(list[PageFixture])
_users_adapter = TypeAdapter(list[UserFixture])


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_pages(path: str | Path) -> list[PageRecord]:
    """Read a page fixture and return its records.

    Raises:
        FileNotFoundError: If *path* does not exist.
        pydantic.ValidationError: If the JSON does not match the page shape.
    """
    items = _pages_adapter.validate_json(Path(path).read_bytes())
    return [
        PageRecord(
            url=item.url,
            text=item.html,
            keywords=unique_keywords(item.keywords or []),
        )
        for item in items
    ]


def load_histories(path: str | Path) -> list[VisitHistory]:
    """Read a user fixture and return the visit histories it describes.

    Raises:
        FileNotFoundError: If *path* does not exist.
        pydantic.ValidationError: If the JSON does not match the user shape.
    """
    items = _users_adapter.validate_json(Path(path).read_bytes())
    return [
        VisitHistory(username=item.username, visited_pages=list(item.visited_pages))
        for item in items
    ]


# ---------------------------------------------------------------------------
# Dumping
# ---------------------------------------------------------------------------

def pages_to_json(pages: Sequence[PageRecord]) -> list[dict[str, Any]]:
    return [
        {"url": p.url, "html": p.text, "keywords": list(p.keywords)}
        for p in pages
    ]


def _write_json(payload: Any, path: str | Path) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return target


def dump_pages(pages: Sequence[PageRecord], path: str | Path) -> Path:
    """Write *pages* in the page fixture shape and return the file path."""
    return _write_json(pages_to_json(pages), path)


def dump_profiles(profiles: Sequence[UserProfile], path: str | Path) -> Path:
    """Write *profiles* in the user fixture shape and return the file path."""
    return _write_json([p.to_dict() for p in profiles], path)
