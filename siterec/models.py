"""Dataclass models shared by the crawl, analysis and recommendation stages.

These are plain Python objects.  The fixture layer serialises /
deserialises to and from these types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable


def unique_keywords(keywords: Iterable[str]) -> tuple[str, ...]:
    """Return *keywords* stripped, without blanks or repeats, in first-seen order."""
    cleaned = (k.strip() for k in keywords if isinstance(k, str))
    return tuple(dict.fromkeys(k for k in cleaned if k))


@dataclass(frozen=True)
class PageRecord:
    """A crawled page: normalized URL, visible body text and its keywords."""

    url: str
    text: str
    keywords: tuple[str, ...] = ()


@dataclass
class VisitHistory:
    username: str
    visited_pages: list[str] = field(default_factory=list)


@dataclass
class InterestEntry:
    """A user's aggregated signal for one keyword.

    ``count`` is the number of visited pages carrying the keyword;
    ``related_pages`` lists each contributing page once, in first-seen order.
    """

    keyword: str
    count: int = 1
    related_pages: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "keyword": self.keyword,
            "count": self.count,
            "relatives": list(self.related_pages),
        }


@dataclass
class Recommendation:
    page_url: str
    score: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"page": self.page_url, "score": self.score}


@dataclass
class UserProfile:
    username: str
    visited_pages: list[str] = field(default_factory=list)
    interests: list[InterestEntry] = field(default_factory=list)
    recommendations: list[Recommendation] = field(default_factory=list)

    # ------------------------------------------------------------------
    # Convenience helpers
    # ------------------------------------------------------------------
    def to_dict(self) -> dict[str, Any]:
        """Serialise the profile to the user fixture JSON shape."""
        return {
            "username": self.username,
            "visited_pages": list(self.visited_pages),
            "interests": [i.to_dict() for i in self.interests],
            "recommendations": [r.to_dict() for r in self.recommendations],
        }
