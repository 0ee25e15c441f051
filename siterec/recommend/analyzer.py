"""Interest aggregation: visit histories + keyworded pages → ranked interests."""

from __future__ import annotations

from typing import Sequence

from siterec.models import InterestEntry, PageRecord, UserProfile, VisitHistory
from siterec.scraper.urls import normalize_url


def canonical(url: str) -> str:
    """Normalize *url* for lookups, leaving unparsable strings untouched."""
    try:
        return normalize_url(url)
    except ValueError:
        return url


def index_pages(pages: Sequence[PageRecord]) -> dict[str, PageRecord]:
    """Map each page's URL to its record (first occurrence wins)."""
    index: dict[str, PageRecord] = {}
    for page in pages:
        index.setdefault(canonical(page.url), page)
    return index


def build_interests(
    visited_pages: Sequence[str],
    index: dict[str, PageRecord],
) -> list[InterestEntry]:
    """Aggregate the keywords of *visited_pages* into sorted interest entries.

    Every listed visit counts, so a page listed twice contributes twice.
    Visited pages missing from *index* are skipped.
    """
    interests: dict[str, InterestEntry] = {}

    for visited in visited_pages:
        page = index.get(canonical(visited))
        if page is None:
            continue
        for keyword in page.keywords:
            entry = interests.get(keyword)
            if entry is None:
                interests[keyword] = InterestEntry(keyword, 1, [page.url])
                continue
            entry.count += 1
            if page.url not in entry.related_pages:
                entry.related_pages.append(page.url)

    return sorted(interests.values(), key=lambda e: (-e.count, e.keyword))


def analyze(
    histories: Sequence[VisitHistory],
    pages: Sequence[PageRecord],
) -> list[UserProfile]:
    """Return one :class:`~siterec.models.UserProfile` per history.

    Interests are sorted by descending count, ties by ascending keyword.
    Recommendations are left empty for
    :func:`~siterec.recommend.recommender.recommend` to fill.
    """
    index = index_pages(pages)
    profiles: list[UserProfile] = []
    for history in histories:
        interests = build_interests(history.visited_pages, index)
        print(
            f"[ANALYZE] {history.username}: {len(history.visited_pages)} visit(s), "
            f"{len(interests)} interest(s)"
        )
        profiles.append(
            UserProfile(
                username=history.username,
                visited_pages=list(history.visited_pages),
                interests=interests,
            )
        )
    return profiles
