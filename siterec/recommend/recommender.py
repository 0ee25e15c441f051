"""Recommendation scoring over pages a user has not visited yet."""

from __future__ import annotations

from typing import Sequence

from siterec.models import PageRecord, Recommendation, UserProfile
from siterec.recommend.analyzer import canonical


def score_page(page: PageRecord, interest_counts: dict[str, int]) -> int:
    """Sum the user's interest counts over the keywords of *page* (0 if none match)."""
    return sum(interest_counts.get(keyword, 0) for keyword in page.keywords)


def recommend(
    profiles: Sequence[UserProfile],
    pages: Sequence[PageRecord],
) -> list[UserProfile]:
    """Fill ``recommendations`` on each profile in place and return them.

    Every page the user has not visited gets one recommendation, score 0
    included.  Recommendations are sorted by descending score; equal scores
    keep the order of *pages*.
    """
    for profile in profiles:
        visited = {canonical(url) for url in profile.visited_pages}
        interest_counts = {i.keyword: i.count for i in profile.interests}

        recommendations = [
            Recommendation(page_url=page.url, score=score_page(page, interest_counts))
            for page in pages
            if canonical(page.url) not in visited
        ]
        # list.sort is stable, also with reverse=True.
        recommendations.sort(key=lambda r: r.score, reverse=True)
        profile.recommendations = recommendations

    return list(profiles)
