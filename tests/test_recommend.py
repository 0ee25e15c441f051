"""Tests for interest analysis and recommendation scoring."""

from __future__ import annotations

import pytest

from siterec.models import InterestEntry, PageRecord, Recommendation, VisitHistory
from siterec.recommend.analyzer import analyze, build_interests, index_pages
from siterec.recommend.recommender import recommend, score_page

_BASE = "https://example.com"


def _page(path: str, *keywords: str) -> PageRecord:
    return PageRecord(url=f"{_BASE}{path}", text="", keywords=tuple(keywords))


@pytest.fixture()
def pages() -> list[PageRecord]:
    return [
        _page("/intro", "ai"),
        _page("/deep", "ai", "ml"),
        _page("/news", "ai"),
        _page("/models", "ml"),
        _page("/storage", "db"),
    ]


@pytest.fixture()
def history() -> VisitHistory:
    return VisitHistory(username="alice", visited_pages=[f"{_BASE}/intro", f"{_BASE}/deep"])


# ---------------------------------------------------------------------------
# Analyzer
# ---------------------------------------------------------------------------

class TestAnalyze:
    def test_counts_pages_per_keyword(self, pages, history) -> None:
        [profile] = analyze([history], pages)

        assert profile.username == "alice"
        assert [(i.keyword, i.count) for i in profile.interests] == [("ai", 2), ("ml", 1)]
        assert profile.recommendations == []

    def test_related_pages_listed_once_each(self, pages, history) -> None:
        [profile] = analyze([history], pages)
        ai = profile.interests[0]
        assert ai.related_pages == [f"{_BASE}/intro", f"{_BASE}/deep"]

    def test_repeated_visit_counts_twice(self, pages) -> None:
        history = VisitHistory("bob", [f"{_BASE}/intro", f"{_BASE}/intro"])
        [profile] = analyze([history], pages)

        assert profile.interests == [InterestEntry("ai", 2, [f"{_BASE}/intro"])]

    def test_uncrawled_visit_skipped(self, pages) -> None:
        history = VisitHistory("carol", [f"{_BASE}/missing", f"{_BASE}/storage"])
        [profile] = analyze([history], pages)

        assert [(i.keyword, i.count) for i in profile.interests] == [("db", 1)]

    def test_visit_with_query_string_matches_page(self, pages) -> None:
        history = VisitHistory("dave", [f"{_BASE}/models?utm=mail#top"])
        [profile] = analyze([history], pages)
        assert [i.keyword for i in profile.interests] == ["ml"]

    def test_ties_sorted_by_keyword(self) -> None:
        pages = [_page("/p", "zeta", "alpha", "mid")]
        interests = build_interests([f"{_BASE}/p"], index_pages(pages))
        assert [i.keyword for i in interests] == ["alpha", "mid", "zeta"]

    def test_sorted_by_count_then_keyword(self) -> None:
        pages = [
            _page("/1", "b", "c"),
            _page("/2", "c", "a"),
            _page("/3", "c", "b", "d"),
        ]
        visits = [f"{_BASE}/1", f"{_BASE}/2", f"{_BASE}/3"]
        interests = build_interests(visits, index_pages(pages))

        assert [(i.keyword, i.count) for i in interests] == [
            ("c", 3), ("b", 2), ("a", 1), ("d", 1),
        ]
        for current, following in zip(interests, interests[1:]):
            assert current.count >= following.count
            if current.count == following.count:
                assert current.keyword <= following.keyword

    def test_users_analyzed_independently(self, pages) -> None:
        histories = [
            VisitHistory("alice", [f"{_BASE}/intro"]),
            VisitHistory("bob", [f"{_BASE}/storage"]),
            VisitHistory("eve", []),
        ]
        profiles = analyze(histories, pages)

        assert [p.username for p in profiles] == ["alice", "bob", "eve"]
        assert [i.keyword for i in profiles[0].interests] == ["ai"]
        assert [i.keyword for i in profiles[1].interests] == ["db"]
        assert profiles[2].interests == []

    def test_page_without_keywords_adds_nothing(self) -> None:
        history = VisitHistory("frank", [f"{_BASE}/empty"])
        [profile] = analyze([history], [_page("/empty")])
        assert profile.interests == []


# ---------------------------------------------------------------------------
# Recommender
# ---------------------------------------------------------------------------

class TestRecommend:
    def test_scores_unvisited_pages(self, pages, history) -> None:
        [profile] = recommend(analyze([history], pages), pages)

        scores = {r.page_url: r.score for r in profile.recommendations}
        assert scores == {
            f"{_BASE}/news": 2,
            f"{_BASE}/models": 1,
            f"{_BASE}/storage": 0,
        }

    def test_sorted_by_score_descending(self, pages, history) -> None:
        [profile] = recommend(analyze([history], pages), pages)
        assert profile.recommendations == [
            Recommendation(f"{_BASE}/news", 2),
            Recommendation(f"{_BASE}/models", 1),
            Recommendation(f"{_BASE}/storage", 0),
        ]

    def test_excludes_visited_and_covers_the_rest(self, pages, history) -> None:
        [profile] = recommend(analyze([history], pages), pages)

        recommended = {r.page_url for r in profile.recommendations}
        assert recommended.isdisjoint(history.visited_pages)
        assert recommended == {p.url for p in pages} - set(history.visited_pages)

    def test_ties_keep_page_order(self) -> None:
        pages = [
            _page("/seen", "ai"),
            _page("/c", "db"),
            _page("/a", "ai"),
            _page("/b", "xyz"),
            _page("/d", "ai"),
        ]
        history = VisitHistory("alice", [f"{_BASE}/seen"])
        [profile] = recommend(analyze([history], pages), pages)

        assert [r.page_url for r in profile.recommendations] == [
            f"{_BASE}/a", f"{_BASE}/d", f"{_BASE}/c", f"{_BASE}/b",
        ]

    def test_user_without_history_gets_every_page_at_zero(self, pages) -> None:
        [profile] = recommend(analyze([VisitHistory("new", [])], pages), pages)

        assert [r.page_url for r in profile.recommendations] == [p.url for p in pages]
        assert all(r.score == 0 for r in profile.recommendations)

    def test_visited_url_variant_excluded(self, pages) -> None:
        history = VisitHistory("gina", [f"{_BASE}/news?ref=home"])
        [profile] = recommend(analyze([history], pages), pages)
        assert f"{_BASE}/news" not in {r.page_url for r in profile.recommendations}

    def test_mutates_and_returns_same_profiles(self, pages, history) -> None:
        profiles = analyze([history], pages)
        result = recommend(profiles, pages)

        assert result[0] is profiles[0]
        assert profiles[0].recommendations


class TestScorePage:
    def test_sums_matching_interest_counts(self) -> None:
        assert score_page(_page("/x", "ai", "ml", "db"), {"ai": 3, "ml": 2}) == 5

    def test_no_keywords_scores_zero(self) -> None:
        assert score_page(_page("/x"), {"ai": 3}) == 0

    def test_no_overlap_scores_zero(self) -> None:
        assert score_page(_page("/x", "db"), {"ai": 3}) == 0
