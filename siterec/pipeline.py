"""End-to-end pipeline: crawl → keywords → interests → recommendations.

Four entry points mirror the ways the pipeline is driven:

``parse_site``            crawl a live site and attach keywords.
``parse_site_from_local`` load already-keyworded pages from a fixture.
``analyze_site``          ``parse_site`` + interest analysis + recommendations.
``analyze_from_local``    the same analysis over the page fixture.
"""

from __future__ import annotations

from pathlib import Path

from siterec.config import settings
from siterec.fixtures import load_histories, load_pages
from siterec.keywords.enrichment import enrich_pages
from siterec.models import PageRecord, UserProfile
from siterec.recommend.analyzer import analyze
from siterec.recommend.recommender import recommend
from siterec.scraper.crawler import crawl


def parse_site(seed: str, max_pages: int | None = None) -> list[PageRecord]:
    """Crawl *seed* and return its pages with keywords attached."""
    pages = crawl(seed, max_pages=max_pages)
    return enrich_pages(pages)


def parse_site_from_local(path: str | Path | None = None) -> list[PageRecord]:
    """Load keyworded pages from *path* (defaults to ``settings.pages_fixture``)."""
    return load_pages(path or settings.pages_fixture)


def recommend_for_users(
    pages: list[PageRecord],
    users_path: str | Path | None = None,
) -> list[UserProfile]:
    """Analyze the users in *users_path* against *pages* and rank recommendations."""
    histories = load_histories(users_path or settings.users_fixture)
    profiles = analyze(histories, pages)
    return recommend(profiles, pages)


def analyze_site(
    seed: str,
    users_path: str | Path | None = None,
    max_pages: int | None = None,
) -> tuple[list[PageRecord], list[UserProfile]]:
    """Crawl *seed*, then build profiles and recommendations for every user."""
    pages = parse_site(seed, max_pages=max_pages)
    return pages, recommend_for_users(pages, users_path)


def analyze_from_local(
    pages_path: str | Path | None = None,
    users_path: str | Path | None = None,
) -> tuple[list[PageRecord], list[UserProfile]]:
    """Build profiles and recommendations from the page and user fixtures."""
    pages = parse_site_from_local(pages_path)
    return pages, recommend_for_users(pages, users_path)
