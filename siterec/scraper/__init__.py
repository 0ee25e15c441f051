"""Scraper package: URL normalisation, page rendering, extraction and crawling."""

from siterec.scraper.crawler import crawl
from siterec.scraper.extractor import extract_links, extract_text
from siterec.scraper.fetcher import fetch_page
from siterec.scraper.urls import is_same_site, normalize_url

__all__ = [
    "crawl",
    "fetch_page",
    "extract_text",
    "extract_links",
    "normalize_url",
    "is_same_site",
]
