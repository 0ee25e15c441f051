"""Keyword extraction and batched page enrichment."""

from siterec.keywords.enrichment import enrich_pages
from siterec.keywords.extractor import extract_keywords, parse_keywords

__all__ = ["extract_keywords", "parse_keywords", "enrich_pages"]
