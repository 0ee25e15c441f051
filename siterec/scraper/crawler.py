"""Domain-scoped, depth-first site crawler.

``crawl`` walks a site from a seed URL in pre-order: a page is recorded, then
the complete subtree under its first link is explored before its second link
is examined.  Traversal uses an explicit stack rather than recursion so deep
sites cannot exhaust the call stack.

Candidates are checked when they are popped, never when they are pushed, so
a URL reached through link 1's subtree is already recorded by the time link
2 is considered.  The crawl is strictly sequential: a single
:class:`CrawlContext` owns the result list and the recorded-URL set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from siterec.config import settings
from siterec.models import PageRecord
from siterec.scraper.extractor import extract_links, extract_text
from siterec.scraper.fetcher import fetch_page
from siterec.scraper.urls import is_same_site, normalize_url

Fetcher = Callable[[str], str]


@dataclass
class CrawlContext:
    """Traversal state for one crawl: ordered results plus the URLs they cover."""

    seed: str
    max_pages: int | None = None
    strict: bool = False
    results: list[PageRecord] = field(default_factory=list)
    recorded: set[str] = field(default_factory=set)

    @property
    def full(self) -> bool:
        return self.max_pages is not None and len(self.results) >= self.max_pages

    def accepts(self, url: str) -> bool:
        """Return ``True`` if *url* parses, is same-site and is not yet recorded."""
        try:
            normalized = normalize_url(url)
            same_site = is_same_site(self.seed, url, strict=self.strict)
        except ValueError:
            return False
        return same_site and normalized not in self.recorded

    def record(self, page: PageRecord) -> None:
        self.results.append(page)
        self.recorded.add(page.url)


def _visit(ctx: CrawlContext, url: str, fetch: Fetcher) -> list[str]:
    """Fetch the normalized form of *url*, record it in *ctx* and return its links.

    Any failure ends this branch only: nothing is recorded and no links are
    returned.
    """
    try:
        target = normalize_url(url)
        html = fetch(target)
        page = PageRecord(url=target, text=extract_text(html))
        links = extract_links(html, target)
    except Exception as exc:
        print(f"[CRAWL] ✗ {url}: {exc}")
        return []

    ctx.record(page)
    print(f"[CRAWL] ✓ {page.url} ({len(links)} link(s))")
    return links


def crawl(
    seed: str,
    max_pages: int | None = None,
    fetch: Fetcher | None = None,
    strict: bool | None = None,
) -> list[PageRecord]:
    """Crawl the site rooted at *seed* and return its pages in visit order.

    Args:
        seed: Start URL.  Its host scopes the crawl (see
            :func:`~siterec.scraper.urls.is_same_site`).
        max_pages: Global ceiling on recorded pages.  Defaults to
            ``settings.max_pages``; ``None`` means no ceiling.
        fetch: ``url -> html`` callable.  Defaults to
            :func:`~siterec.scraper.fetcher.fetch_page`.
        strict: Require exact host equality instead of substring containment.
            Defaults to ``settings.strict_host_match``.

    Returns:
        One :class:`~siterec.models.PageRecord` per successfully fetched page,
        keywords empty, no two sharing a URL.
    """
    ctx = CrawlContext(
        seed=seed,
        max_pages=settings.max_pages if max_pages is None else max_pages,
        strict=settings.strict_host_match if strict is None else strict,
    )
    fetch = fetch or fetch_page

    stack: list[str] = [seed]
    while stack:
        url = stack.pop()
        if not ctx.accepts(url):
            continue
        if ctx.full:
            break

        links = _visit(ctx, url, fetch)
        # Reversed so the first link in document order is popped first.
        stack.extend(reversed(links))

    print(f"[CRAWL] Done: {len(ctx.results)} page(s) from {seed}")
    return ctx.results
