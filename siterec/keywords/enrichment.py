"""Batched, rate-limited keyword enrichment of crawled pages.

Pages are processed in fixed-size batches.  Calls inside a batch run in
parallel on a ``ThreadPoolExecutor``; the next batch starts only after every
call of the current batch has returned and the cooldown has elapsed.  Each
worker writes only its own result slot, so no locking is needed.
"""

from __future__ import annotations

import dataclasses
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterator, Sequence, TypeVar

from siterec.config import settings
from siterec.keywords.extractor import extract_keywords
from siterec.models import PageRecord, unique_keywords

T = TypeVar("T")

Extractor = Callable[[str], list[str]]


def chunked(items: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """Yield consecutive slices of *items* holding at most *size* elements."""
    if size < 1:
        raise ValueError(f"Batch size must be positive, got {size}")
    for start in range(0, len(items), size):
        yield items[start:start + size]


def enrich_pages(
    pages: Sequence[PageRecord],
    extract: Extractor | None = None,
    batch_size: int | None = None,
    batch_delay: float | None = None,
) -> list[PageRecord]:
    """Return copies of *pages* with keywords attached, in the input order.

    Args:
        pages: Crawled pages (their existing keywords are replaced).
        extract: ``text -> keywords`` callable.  Defaults to
            :func:`~siterec.keywords.extractor.extract_keywords`.
        batch_size: Calls per batch.  Defaults to ``settings.keyword_batch_size``.
        batch_delay: Seconds to wait between batches.  Defaults to
            ``settings.keyword_batch_delay``.

    A call that raises degrades its page to an empty keyword list; the other
    pages are unaffected.
    """
    extract = extract or extract_keywords
    size = settings.keyword_batch_size if batch_size is None else batch_size
    delay = settings.keyword_batch_delay if batch_delay is None else batch_delay

    slots: list[tuple[str, ...]] = [() for _ in pages]
    batches = list(chunked(range(len(pages)), size))

    for number, batch in enumerate(batches, start=1):
        print(f"[KEYWORDS] Batch {number}/{len(batches)}: {len(batch)} page(s)")
        with ThreadPoolExecutor(max_workers=len(batch)) as pool:
            future_to_index = {
                pool.submit(extract, pages[i].text): i for i in batch
            }
            for future in as_completed(future_to_index):
                index = future_to_index[future]
                url = pages[index].url
                try:
                    slots[index] = unique_keywords(future.result())
                    print(f"[KEYWORDS] ✓ {url}: {list(slots[index])}")
                except Exception as exc:
                    print(f"[KEYWORDS] ✗ Failed {url!r}: {exc}")

        if number < len(batches) and delay > 0:
            time.sleep(delay)

    return [
        dataclasses.replace(page, keywords=keywords)
        for page, keywords in zip(pages, slots)
    ]
