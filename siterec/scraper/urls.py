"""URL canonicalisation and same-site checks used for crawl de-duplication."""

from __future__ import annotations

from urllib.parse import urlsplit

_DEFAULT_PORTS = {"http": 80, "https": 443}


def normalize_url(url: str) -> str:
    """Return *url* reduced to ``scheme://host[:port]/path``.

    Query string, fragment, user-info and default ports are dropped; scheme
    and host are lower-cased and an empty path becomes ``/``.

    Raises:
        ValueError: If *url* cannot be parsed or has no scheme or host.
    """
    parts = urlsplit(url.strip())
    host = parts.hostname
    if not parts.scheme or not host:
        raise ValueError(f"Not an absolute URL: {url!r}")

    # Accessing .port raises ValueError for out-of-range / non-numeric ports.
    port = parts.port
    if port == _DEFAULT_PORTS.get(parts.scheme.lower()):
        port = None
    if ":" in host:
        host = f"[{host}]"
    netloc = f"{host}:{port}" if port is not None else host
    return f"{parts.scheme.lower()}://{netloc}{parts.path or '/'}"


def seed_host(seed: str) -> str:
    """Return the lower-cased host of *seed* (raises ``ValueError`` if none)."""
    host = urlsplit(seed.strip()).hostname
    if not host:
        raise ValueError(f"Seed URL has no host: {seed!r}")
    return host


def is_same_site(seed: str, candidate: str, strict: bool = False) -> bool:
    """Return ``True`` if *candidate* belongs to the site rooted at *seed*.

    The default check is substring containment of the seed's host in the
    normalized candidate string.  It also accepts look-alikes such as
    ``https://notexample.com/`` for seed ``https://example.com``, and pages on
    other hosts whose path mentions the seed host.  Pass ``strict=True`` to
    require host equality instead.

    Raises:
        ValueError: If either URL cannot be parsed.
    """
    host = seed_host(seed)
    normalized = normalize_url(candidate)
    if strict:
        return urlsplit(normalized).hostname == host
    return host in normalized
