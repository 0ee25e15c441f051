"""HTML extraction: visible body text and outbound anchor targets."""

from __future__ import annotations

from typing import List
from urllib.parse import urljoin

from bs4 import BeautifulSoup

_INVISIBLE_TAGS = ["script", "style", "noscript", "template"]


def extract_text(html: str) -> str:
    """Return the visible text of the ``<body>`` of *html*.

    Non-rendered elements are removed and whitespace is collapsed.  Documents
    without a body fall back to the text of the whole document.
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(_INVISIBLE_TAGS):
        tag.decompose()
    container = soup.body or soup
    return container.get_text(separator=" ", strip=True)


def extract_links(html: str, base_url: str) -> List[str]:
    """Return every ``<a href>`` target in document order, resolved against *base_url*.

    Empty and unresolvable hrefs are skipped; duplicates are kept since the
    crawler decides what has already been visited.
    """
    soup = BeautifulSoup(html, "html.parser")
    links: List[str] = []
    for anchor in soup.find_all("a", href=True):
        href = anchor["href"].strip()
        if not href:
            continue
        try:
            links.append(urljoin(base_url, href))
        except ValueError:
            continue
    return links
