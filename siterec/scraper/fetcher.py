"""Page renderers: headless Chromium via Playwright, or a plain httpx GET.

Both renderers send the configured user agent and give up after
``settings.fetch_timeout`` seconds.  Each call owns its browser / client for
the duration of that single fetch and always releases it.
"""

from __future__ import annotations

import httpx

from siterec.config import settings


def render_with_playwright(url: str) -> str:
    """Render *url* with a headless Chromium browser and return its HTML.

    Playwright is imported lazily so tests that don't exercise the browser
    path don't need a browser installed.
    """
    from playwright.sync_api import sync_playwright  # noqa: PLC0415

    with sync_playwright() as pw:
        browser = pw.chromium.launch(headless=True)
        try:
            page = browser.new_page(user_agent=settings.user_agent)
            page.goto(url, timeout=int(settings.fetch_timeout * 1000))
            return page.content()
        finally:
            browser.close()


def render_with_httpx(url: str) -> str:
    """Fetch *url* over plain HTTP and return the response body.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
        httpx.TimeoutException: If the request exceeds the fetch timeout.
    """
    with httpx.Client(
        headers={"User-Agent": settings.user_agent},
        timeout=settings.fetch_timeout,
        follow_redirects=True,
    ) as client:
        response = client.get(url)
        response.raise_for_status()
        return response.text


def fetch_page(url: str) -> str:
    """Return the HTML of *url* using the renderer named by ``settings.renderer``.

    ``"playwright"`` (default) renders JavaScript; ``"http"`` skips the browser.
    """
    if settings.renderer == "http":
        return render_with_httpx(url)
    return render_with_playwright(url)
