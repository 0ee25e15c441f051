"""SiteRec CLI — entry-point for the crawl / analyze pipeline.

Usage:
    python cli/main.py --help

Commands map onto the pipeline entry points:
    fetch          → crawl a live site and extract keywords
    fetch-local    → load pages from the page fixture
    analyze        → fetch + interest analysis + recommendations
    analyze-local  → the same analysis over the page fixture
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from siterec.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import NoReturn, Optional, Sequence

import typer
from pydantic import ValidationError

from siterec.fixtures import dump_pages, dump_profiles
from siterec.models import PageRecord, UserProfile
from siterec import pipeline

app = typer.Typer(
    name="siterec",
    help="Crawl a site and recommend unvisited pages from user interests.",
    no_args_is_help=True,
)

_TOP_N = 5


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def _echo_pages(tag: str, pages: Sequence[PageRecord]) -> None:
    typer.echo(f"[{tag}] {len(pages)} page(s)")
    for page in pages:
        typer.echo(f"  {page.url}  keywords={list(page.keywords)}")


def _echo_profiles(tag: str, profiles: Sequence[UserProfile]) -> None:
    for profile in profiles:
        interests = ", ".join(f"{i.keyword}({i.count})" for i in profile.interests[:_TOP_N])
        typer.echo(f"[{tag}] {profile.username}: {interests or '(no interests)'}")
        for rec in profile.recommendations[:_TOP_N]:
            typer.echo(f"  {rec.score:>4}  {rec.page_url}")


def _fail(tag: str, exc: Exception) -> NoReturn:
    typer.echo(f"[{tag}] Could not load fixture: {exc}", err=True)
    raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Fetch commands
# ---------------------------------------------------------------------------

@app.command("fetch")
def fetch(
    url: str = typer.Option(..., help="Seed URL of the site to crawl."),
    max_pages: Optional[int] = typer.Option(None, "--max-pages", min=0, help="Crawl ceiling."),
    out: Optional[Path] = typer.Option(None, help="Write the pages as JSON to this file."),
) -> None:
    """Crawl a site and extract keywords for every page."""
    typer.echo(f"[fetch] Crawling {url!r} …")
    pages = pipeline.parse_site(url, max_pages=max_pages)
    _echo_pages("fetch", pages)
    if out:
        typer.echo(f"[fetch] Pages written to {dump_pages(pages, out)}")


@app.command("fetch-local")
def fetch_local(
    path: Optional[Path] = typer.Option(None, help="Page fixture (defaults to the configured one)."),
) -> None:
    """Load already-keyworded pages from a fixture file."""
    try:
        pages = pipeline.parse_site_from_local(path)
    except (FileNotFoundError, ValidationError) as exc:
        _fail("fetch-local", exc)
    _echo_pages("fetch-local", pages)


# ---------------------------------------------------------------------------
# Analyze commands
# ---------------------------------------------------------------------------

@app.command("analyze")
def analyze(
    url: str = typer.Option(..., help="Seed URL of the site to crawl."),
    users: Optional[Path] = typer.Option(None, help="User fixture (defaults to the configured one)."),
    max_pages: Optional[int] = typer.Option(None, "--max-pages", min=0, help="Crawl ceiling."),
    out: Optional[Path] = typer.Option(None, help="Write the user profiles as JSON to this file."),
) -> None:
    """Crawl a site, then rank recommendations for every user."""
    typer.echo(f"[analyze] Crawling {url!r} …")
    try:
        pages, profiles = pipeline.analyze_site(url, users_path=users, max_pages=max_pages)
    except (FileNotFoundError, ValidationError) as exc:
        _fail("analyze", exc)
    _echo_pages("analyze", pages)
    _echo_profiles("analyze", profiles)
    if out:
        typer.echo(f"[analyze] Profiles written to {dump_profiles(profiles, out)}")


@app.command("analyze-local")
def analyze_local(
    pages: Optional[Path] = typer.Option(None, help="Page fixture (defaults to the configured one)."),
    users: Optional[Path] = typer.Option(None, help="User fixture (defaults to the configured one)."),
    out: Optional[Path] = typer.Option(None, help="Write the user profiles as JSON to this file."),
) -> None:
    """Rank recommendations for every user from the page fixture."""
    try:
        page_records, profiles = pipeline.analyze_from_local(pages, users)
    except (FileNotFoundError, ValidationError) as exc:
        _fail("analyze-local", exc)
    typer.echo(f"[analyze-local] {len(page_records)} page(s) loaded")
    _echo_profiles("analyze-local", profiles)
    if out:
        typer.echo(f"[analyze-local] Profiles written to {dump_profiles(profiles, out)}")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
