"""Tests for the SiteRec CLI commands."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from cli.main import app
from siterec.models import PageRecord

runner = CliRunner()

_PAGES = [
    {"url": "https://example.com/a", "html": "A", "keywords": ["ai"]},
    {"url": "https://example.com/b", "html": "B", "keywords": ["ai", "ml"]},
    {"url": "https://example.com/c", "html": "C", "keywords": ["ml"]},
]
_USERS = [{"username": "alice", "visited_pages": ["https://example.com/a"], "interests": []}]


@pytest.fixture
def fixtures(tmp_path, monkeypatch):
    """Page and user fixtures in an isolated directory."""
    (tmp_path / "result_get_page_info.json").write_text(json.dumps(_PAGES))
    (tmp_path / "mock_user_data.json").write_text(json.dumps(_USERS))
    monkeypatch.setattr("siterec.config.settings.fixtures_dir", tmp_path)
    return tmp_path


def test_fetch_local_lists_pages(fixtures):
    result = runner.invoke(app, ["fetch-local"])
    assert result.exit_code == 0
    assert "[fetch-local] 3 page(s)" in result.stdout
    assert "https://example.com/b  keywords=['ai', 'ml']" in result.stdout


def test_analyze_local_writes_profiles(fixtures, tmp_path):
    out = tmp_path / "profiles.json"
    result = runner.invoke(
        app,
        [
            "analyze-local",
            "--pages", str(fixtures / "result_get_page_info.json"),
            "--users", str(fixtures / "mock_user_data.json"),
            "--out", str(out),
        ],
    )
    assert result.exit_code == 0
    assert "[analyze-local] alice: ai(1)" in result.stdout

    data = json.loads(out.read_text())
    assert [r["page"] for r in data[0]["recommendations"]] == [
        "https://example.com/b",
        "https://example.com/c",
    ]


def test_analyze_local_missing_fixture_exits_1(tmp_path, monkeypatch):
    monkeypatch.setattr("siterec.config.settings.fixtures_dir", tmp_path)
    result = runner.invoke(app, ["analyze-local"])
    assert result.exit_code == 1


def test_fetch_crawls_and_dumps(tmp_path):
    pages = [PageRecord("https://example.com/", "Hi", ("greeting",))]
    out = tmp_path / "pages.json"

    with patch("cli.main.pipeline.parse_site", return_value=pages) as mock_parse:
        result = runner.invoke(app, ["fetch", "--url", "https://example.com", "--max-pages", "5", "--out", str(out)])

    assert result.exit_code == 0
    mock_parse.assert_called_once_with("https://example.com", max_pages=5)
    assert json.loads(out.read_text()) == [
        {"url": "https://example.com/", "html": "Hi", "keywords": ["greeting"]}
    ]


def test_analyze_reports_recommendations(fixtures):
    pages = [PageRecord(p["url"], p["html"], tuple(p["keywords"])) for p in _PAGES]

    with patch("siterec.pipeline.parse_site", return_value=pages):
        result = runner.invoke(app, ["analyze", "--url", "https://example.com"])

    assert result.exit_code == 0
    assert "https://example.com/b" in result.stdout
    assert "   1  https://example.com/b" in result.stdout
