"""Tests for :mod:`guardianscrape.api.routes`."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
import requests
from fastapi.testclient import TestClient

from guardianscrape.api.app import create_app
from guardianscrape.api.routes import _parse_int, get_client
from guardianscrape.models import GeneratedArticle, SearchResult


def _results(*bodies: str) -> list[SearchResult]:
    return [SearchResult.model_validate({"fields": {"body": body}}) for body in bodies]


@pytest.fixture
def make_client():
    def _make(search=None, search_fields=None) -> TestClient:
        fake = SimpleNamespace(
            search=search or (lambda query: []),
            search_fields=search_fields or (lambda query: []),
        )
        app = create_app()
        app.dependency_overrides[get_client] = lambda: fake
        return TestClient(app)

    return _make


def test_scrape_returns_stripped_text(make_client) -> None:
    client = make_client(search=lambda query: _results("<p>Hello</p>", "<p><b>world</b></p>"))

    response = client.get("/api/scrape", params={"q": "greeting"})

    assert response.status_code == 200
    assert response.json() == {"query": "greeting", "text": "Hello world"}


def test_scrape_requires_query(make_client) -> None:
    response = make_client().get("/api/scrape", params={"q": "  "})

    assert response.status_code == 400


def test_scrape_reports_no_results(make_client) -> None:
    response = make_client().get("/api/scrape", params={"q": "zzzz"})

    assert response.status_code == 404
    assert "No results" in response.json()["detail"]


def test_scrape_maps_upstream_failures(make_client) -> None:
    def boom(query):
        raise requests.ConnectionError("unreachable")

    response = make_client(search=boom).get("/api/scrape", params={"q": "brexit"})

    assert response.status_code == 502


def test_write_returns_generated_article(make_client) -> None:
    results = [
        SearchResult.model_validate(
            {"fields": {"headline": "Big news", "body": "<p>Short story</p>", "trailText": "Trail"}}
        )
    ]
    client = make_client(search_fields=lambda query: results)

    response = client.get("/api/write", params={"q": "news", "wl": "nope", "pl": "2"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["headline"] == "Big news"
    assert payload["trailText"] == "Trail"
    assert payload["body"] == "Short story"


def test_parse_int_falls_back_to_default() -> None:
    assert _parse_int(None, 2000) == 2000
    assert _parse_int("abc", 2000) == 2000
    assert _parse_int("-3", 2) == 2
    assert _parse_int("150", 2000) == 150


def test_health() -> None:
    response = TestClient(create_app()).get("/health")

    assert response.json() == {"status": "ok"}


def test_write_accepts_continuous_flag(make_client, monkeypatch) -> None:
    calls = []

    def fake_write_article(results, **kwargs):
        calls.append(kwargs)
        return GeneratedArticle(headline="h", body="b")

    monkeypatch.setattr("guardianscrape.api.routes.write_article", fake_write_article)
    client = make_client(search_fields=lambda query: _results("<p>x</p>"))

    response = client.get("/api/write", params={"q": "news", "continuous": "true"})

    assert response.status_code == 200
    assert calls[0]["single"] is False
