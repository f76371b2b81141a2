from __future__ import annotations

from types import SimpleNamespace

import pytest
import requests

from guardianscrape.config import GuardianSettings
from guardianscrape.services import scrape_text
from guardianscrape.services.client import (
    SEARCH_ENDPOINT,
    GuardianClient,
    build_search_url,
    encode_query,
)


class DummyResponse:
    def __init__(self, payload: dict, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self) -> dict:
        return self._payload


def _payload(*bodies: str | None) -> dict:
    results = []
    for body in bodies:
        results.append({"fields": {"body": body}} if body is not None else {"id": "no-fields"})
    return {"response": {"status": "ok", "results": results}}


def test_encode_query_only_replaces_first_space() -> None:
    assert encode_query("David Cameron") == "David+Cameron"
    assert encode_query("prime minister of britain") == "prime+minister of britain"
    assert encode_query("brexit") == "brexit"


def test_build_search_url_appends_key_and_query() -> None:
    url = build_search_url("David Cameron", "secret")

    assert url == (
        "https://content.guardianapis.com/search?show-fields=body&page-size=100"
        "&api-key=secret&q=David+Cameron"
    )


def test_search_issues_single_get_and_parses_results() -> None:
    client = GuardianClient("secret")
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return DummyResponse(_payload("<p>A</p>", None, "<p>B</p>"))

    client._session = SimpleNamespace(get=fake_get)

    results = client.search("David Cameron")

    assert calls == [(build_search_url("David Cameron", "secret"), None)]
    assert [result.body for result in results] == ["<p>A</p>", None, "<p>B</p>"]


def test_search_treats_missing_results_as_empty() -> None:
    client = GuardianClient("secret")
    client._session = SimpleNamespace(get=lambda url, timeout: DummyResponse({"response": {}}))

    assert client.search("nothing") == []


def test_search_propagates_http_errors() -> None:
    client = GuardianClient("secret")
    client._session = SimpleNamespace(
        get=lambda url, timeout: DummyResponse({}, status_code=403)
    )

    with pytest.raises(requests.HTTPError):
        client.search("forbidden")


def test_search_fields_encodes_query_as_params() -> None:
    client = GuardianClient.from_settings(GuardianSettings(api_key="secret", timeout=5))
    captured = {}

    def fake_get(url, params, timeout):
        captured.update(url=url, params=params, timeout=timeout)
        return DummyResponse(_payload("x"))

    client._session = SimpleNamespace(get=fake_get)

    results = client.search_fields("one two three")

    assert len(results) == 1
    assert captured["url"] == SEARCH_ENDPOINT
    assert captured["timeout"] == 5
    assert captured["params"]["q"] == "one two three"
    assert captured["params"]["show-fields"] == "body,headline,trailText,main"
    assert captured["params"]["page-size"] == 200


def test_scrape_text_concatenates_then_strips() -> None:
    client = GuardianClient("secret")
    client._session = SimpleNamespace(
        get=lambda url, timeout: DummyResponse(_payload("<p>Hello</p>", "<p>world</p>"))
    )

    assert scrape_text(client, "greeting") == "Hello world"
