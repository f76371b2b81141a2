"""Client for the Guardian content search API."""

from __future__ import annotations

import logging
from typing import List, Sequence

import requests

from guardianscrape.config import GuardianSettings
from guardianscrape.models import SearchResponse, SearchResult

__all__ = [
    "DEFAULT_HEADERS",
    "PAGE_SIZE",
    "SEARCH_ENDPOINT",
    "SEARCH_URL",
    "WRITER_FIELDS",
    "WRITER_PAGE_SIZE",
    "GuardianClient",
    "build_search_url",
    "encode_query",
]

logger = logging.getLogger(__name__)

SEARCH_ENDPOINT = "https://content.guardianapis.com/search"
PAGE_SIZE = 100
SEARCH_URL = f"{SEARCH_ENDPOINT}?show-fields=body&page-size={PAGE_SIZE}"
WRITER_FIELDS = ("body", "headline", "trailText", "main")
WRITER_PAGE_SIZE = 200

DEFAULT_HEADERS = {
    "User-Agent": "guardianscrape/0.1 (+https://open-platform.theguardian.com/)",
    "Accept": "application/json",
}


def encode_query(query: str) -> str:
    """Replace the first space in ``query`` with ``+``.

    Only the first occurrence is substituted; any further spaces are passed
    through unchanged.
    """

    return query.replace(" ", "+", 1)


def build_search_url(query: str, api_key: str) -> str:
    """Return the full search URL for ``query``."""

    return SEARCH_URL + "&api-key=" + api_key + "&q=" + encode_query(query)


class GuardianClient:
    """Thin wrapper around a :class:`requests.Session` for search calls."""

    def __init__(
        self,
        api_key: str,
        session: requests.Session | None = None,
        *,
        timeout: float | None = None,
    ) -> None:
        self.api_key = api_key
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(DEFAULT_HEADERS)

    @classmethod
    def from_settings(
        cls, settings: GuardianSettings, session: requests.Session | None = None
    ) -> "GuardianClient":
        return cls(settings.api_key, session, timeout=settings.timeout)

    def search(self, query: str) -> List[SearchResult]:
        """Run one search and return the article records in response order.

        HTTP and decoding errors are raised as-is from :mod:`requests` and
        :mod:`pydantic`.
        """

        url = build_search_url(query, self.api_key)
        logger.info("Searching for %r", query)
        response = self._session.get(url, timeout=self.timeout)
        response.raise_for_status()
        results = SearchResponse.model_validate(response.json()).results
        logger.info("Search returned %d results", len(results))
        return results

    def search_fields(
        self,
        query: str,
        fields: Sequence[str] = WRITER_FIELDS,
        *,
        page_size: int = WRITER_PAGE_SIZE,
    ) -> List[SearchResult]:
        """Search with an explicit field list and a URL-encoded query."""

        params = {
            "show-fields": ",".join(fields),
            "page-size": page_size,
            "api-key": self.api_key,
            "q": query,
        }
        logger.info("Searching for %r with fields %s", query, ",".join(fields))
        response = self._session.get(SEARCH_ENDPOINT, params=params, timeout=self.timeout)
        response.raise_for_status()
        results = SearchResponse.model_validate(response.json()).results
        logger.info("Search returned %d results", len(results))
        return results
