"""Service layer entry points for Guardian Scrape."""

from __future__ import annotations

from .client import GuardianClient, build_search_url, encode_query  # noqa: F401
from .markov import write_article  # noqa: F401
from .text import NoResultsError, concatenate_bodies, strip_html  # noqa: F401

__all__ = [
    "GuardianClient",
    "NoResultsError",
    "build_search_url",
    "concatenate_bodies",
    "encode_query",
    "scrape_text",
    "strip_html",
    "write_article",
]


def scrape_text(client: GuardianClient, query: str) -> str:
    """Search for ``query`` and return the stripped text of every article body."""

    results = client.search(query)
    return strip_html(concatenate_bodies(results))
