"""Helpers that turn search results into plain text."""

from __future__ import annotations

import re
from typing import Iterable, List, Sequence

from bs4 import BeautifulSoup
from bs4.element import CData, NavigableString, Script, Stylesheet

from guardianscrape.models import SearchResult

__all__ = [
    "NO_RESULTS_MESSAGE",
    "NoResultsError",
    "collect_field",
    "concatenate_bodies",
    "strip_html",
]

NO_RESULTS_MESSAGE = "Error. No results."

_WHITESPACE_RE = re.compile(r"\s+")

BLOCK_TAGS = (
    "address", "article", "aside", "blockquote", "br", "dd", "div", "dl", "dt",
    "figcaption", "figure", "footer", "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "hr", "li", "main", "ol", "p", "pre", "section", "table", "td",
    "th", "tr", "ul",
)


class NoResultsError(RuntimeError):
    """Raised when a search returns an empty result set."""

    def __init__(self, message: str = NO_RESULTS_MESSAGE) -> None:
        super().__init__(message)


def concatenate_bodies(results: Sequence[SearchResult]) -> str:
    """Join the ``body`` of every result, in order and without a separator.

    Results that carry no ``fields`` block or no ``body`` are skipped. An empty
    ``results`` sequence raises :class:`NoResultsError`.
    """

    if len(results) < 1:
        raise NoResultsError()

    output = ""
    for result in results:
        body = result.body
        if body:
            output += body
    return output


def collect_field(results: Iterable[SearchResult], name: str) -> List[str]:
    """Return the stripped text of field ``name`` for each result that has it."""

    values: List[str] = []
    for result in results:
        if result.fields is None:
            continue
        raw = result.fields.get(name)
        if not raw:
            continue
        text = strip_html(raw)
        if text:
            values.append(text)
    return values


def strip_html(
    html: str,
    *,
    include_script: bool = False,
    include_style: bool = False,
    compact_whitespace: bool = True,
) -> str:
    """Remove markup from ``html`` and return the visible text.

    Inline text is joined as-is; block elements such as ``p`` or ``br`` are
    padded with a space so neighbouring paragraphs do not run together.
    """

    if not html:
        return ""

    soup = BeautifulSoup(html, "lxml")
    excluded = []
    types: tuple = (NavigableString, CData)
    if include_script:
        types += (Script,)
    else:
        excluded.append("script")
    if include_style:
        types += (Stylesheet,)
    else:
        excluded.append("style")
    if excluded:
        for tag in soup(excluded):
            tag.decompose()

    for tag in soup(list(BLOCK_TAGS)):
        tag.insert_before(NavigableString(" "))
        tag.insert_after(NavigableString(" "))

    text = soup.get_text("", types=types)
    if compact_whitespace:
        text = _WHITESPACE_RE.sub(" ", text).strip()
    return text
