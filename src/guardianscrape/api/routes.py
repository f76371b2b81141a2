"""API routes exposing the scraper and the Markov writer."""

from __future__ import annotations

import logging

import requests
from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool
from pydantic import BaseModel

from guardianscrape.config import GuardianSettings
from guardianscrape.models import GeneratedArticle
from guardianscrape.services.client import GuardianClient
from guardianscrape.services.markov import (
    DEFAULT_PREFIX_LENGTH,
    DEFAULT_WORD_LENGTH,
    write_article,
)
from guardianscrape.services.text import NoResultsError, concatenate_bodies, strip_html

logger = logging.getLogger(__name__)

router = APIRouter()


class ScrapeResponse(BaseModel):
    query: str
    text: str


def get_client() -> GuardianClient:
    """Build a client from the configured API key."""

    try:
        settings = GuardianSettings.load()
    except (FileNotFoundError, ValueError) as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return GuardianClient.from_settings(settings)


def _parse_int(raw: str | None, default: int) -> int:
    """Return ``raw`` as a positive int, or ``default`` when it is not one."""

    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        return default
    return value if value > 0 else default


def _require_query(q: str | None) -> str:
    query = (q or "").strip()
    if not query:
        raise HTTPException(status_code=400, detail="Query parameter 'q' is required.")
    return query


@router.get("/scrape", response_model=ScrapeResponse)
async def scrape(q: str | None = None, client: GuardianClient = Depends(get_client)) -> ScrapeResponse:
    """Return the stripped text of every article matching ``q``."""

    query = _require_query(q)

    try:
        results = await run_in_threadpool(client.search, query)
    except requests.RequestException as exc:
        logger.exception("Search failed for %r", query)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    try:
        output = concatenate_bodies(results)
    except NoResultsError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return ScrapeResponse(query=query, text=strip_html(output))


@router.get("/write", response_model=GeneratedArticle)
async def write(
    q: str | None = None,
    wl: str | None = None,
    pl: str | None = None,
    continuous: bool = False,
    client: GuardianClient = Depends(get_client),
) -> GeneratedArticle:
    """Generate a pseudo-article from the articles matching ``q``.

    ``wl`` (word limit) and ``pl`` (prefix length) fall back to their defaults
    when missing or not a positive integer. ``continuous`` lets each part run
    on past the end of a source article.
    """

    query = _require_query(q)
    word_length = _parse_int(wl, DEFAULT_WORD_LENGTH)
    prefix_length = _parse_int(pl, DEFAULT_PREFIX_LENGTH)

    try:
        results = await run_in_threadpool(client.search_fields, query)
    except requests.RequestException as exc:
        logger.exception("Search failed for %r", query)
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    try:
        return write_article(
            results,
            word_length=word_length,
            prefix_length=prefix_length,
            single=not continuous,
        )
    except NoResultsError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
