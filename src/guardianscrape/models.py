"""Domain models used across the application."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ArticleFields(BaseModel):
    """The ``fields`` block the search API returns for each article."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    body: Optional[str] = None
    headline: Optional[str] = None
    trail_text: Optional[str] = Field(default=None, alias="trailText")
    main: Optional[str] = None

    def get(self, name: str) -> Optional[str]:
        """Return a field by its wire name (``trailText``) or attribute name."""

        if name == "trailText":
            name = "trail_text"
        return getattr(self, name, None)


class SearchResult(BaseModel):
    """A single article record from a search response."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: Optional[str] = None
    web_url: Optional[str] = Field(default=None, alias="webUrl")
    web_title: Optional[str] = Field(default=None, alias="webTitle")
    fields: Optional[ArticleFields] = None

    @property
    def body(self) -> Optional[str]:
        return self.fields.body if self.fields is not None else None


class _ResponseBody(BaseModel):
    model_config = ConfigDict(extra="ignore")

    results: List[SearchResult] = Field(default_factory=list)


class SearchResponse(BaseModel):
    """Top level ``{"response": {"results": [...]}}`` envelope."""

    model_config = ConfigDict(extra="ignore")

    response: _ResponseBody

    @property
    def results(self) -> List[SearchResult]:
        return self.response.results


class GeneratedArticle(BaseModel):
    """Pseudo-article assembled by the Markov writer."""

    model_config = ConfigDict(populate_by_name=True)

    headline: str = ""
    trail_text: str = Field(default="", alias="trailText")
    body: str = ""
    main: str = ""
