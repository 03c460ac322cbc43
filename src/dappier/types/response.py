# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Response models for the Dappier API.

Missing fields decode to empty values and unknown fields are ignored, so
additions on the API side do not break decoding.
"""

from pydantic import BaseModel, Field, TypeAdapter


class RealtimeSearchResponse(BaseModel):
    """Inner object of a realtime search result."""

    results: str = ""


class RealtimeSearchResult(BaseModel):
    """A single realtime search answer."""

    response: RealtimeSearchResponse = Field(default_factory=RealtimeSearchResponse)


class Article(BaseModel):
    """
    A recommended article.

    Attributes:
        author: Author of the article
        image_url: URL of the article's image
        preview_content: Preview content of the article
        pubdate: Publication date as formatted by the API
        pubdate_unix: Publication date as a Unix timestamp
        score: Relevance score
        site: Name of the source site
        site_domain: Domain of the source site
        title: Title of the article
        url: URL of the article
    """

    author: str = ""
    image_url: str = ""
    preview_content: str = ""
    pubdate: str = ""
    pubdate_unix: int = 0
    score: float = 0.0
    site: str = ""
    site_domain: str = ""
    title: str = ""
    url: str = ""


class RecommendationsResult(BaseModel):
    """Ranked articles returned by the AI recommendations endpoint."""

    results: list[Article] = Field(default_factory=list)


# The realtime endpoint answers with a JSON array
RealtimeSearchResultList = TypeAdapter(list[RealtimeSearchResult])


__all__ = [
    "Article",
    "RealtimeSearchResponse",
    "RealtimeSearchResult",
    "RealtimeSearchResultList",
    "RecommendationsResult",
]
