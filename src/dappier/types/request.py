# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Request payload models for the Dappier API.

Field names match the wire format, so ``model_dump_json()`` produces the
exact body the API expects.
"""

from pydantic import BaseModel

from ..config import (
    DEFAULT_NUM_ARTICLES_REF,
    DEFAULT_REF,
    DEFAULT_SIMILARITY_TOP_K,
)


class RealtimeSearchRequest(BaseModel):
    """Payload for the realtime search endpoint."""

    query: str


class RecommendationsRequest(BaseModel):
    """
    Payload for the AI recommendations endpoint.

    Instances are built with defaults and then mutated in place by
    recommendation options before being serialized.

    Attributes:
        query: Natural language query or URL. When a URL is passed the API
            summarizes the page and searches on that summary.
        similarity_top_k: Number of articles to return.
        ref: Domain the recommendations should come from
            (e.g. ``techcrunch.com``). Empty means no filter.
        num_articles_ref: How many articles are guaranteed to match ``ref``.
    """

    query: str
    similarity_top_k: int = DEFAULT_SIMILARITY_TOP_K
    ref: str = DEFAULT_REF
    num_articles_ref: int = DEFAULT_NUM_ARTICLES_REF


__all__ = ["RealtimeSearchRequest", "RecommendationsRequest"]
