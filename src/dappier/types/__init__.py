# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Request and response models for the Dappier API."""

from .request import RealtimeSearchRequest, RecommendationsRequest
from .response import (
    Article,
    RealtimeSearchResponse,
    RealtimeSearchResult,
    RealtimeSearchResultList,
    RecommendationsResult,
)

__all__ = [
    "Article",
    "RealtimeSearchRequest",
    "RealtimeSearchResponse",
    "RealtimeSearchResult",
    "RealtimeSearchResultList",
    "RecommendationsRequest",
    "RecommendationsResult",
]
