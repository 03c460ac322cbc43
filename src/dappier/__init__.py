# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Dappier - Python client for the Dappier search and recommendations API.

Key Features:
    - Realtime search: a synthesized answer from live web search
    - AI recommendations: ranked articles from a chosen data model
    - Functional options for request fields and the HTTP client
    - Typed pydantic models for requests and responses
    - One exception class per failure kind, with causes preserved

Quick Start:
    >>> from dappier import DappierApp, with_ref, with_similarity_top_k
    >>>
    >>> with DappierApp("my-api-key") as app:
    ...     answer = app.realtime_search("when is election in USA")
    ...     articles = app.recommendations(
    ...         "latest tech news",
    ...         "dm_02hr75e8ate6adr15hjrf3ikol",
    ...         with_similarity_top_k(5),
    ...         with_ref("techcrunch.com"),
    ...     )

Version: 1.0.0
"""

__version__ = "1.0.0"

from .client import DappierApp
from .config import (
    BASE_URL,
    CONTENT_TYPE,
    REALTIME_DATAMODEL_ID,
    REALTIME_SEARCH_URL,
    ClientConfig,
)
from .exceptions import (
    DappierError,
    DecodeError,
    EmptyResultError,
    InvalidArgumentError,
    SerializationError,
    TransportError,
    UnexpectedStatusError,
)
from .options import (
    ClientOption,
    RecommendationsOption,
    with_base_url,
    with_http_client,
    with_num_articles_ref,
    with_ref,
    with_similarity_top_k,
)
from .protocols import HTTPClientProtocol
from .types import (
    Article,
    RealtimeSearchRequest,
    RealtimeSearchResponse,
    RealtimeSearchResult,
    RecommendationsRequest,
    RecommendationsResult,
)

__all__ = [
    "BASE_URL",
    "CONTENT_TYPE",
    "REALTIME_DATAMODEL_ID",
    "REALTIME_SEARCH_URL",
    "Article",
    "ClientConfig",
    "ClientOption",
    # Client
    "DappierApp",
    # Exceptions
    "DappierError",
    "DecodeError",
    "EmptyResultError",
    # Protocols
    "HTTPClientProtocol",
    "InvalidArgumentError",
    # Types
    "RealtimeSearchRequest",
    "RealtimeSearchResponse",
    "RealtimeSearchResult",
    "RecommendationsOption",
    "RecommendationsRequest",
    "RecommendationsResult",
    "SerializationError",
    "TransportError",
    "UnexpectedStatusError",
    # Options
    "with_base_url",
    "with_http_client",
    "with_num_articles_ref",
    "with_ref",
    "with_similarity_top_k",
]
