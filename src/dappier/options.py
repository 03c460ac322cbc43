# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Functional options for DappierApp and its recommendation requests.

Each option is a plain callable that mutates exactly one field of its
target. Options are applied in the order they are passed.

Example:
    >>> app = DappierApp("my-key", with_http_client(httpx.Client(timeout=5)))
    >>> result = app.recommendations(
    ...     "latest tech news",
    ...     "dm_02hr75e8ate6adr15hjrf3ikol",
    ...     with_similarity_top_k(5),
    ...     with_ref("techcrunch.com"),
    ... )
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

from .protocols import HTTPClientProtocol
from .types.request import RecommendationsRequest

if TYPE_CHECKING:
    from .client import DappierApp

ClientOption = Callable[["DappierApp"], None]
RecommendationsOption = Callable[[RecommendationsRequest], None]


def with_http_client(client: HTTPClientProtocol) -> ClientOption:
    """Use a custom HTTP client (transport, proxy, tracing hooks)."""

    def apply(app: "DappierApp") -> None:
        app.http_client = client

    return apply


def with_base_url(base_url: str) -> ClientOption:
    """Send every request to ``base_url`` instead of the Dappier endpoints.

    Intended for tests against a local mock server. The URL is used as-is
    for both operations; the datamodel id is not appended to it.
    """

    def apply(app: "DappierApp") -> None:
        app.config.base_url = base_url

    return apply


def with_similarity_top_k(k: int) -> RecommendationsOption:
    """Set the number of articles to return (default 9)."""

    def apply(request: RecommendationsRequest) -> None:
        request.similarity_top_k = k

    return apply


def with_ref(ref: str) -> RecommendationsOption:
    """Restrict or boost recommendations from a domain, e.g. ``techcrunch.com``."""

    def apply(request: RecommendationsRequest) -> None:
        request.ref = ref

    return apply


def with_num_articles_ref(num: int) -> RecommendationsOption:
    """Guarantee ``num`` articles from the domain set with :func:`with_ref`."""

    def apply(request: RecommendationsRequest) -> None:
        request.num_articles_ref = num

    return apply


__all__ = [
    "ClientOption",
    "RecommendationsOption",
    "with_base_url",
    "with_http_client",
    "with_num_articles_ref",
    "with_ref",
    "with_similarity_top_k",
]
