# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client configuration for the Dappier API.

This module holds the fixed endpoint constants and the ClientConfig class
that resolves request URLs and headers for a single API key.
"""

from dataclasses import dataclass

from .exceptions import InvalidArgumentError

BASE_URL = "https://api.dappier.com/app/datamodel"
REALTIME_DATAMODEL_ID = "dm_01hpsxyfm2fwdt2zet9cg6fdxt"
REALTIME_SEARCH_URL = f"{BASE_URL}/{REALTIME_DATAMODEL_ID}"
CONTENT_TYPE = "application/json"

# Recommendation request defaults
DEFAULT_SIMILARITY_TOP_K = 9
DEFAULT_REF = ""  # empty means no domain filter
DEFAULT_NUM_ARTICLES_REF = 0

DEFAULT_TIMEOUT = 30.0  # seconds, applies to the default HTTP client only


@dataclass
class ClientConfig:
    """
    Configuration for a Dappier client handle.

    The base URL override exists for pointing the client at a local mock
    server. When it is set, it is used verbatim for both operations.
    """

    api_key: str
    """Dappier API key sent as a bearer token."""

    base_url: str | None = None
    """Optional URL override. None means the vendor endpoints."""

    timeout: float = DEFAULT_TIMEOUT
    """Timeout in seconds for the default HTTP client."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.api_key:
            raise InvalidArgumentError("API key cannot be empty", argument="api_key")
        if self.timeout <= 0:
            raise InvalidArgumentError("timeout must be positive", argument="timeout")

    def realtime_url(self) -> str:
        return self.base_url or REALTIME_SEARCH_URL

    def recommendations_url(self, datamodel_id: str) -> str:
        # The override is not joined with the datamodel id.
        if self.base_url:
            return self.base_url
        return f"{BASE_URL}/{datamodel_id}"

    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": CONTENT_TYPE,
            "Authorization": f"Bearer {self.api_key}",
        }

    def __repr__(self) -> str:
        return (
            f"ClientConfig(api_key='***', base_url={self.base_url!r}, "
            f"timeout={self.timeout!r})"
        )


__all__ = [
    "BASE_URL",
    "CONTENT_TYPE",
    "DEFAULT_NUM_ARTICLES_REF",
    "DEFAULT_REF",
    "DEFAULT_SIMILARITY_TOP_K",
    "DEFAULT_TIMEOUT",
    "REALTIME_DATAMODEL_ID",
    "REALTIME_SEARCH_URL",
    "ClientConfig",
]
