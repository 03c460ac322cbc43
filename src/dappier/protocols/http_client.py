# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for the injectable HTTP client."""

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class HTTPClientProtocol(Protocol):
    """
    Minimal protocol for the HTTP client used by DappierApp.

    The client only needs to send one prepared request and return its
    response. ``httpx.Client`` satisfies this protocol, including clients
    configured with a custom transport, proxy or event hooks.
    """

    def send(self, request: httpx.Request) -> httpx.Response:
        """Send a prepared request and return the response."""
        ...
