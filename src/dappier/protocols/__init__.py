# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for pluggable client components.

Available protocols:
- HTTPClientProtocol: Interface for the HTTP client that sends API requests
"""

from .http_client import HTTPClientProtocol

__all__ = ["HTTPClientProtocol"]
