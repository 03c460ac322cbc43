# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the Dappier client library.

This module defines the exception hierarchy used throughout the library.
All exceptions inherit from DappierError, making it easy to catch
every client failure with a single except clause. Errors that wrap a
lower-level failure are raised with ``raise ... from exc`` so the original
exception stays available on ``__cause__``.
"""


class DappierError(Exception):
    """Base exception for all Dappier client errors.

    Example:
        try:
            result = app.realtime_search("latest AI news")
        except DappierError as e:
            logger.error(f"Dappier request failed: {e}")
    """

    pass


class InvalidArgumentError(DappierError, ValueError):
    """Raised when a required argument is empty or out of range.

    Validation happens before any network activity, so this error is never
    transient and retrying with the same arguments will fail again.

    Attributes:
        argument: Name of the offending argument (e.g. ``"query"``).
            May be None if the context is not available.
    """

    def __init__(self, message: str, argument: str | None = None):
        super().__init__(message)
        self.argument = argument


class SerializationError(DappierError):
    """Raised when a request payload cannot be encoded as JSON."""

    pass


class TransportError(DappierError):
    """Raised when a request cannot be sent or its response cannot be read.

    Covers network, DNS, connection and timeout failures reported by the
    HTTP client. The underlying ``httpx`` exception is chained as the cause.

    Attributes:
        url: The URL the request was sent to, if known.

    Example:
        try:
            result = app.realtime_search(query)
        except TransportError:
            # Transient: the caller decides whether to retry
            time.sleep(1.0)
    """

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class UnexpectedStatusError(DappierError):
    """Raised when the API answers with a status code other than 200.

    Attributes:
        status_code: The HTTP status code returned by the API.

    Example:
        try:
            result = app.recommendations(query, datamodel_id)
        except UnexpectedStatusError as e:
            if e.status_code == 401:
                logger.error("Dappier rejected the API key")
    """

    def __init__(self, status_code: int):
        super().__init__(f"received non-OK response status: {status_code}")
        self.status_code = status_code


class DecodeError(DappierError):
    """Raised when a response body is not valid JSON of the expected shape."""

    pass


class EmptyResultError(DappierError):
    """Raised when a well-formed response contains zero result items."""

    def __init__(self, message: str = "no results found"):
        super().__init__(message)
