# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Dappier API client.

This module implements DappierApp, a synchronous client for the Dappier
realtime search and AI recommendations endpoints. Each call performs exactly
one HTTP exchange: validate arguments, serialize the payload, POST it with
bearer authentication, check for a 200 status, decode the JSON body and
return a typed result. Nothing is retried or cached.
"""

import logging
from types import TracebackType

import httpx
from pydantic import BaseModel, ValidationError

from .config import DEFAULT_TIMEOUT, ClientConfig
from .exceptions import (
    DecodeError,
    EmptyResultError,
    InvalidArgumentError,
    SerializationError,
    TransportError,
    UnexpectedStatusError,
)
from .options import ClientOption, RecommendationsOption
from .protocols import HTTPClientProtocol
from .types.request import RealtimeSearchRequest, RecommendationsRequest
from .types.response import (
    RealtimeSearchResult,
    RealtimeSearchResultList,
    RecommendationsResult,
)

logger = logging.getLogger(__name__)


def _is_null(body: bytes) -> bool:
    # JSON null decodes to no results
    return body.strip() == b"null"


class DappierApp:
    """
    Client handle for the Dappier API.

    A handle is created once per API key and may be shared between threads
    as long as the HTTP client it uses is thread-safe (``httpx.Client`` is).

    Attributes:
        config: Resolved configuration (API key, URL override, timeout)
        http_client: Client used to send requests

    Example:
        >>> with DappierApp("my-api-key") as app:
        ...     answer = app.realtime_search("when is election in USA")
        ...     print(answer.response.results)
    """

    def __init__(
        self,
        api_key: str,
        *options: ClientOption,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.config = ClientConfig(api_key=api_key, timeout=timeout)
        self.http_client: HTTPClientProtocol | None = None

        for option in options:
            option(self)

        self._owns_client = self.http_client is None
        if self.http_client is None:
            self.http_client = httpx.Client(
                timeout=self.config.timeout, follow_redirects=True
            )

    @property
    def api_key(self) -> str:
        """API key sent as the bearer token."""
        return self.config.api_key

    @property
    def base_url(self) -> str | None:
        """URL override set with ``with_base_url``, or None."""
        return self.config.base_url

    def close(self) -> None:
        """Close the HTTP client if this handle created it."""
        if self._owns_client and isinstance(self.http_client, httpx.Client):
            self.http_client.close()

    def __enter__(self) -> "DappierApp":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"DappierApp(config={self.config!r})"

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def realtime_search(self, query: str) -> RealtimeSearchResult:
        """
        Get a realtime answer assembled from live web search.

        The endpoint returns a JSON array; only the first element is returned
        and any further elements are discarded.

        Args:
            query: Natural language question

        Returns:
            The first RealtimeSearchResult in the response

        Raises:
            InvalidArgumentError: If query is empty
            SerializationError: If the payload cannot be encoded
            TransportError: If the request cannot be sent or read
            UnexpectedStatusError: If the API does not answer 200
            DecodeError: If the body is not a JSON array of results
            EmptyResultError: If the array is empty
        """
        if not query:
            raise InvalidArgumentError("query cannot be empty", argument="query")

        payload = self._serialize(RealtimeSearchRequest(query=query))
        body = self._post(self.config.realtime_url(), payload)

        if _is_null(body):
            raise EmptyResultError()

        try:
            results = RealtimeSearchResultList.validate_json(body)
        except ValidationError as exc:
            raise DecodeError(f"failed to decode realtime search response: {exc}") from exc

        logger.debug(f"Realtime search returned {len(results)} result(s)")
        if not results:
            raise EmptyResultError()

        return results[0]

    def recommendations(
        self,
        query: str,
        datamodel_id: str,
        *options: RecommendationsOption,
    ) -> RecommendationsResult:
        """
        Get AI recommendations from a data model.

        Args:
            query: Natural language query or URL. For a URL, the API summarizes
                the page and runs a semantic search on that summary.
            datamodel_id: Data model to query (e.g. ``dm_02hr75e8ate6adr15hjrf3ikol``)
            *options: Request options such as ``with_similarity_top_k(5)``,
                ``with_ref("techcrunch.com")`` or ``with_num_articles_ref(2)``

        Returns:
            RecommendationsResult with every returned article

        Raises:
            InvalidArgumentError: If query or datamodel_id is empty
            SerializationError: If the payload cannot be encoded
            TransportError: If the request cannot be sent or read
            UnexpectedStatusError: If the API does not answer 200
            DecodeError: If the body is not a recommendations object
            EmptyResultError: If no articles were returned
        """
        if not query:
            raise InvalidArgumentError("query cannot be empty", argument="query")
        if not datamodel_id:
            raise InvalidArgumentError(
                "datamodel_id cannot be empty", argument="datamodel_id"
            )

        request = RecommendationsRequest(query=query)
        for option in options:
            option(request)

        payload = self._serialize(request)
        body = self._post(self.config.recommendations_url(datamodel_id), payload)

        if _is_null(body):
            raise EmptyResultError()

        try:
            result = RecommendationsResult.model_validate_json(body)
        except ValidationError as exc:
            raise DecodeError(f"failed to decode recommendations response: {exc}") from exc

        logger.debug(f"Recommendations returned {len(result.results)} article(s)")
        if not result.results:
            raise EmptyResultError()

        return result

    # ------------------------------------------------------------------
    # HTTP plumbing
    # ------------------------------------------------------------------

    def _serialize(self, request: BaseModel) -> bytes:
        try:
            return request.model_dump_json().encode("utf-8")
        except ValueError as exc:
            raise SerializationError(f"failed to marshal request data: {exc}") from exc

    def _post(self, url: str, payload: bytes) -> bytes:
        """Send one POST and return the body of a 200 response."""
        client = self.http_client
        if client is None:
            raise TransportError("no HTTP client configured", url=url)

        try:
            request = httpx.Request(
                "POST", url, headers=self.config.headers(), content=payload
            )
        except httpx.InvalidURL as exc:
            raise TransportError(f"failed to create new request: {exc}", url=url) from exc

        logger.debug(f"POST {url} ({len(payload)} bytes)")
        try:
            response = client.send(request)
        except httpx.HTTPError as exc:
            raise TransportError(f"error making HTTP request: {exc}", url=url) from exc

        try:
            logger.debug(f"POST {url} -> {response.status_code}")
            if response.status_code != httpx.codes.OK:
                raise UnexpectedStatusError(response.status_code)

            try:
                return response.read()
            except (httpx.HTTPError, httpx.StreamError) as exc:
                raise TransportError(
                    f"failed to read response body: {exc}", url=url
                ) from exc
        finally:
            response.close()
