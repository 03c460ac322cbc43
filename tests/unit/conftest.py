"""
Shared fixtures for the Dappier client tests.

The mock endpoint is an ``httpx.MockTransport`` that records every request it
receives and answers with a configurable status code and body.
"""

import json

import httpx
import pytest

from dappier import DappierApp, with_base_url, with_http_client
from dappier.config import REALTIME_DATAMODEL_ID

MOCK_BASE_URL = f"http://testserver/{REALTIME_DATAMODEL_ID}"

ARTICLE = {
    "author": "Test Author",
    "image_url": "https://example.com/image.jpg",
    "preview_content": "Test preview content",
    "pubdate": "Mon, 04 Nov 2024 12:00:00 +0000",
    "pubdate_unix": 1730721600,
    "score": 0.95,
    "site": "Example News",
    "site_domain": "example.com",
    "title": "Test Title",
    "url": "https://example.com/article",
}


class MockEndpoint:
    """Records requests and replies with a fixed response."""

    def __init__(self):
        self.status_code = 200
        self.body: bytes = b""
        self.requests: list[httpx.Request] = []

    def respond(self, status_code: int = 200, body: object = None, text: str = ""):
        self.status_code = status_code
        self.body = json.dumps(body).encode() if body is not None else text.encode()

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(
            self.status_code,
            content=self.body,
            headers={"Content-Type": "application/json"},
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_payload(self) -> dict:
        return json.loads(self.last_request.content)


@pytest.fixture
def endpoint():
    """Create a mock endpoint."""
    return MockEndpoint()


@pytest.fixture
def http_client(endpoint):
    """Create an httpx client routed to the mock endpoint."""
    client = httpx.Client(transport=httpx.MockTransport(endpoint.handler))
    yield client
    client.close()


@pytest.fixture
def app(http_client):
    """Create a DappierApp pointed at the mock endpoint."""
    return DappierApp(
        "mock-api-key",
        with_http_client(http_client),
        with_base_url(MOCK_BASE_URL),
    )


@pytest.fixture
def article():
    """A well-formed article as returned by the recommendations endpoint."""
    return dict(ARTICLE)
