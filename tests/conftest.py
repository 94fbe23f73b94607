"""Shared test fixtures for SDK tests."""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from tenor_sdk.client import Tenor
from tenor_sdk.http import HTTPClient
from tenor_sdk.models.locale import Locale

API_KEY = "test-key-123"


def pytest_configure(config):
    config.addinivalue_line("markers", "live: hits the real Tenor API (needs TENOR_API_KEY)")


@pytest.fixture
def mock_transport():
    """Returns an httpx mock transport that records requests."""
    calls: list[dict[str, Any]] = []
    default_response = httpx.Response(200, json={})

    class RecordingTransport(httpx.AsyncBaseTransport):
        def __init__(self):
            self.response = default_response

        async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
            calls.append({
                "method": request.method,
                "url": str(request.url),
                "path": request.url.path,
                "params": request.url.params,
            })
            return self.response

    transport = RecordingTransport()
    return transport, calls


@pytest.fixture
def http_client(mock_transport):
    """HTTPClient with a mock transport."""
    transport, calls = mock_transport
    client = HTTPClient(API_KEY, Locale(), "US", transport=transport)
    return client, transport, calls


@pytest.fixture
def tenor(mock_transport):
    """Tenor facade with a mock transport."""
    transport, calls = mock_transport
    return Tenor(API_KEY, transport=transport), transport, calls


# ---------------------------------------------------------------------------
# Response payloads, trimmed from real Tenor responses
# ---------------------------------------------------------------------------

def media(url: str, dims: list[int], *, duration: float = 0.0, size: int = 1000) -> dict[str, Any]:
    return {"url": url, "duration": duration, "preview": "", "dims": dims, "size": size}


@pytest.fixture
def search_payload() -> dict[str, Any]:
    return {
        "results": [
            {
                "id": "14596065",
                "title": "",
                "media_formats": {
                    "gif": media("https://media.tenor.com/a/gif.gif", [498, 280], size=1873564),
                    "tinygif": media("https://media.tenor.com/a/tinygif.gif", [220, 124], size=123400),
                    "mp4": media("https://media.tenor.com/a/mp4.mp4", [640, 360], duration=2.3, size=251329),
                },
                "created": 1565383592.151398,
                "content_description": "Excited Cat GIF",
                "itemurl": "https://tenor.com/view/excited-cat-gif-14596065",
                "url": "https://tenor.com/bxWCh.gif",
                "tags": ["excited", "cat"],
                "flags": [],
                "hasaudio": False,
            },
            {
                "id": "17248385",
                "title": "yay",
                "media_formats": {
                    "nanogif": media("https://media.tenor.com/b/nanogif.gif", [90, 90], size=9000),
                },
                "created": 1590000000.5,
                "content_description": "Yay Dance GIF",
                "itemurl": "https://tenor.com/view/yay-gif-17248385",
                "url": "https://tenor.com/yay.gif",
                "tags": ["yay"],
                "flags": ["sticker"],
                "hasaudio": True,
            },
        ],
        "next": "CAgQ2N7N4w",
    }


@pytest.fixture
def categories_payload() -> dict[str, Any]:
    return {
        "locale": "en",
        "tags": [
            {
                "searchterm": "excited",
                "path": "/v2/search?q=excited&locale=en&component=categories&contentfilter=off",
                "image": "https://media.tenor.com/c/excited.gif",
                "name": "#excited",
            },
            {
                "searchterm": "happy",
                "path": "/v2/search?q=happy&locale=en&component=categories&contentfilter=off",
                "image": "https://media.tenor.com/c/happy.gif",
                "name": "#happy",
            },
        ],
    }


@pytest.fixture
def trending_payload() -> dict[str, Any]:
    return {"locale": "en", "results": ["good morning", "hug", "thank you"]}
