"""Shared test fixtures for SDK tests."""

from __future__ import annotations

import json
from collections import deque
from pathlib import Path
from typing import Any

import httpx
import pytest

from dementia.errors import MatrixNetworkError
from dementia.http import HTTPClient

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def sync_example() -> bytes:
    return (FIXTURES / "sync_example.json").read_bytes()


@pytest.fixture
def mock_transport():
    """Returns an httpx mock transport that records requests."""
    calls: list[dict[str, Any]] = []
    default_response = httpx.Response(200, json={})

    class RecordingTransport(httpx.BaseTransport):
        def __init__(self):
            self.response = default_response
            self.responses: deque[httpx.Response] = deque()

        def handle_request(self, request: httpx.Request) -> httpx.Response:
            body = None
            if request.content:
                try:
                    body = json.loads(request.content)
                except Exception:
                    body = request.content
            calls.append({
                "method": request.method,
                "url": str(request.url),
                "path": request.url.path,
                "params": dict(request.url.params),
                "headers": dict(request.headers),
                "body": body,
            })
            if self.responses:
                return self.responses.popleft()
            return self.response

    transport = RecordingTransport()
    return transport, calls


@pytest.fixture
def http_client(mock_transport):
    """HTTPClient with a mock transport."""
    transport, calls = mock_transport
    client = HTTPClient("https://matrix.test", token="test-token")
    # Replace the inner httpx client with one using our mock transport
    client._client = httpx.Client(
        base_url="https://matrix.test",
        transport=transport,
    )
    return client, transport, calls


class FakeSync:
    """Scripted stand-in for ``SyncAPI.perform_sync``.

    Each queued item is either a response body (dict, str or bytes) or an
    exception instance to raise.
    """

    def __init__(self, *replies: Any) -> None:
        self.replies: deque[Any] = deque(replies)
        self.calls: list[dict[str, Any]] = []

    def push(self, *replies: Any) -> None:
        self.replies.extend(replies)

    def perform_sync(self, rooms=None, since=None, timeline_limit=None, timeout_ms=None) -> bytes:
        self.calls.append({
            "rooms": rooms,
            "since": since,
            "timeline_limit": timeline_limit,
            "timeout_ms": timeout_ms,
        })
        if not self.replies:
            raise MatrixNetworkError("no scripted reply")
        reply = self.replies.popleft()
        if isinstance(reply, BaseException):
            raise reply
        if isinstance(reply, dict):
            return json.dumps(reply).encode()
        if isinstance(reply, str):
            return reply.encode()
        return reply


@pytest.fixture
def fake_sync():
    return FakeSync()
