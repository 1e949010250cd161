"""Sync API methods."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol

from dementia.http import CLIENT_PREFIX
from dementia.models.sync import SyncResult
from dementia.sync import decode_sync

if TYPE_CHECKING:
    from dementia.http import HTTPClient


class SyncTransport(Protocol):
    """What the room cursor and invite scanner need from the transport."""

    def perform_sync(
        self,
        rooms: Sequence[str] | None = None,
        since: str | None = None,
        timeline_limit: int | None = None,
        timeout_ms: int | None = None,
    ) -> bytes: ...


def build_filter(
    rooms: Sequence[str] | None = None, timeline_limit: int | None = None
) -> dict[str, Any]:
    """Inline sync filter restricting the rooms and timeline length."""
    room_filter: dict[str, Any] = {}
    if rooms is not None:
        room_filter["rooms"] = list(rooms)
    if timeline_limit is not None:
        room_filter["timeline"] = {"limit": timeline_limit}
    return {"room": room_filter} if room_filter else {}


class SyncAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    def perform_sync(
        self,
        rooms: Sequence[str] | None = None,
        since: str | None = None,
        timeline_limit: int | None = None,
        timeout_ms: int | None = None,
    ) -> bytes:
        """GET ``/sync`` and return the raw body.

        ``rooms=None`` means every room; an explicit list restricts the
        response to those rooms.
        """
        params: dict[str, Any] = {}
        sync_filter = build_filter(rooms, timeline_limit)
        if sync_filter:
            params["filter"] = json.dumps(sync_filter, separators=(",", ":"))
        if since is not None:
            params["since"] = since
        if timeout_ms is not None:
            params["timeout"] = timeout_ms
        r = self._http.get(f"{CLIENT_PREFIX}/sync", params=params)
        return r.content

    def sync(self, since: str | None = None, *, timeout_ms: int | None = None) -> SyncResult:
        """Unfiltered sync, decoded."""
        return decode_sync(self.perform_sync(since=since, timeout_ms=timeout_ms))
