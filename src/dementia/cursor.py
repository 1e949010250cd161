"""Per-room sync cursor.

A cursor starts without a ``since`` token. Its first successful fetch only
records the server's position and returns nothing, so a freshly joined bot
does not replay the room backlog. Every later fetch returns the events that
arrived since the stored token and moves the token forward.

Failures never raise out of :meth:`RoomCursor.fetch_next_batch`: the token is
left untouched so the next call retries from the same position. Calls on one
cursor must not overlap.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dementia.errors import DecodeError, DementiaError, TransportError
from dementia.models.events import MessageEvent, RoomEvent
from dementia.sync import decode_sync

if TYPE_CHECKING:
    from dementia.api.sync import SyncTransport

log = logging.getLogger(__name__)

# Baseline syncs only need the token, not the history.
_BASELINE_TIMELINE_LIMIT = 1


class RoomCursor:
    def __init__(
        self,
        room_id: str,
        transport: SyncTransport,
        *,
        timeout_ms: int | None = None,
    ) -> None:
        self.room_id = room_id
        self._transport = transport
        self._timeout_ms = timeout_ms
        self._since: str | None = None
        self.last_error: DementiaError | None = None

    @property
    def since(self) -> str | None:
        """Opaque server token of the last successful fetch."""
        return self._since

    @property
    def is_tracking(self) -> bool:
        return self._since is not None

    def fetch_next_batch(self, *, include_state: bool = False) -> list[RoomEvent]:
        """Return the room events that arrived since the previous call.

        Only message events are returned unless ``include_state`` is set, in
        which case membership and redaction events are included as well.
        """
        since = self._since
        try:
            if since is None:
                body = self._transport.perform_sync(
                    rooms=[self.room_id], timeline_limit=_BASELINE_TIMELINE_LIMIT
                )
            else:
                body = self._transport.perform_sync(
                    rooms=[self.room_id], since=since, timeout_ms=self._timeout_ms
                )
            result = decode_sync(body)
            if result.next_batch is None:
                raise DecodeError("missing next_batch", ("next_batch",))
        except (TransportError, DecodeError) as exc:
            log.warning("Sync for %s failed, keeping position %r: %s", self.room_id, since, exc)
            self.last_error = exc
            return []

        self._since = result.next_batch
        self.last_error = None
        if since is None:
            log.debug("Baseline for %s established at %r", self.room_id, self._since)
            return []

        joined = result.rooms.join.get(self.room_id)
        if joined is None:
            return []
        if include_state:
            return list(joined.timeline.events)
        return [e for e in joined.timeline.events if isinstance(e, MessageEvent)]

    def __repr__(self) -> str:
        return f"RoomCursor(room_id={self.room_id!r}, since={self._since!r})"
