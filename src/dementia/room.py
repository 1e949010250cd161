"""Joined-room handle."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dementia.cursor import RoomCursor
from dementia.models.events import (
    EmoteContent,
    MessageContent,
    NoticeContent,
    RoomEvent,
    TextContent,
)

if TYPE_CHECKING:
    from dementia.api.rooms import RoomsAPI
    from dementia.api.sync import SyncTransport


class Room:
    """A room the account has joined.

    Owns the room's :class:`RoomCursor`; poll it with :meth:`get_new_messages`
    from one thread only.
    """

    def __init__(
        self,
        room_id: str,
        rooms: RoomsAPI,
        sync: SyncTransport,
        *,
        sync_timeout_ms: int | None = None,
    ) -> None:
        self.room_id = room_id
        self._rooms = rooms
        self.cursor = RoomCursor(room_id, sync, timeout_ms=sync_timeout_ms)

    def get_new_messages(self, **kwargs: Any) -> list[RoomEvent]:
        return self.cursor.fetch_next_batch(**kwargs)

    def send_message(self, content: MessageContent) -> str:
        """Send any message content and return the new event id."""
        return self._rooms.send(self.room_id, content.to_content()).event_id

    def send_text(self, body: str) -> str:
        return self.send_message(TextContent(body=body))

    def send_notice(self, body: str) -> str:
        return self.send_message(NoticeContent(body=body))

    def send_emote(self, body: str) -> str:
        return self.send_message(EmoteContent(body=body))

    def invite(self, user_id: str) -> None:
        self._rooms.invite(self.room_id, user_id)

    def leave(self) -> None:
        self._rooms.leave(self.room_id)

    def __repr__(self) -> str:
        return f"Room({self.room_id!r})"
