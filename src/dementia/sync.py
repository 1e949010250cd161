"""Decoding of ``/sync`` response bodies into :class:`SyncResult`.

Events are dispatched on their discriminator (``type``, then
``content.msgtype``) before any structural validation. Unrecognised
discriminators are skipped; recognised events with missing or malformed
fields are dropped individually. Only a broken envelope fails the decode.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from dementia.errors import DecodeError
from dementia.models.events import (
    MESSAGE_TYPES,
    ROOM_EVENT_TYPES,
    STRIPPED_EVENT_TYPES,
    MessageEvent,
    RoomEvent,
    StrippedStateEvent,
)
from dementia.models.sync import InviteInfo, JoinInfo, Rooms, SyncResult, Timeline

log = logging.getLogger(__name__)


def decode_sync(body: bytes | str) -> SyncResult:
    """Parse a raw ``/sync`` response body.

    Raises :class:`DecodeError` when the body is not JSON or the envelope
    (``next_batch``, ``rooms`` and the per-room containers) has the wrong shape.
    """
    try:
        data = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        raise DecodeError(f"invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise DecodeError("sync response is not a JSON object")

    next_batch = data.get("next_batch")
    if next_batch is not None and not isinstance(next_batch, str):
        raise DecodeError("expected a string", ("next_batch",))

    rooms = data.get("rooms")
    if rooms is None:
        return SyncResult(next_batch=next_batch)
    _expect_mapping(rooms, ("rooms",))

    join: dict[str, JoinInfo] = {}
    for room_id, room in _iter_rooms(rooms, "join"):
        join[room_id] = _decode_join(room_id, room)

    invite: dict[str, InviteInfo] = {}
    for room_id, room in _iter_rooms(rooms, "invite"):
        invite[room_id] = _decode_invite(room_id, room)

    return SyncResult(next_batch=next_batch, rooms=Rooms(invite=invite, join=join))


def decode_event(raw: Any) -> RoomEvent | None:
    """Decode one timeline event.

    Returns ``None`` for event types (or message types) this SDK does not model.
    """
    if not isinstance(raw, Mapping):
        raise DecodeError("event is not a JSON object")
    event_type = raw.get("type")
    cls = ROOM_EVENT_TYPES.get(event_type) if isinstance(event_type, str) else None
    if cls is None:
        log.debug("Skipping unhandled event type %r", event_type)
        return None

    path: tuple[str, ...] = (event_type,)
    if cls is MessageEvent:
        content = raw.get("content")
        msgtype = content.get("msgtype") if isinstance(content, Mapping) else None
        if not isinstance(msgtype, str) or msgtype not in MESSAGE_TYPES:
            # Redacted messages have an empty content and land here too.
            log.debug("Skipping unhandled msgtype %r", msgtype)
            return None
        path = (event_type, msgtype)

    return _validate(cls, raw, path)


def decode_stripped_event(raw: Any) -> StrippedStateEvent | None:
    """Decode one stripped state event from an invite's ``invite_state``."""
    if not isinstance(raw, Mapping):
        raise DecodeError("event is not a JSON object")
    event_type = raw.get("type")
    cls = STRIPPED_EVENT_TYPES.get(event_type) if isinstance(event_type, str) else None
    if cls is None:
        log.debug("Skipping unhandled stripped state type %r", event_type)
        return None
    return _validate(cls, raw, (event_type,))


def _validate(cls: Any, raw: Mapping[str, Any], path: tuple[str, ...]) -> Any:
    try:
        return cls.model_validate(raw)
    except ValidationError as exc:
        first = exc.errors()[0]
        # Drop the union tag pydantic inserts into the location.
        loc = tuple(str(part) for part in first["loc"] if part not in path)
        raise DecodeError(first["msg"], path + loc) from exc


def _decode_join(room_id: str, room: Mapping[str, Any]) -> JoinInfo:
    path = ("rooms", "join", room_id, "timeline")
    timeline = room.get("timeline")
    if timeline is None:
        return JoinInfo()
    _expect_mapping(timeline, path)
    events = _decode_list(
        timeline.get("events", []), path + ("events",), decode_event
    )
    prev_batch = timeline.get("prev_batch")
    limited = bool(timeline.get("limited", False))
    if limited:
        log.info("Timeline for %s is limited; older events were skipped by the server", room_id)
    return JoinInfo(
        timeline=Timeline(
            events=events,
            prev_batch=prev_batch if isinstance(prev_batch, str) else None,
            limited=limited,
        )
    )


def _decode_invite(room_id: str, room: Mapping[str, Any]) -> InviteInfo:
    path = ("rooms", "invite", room_id, "invite_state")
    state = room.get("invite_state")
    if state is None:
        return InviteInfo()
    _expect_mapping(state, path)
    events = _decode_list(state.get("events", []), path + ("events",), decode_stripped_event)
    return InviteInfo(invite_state=events)


def _decode_list(raw: Any, path: tuple[str, ...], decode: Any) -> list[Any]:
    if not isinstance(raw, list):
        raise DecodeError("expected a list", path)
    decoded: list[Any] = []
    for index, item in enumerate(raw):
        try:
            event = decode(item)
        except DecodeError as exc:
            log.warning("Dropping malformed event %s[%d]: %s", "/".join(path), index, exc)
            continue
        if event is not None:
            decoded.append(event)
    return decoded


def _iter_rooms(rooms: Mapping[str, Any], section: str):
    block = rooms.get(section)
    if block is None:
        return
    _expect_mapping(block, ("rooms", section))
    for room_id, room in block.items():
        _expect_mapping(room, ("rooms", section, room_id))
        yield room_id, room


def _expect_mapping(value: Any, path: tuple[str, ...]) -> None:
    if not isinstance(value, Mapping):
        raise DecodeError("expected a JSON object", path)
