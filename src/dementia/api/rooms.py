"""Room membership and messaging API methods."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote
from uuid import uuid4

from dementia.http import CLIENT_PREFIX
from dementia.models.enums import RoomPreset
from dementia.models.rooms import CreateRoomResponse, JoinResponse, SendResponse

if TYPE_CHECKING:
    from dementia.http import HTTPClient


def _seg(value: str) -> str:
    return quote(value, safe="")


class RoomsAPI:
    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    def join(self, room_id_or_alias: str) -> JoinResponse:
        r = self._http.post(f"{CLIENT_PREFIX}/join/{_seg(room_id_or_alias)}", json={})
        return JoinResponse.model_validate(r.json())

    def create(
        self,
        *,
        name: str | None = None,
        topic: str | None = None,
        alias: str | None = None,
        invite: list[str] | None = None,
        preset: RoomPreset | str | None = None,
        is_direct: bool = False,
    ) -> CreateRoomResponse:
        payload: dict[str, Any] = {}
        if name is not None:
            payload["name"] = name
        if topic is not None:
            payload["topic"] = topic
        if alias is not None:
            payload["room_alias_name"] = alias
        if invite is not None:
            payload["invite"] = invite
        if preset is not None:
            payload["preset"] = RoomPreset(preset).value
        if is_direct:
            payload["is_direct"] = True
        r = self._http.post(f"{CLIENT_PREFIX}/createRoom", json=payload)
        return CreateRoomResponse.model_validate(r.json())

    def invite(self, room_id: str, user_id: str) -> None:
        self._http.post(f"{CLIENT_PREFIX}/rooms/{_seg(room_id)}/invite", json={"user_id": user_id})

    def leave(self, room_id: str) -> None:
        self._http.post(f"{CLIENT_PREFIX}/rooms/{_seg(room_id)}/leave", json={})

    def send(
        self,
        room_id: str,
        content: dict[str, Any],
        *,
        event_type: str = "m.room.message",
        txn_id: str | None = None,
    ) -> SendResponse:
        txn_id = txn_id or uuid4().hex
        r = self._http.put(
            f"{CLIENT_PREFIX}/rooms/{_seg(room_id)}/send/{_seg(event_type)}/{_seg(txn_id)}",
            json=content,
        )
        return SendResponse.model_validate(r.json())
