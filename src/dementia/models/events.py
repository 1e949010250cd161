"""Room event models — typed views of the events delivered by ``/sync``."""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import ConfigDict, Field

from dementia.models.base import MatrixModel
from dementia.models.enums import Membership


class _Frozen(MatrixModel):
    model_config = ConfigDict(frozen=True)


# --- Message content (discriminated by ``msgtype``) ---

class _MessageContent(_Frozen):
    body: str

    def to_content(self) -> dict[str, Any]:
        """Wire shape for ``PUT /rooms/{id}/send/m.room.message``."""
        return self.model_dump(exclude_none=True)


class TextContent(_MessageContent):
    msgtype: Literal["m.text"] = "m.text"


class EmoteContent(_MessageContent):
    msgtype: Literal["m.emote"] = "m.emote"


class NoticeContent(_MessageContent):
    msgtype: Literal["m.notice"] = "m.notice"


class _MediaContent(_MessageContent):
    url: str
    info: dict[str, Any] | None = None


class ImageContent(_MediaContent):
    msgtype: Literal["m.image"] = "m.image"


class FileContent(_MediaContent):
    msgtype: Literal["m.file"] = "m.file"
    filename: str | None = None


class VideoContent(_MediaContent):
    msgtype: Literal["m.video"] = "m.video"


class AudioContent(_MediaContent):
    msgtype: Literal["m.audio"] = "m.audio"


class LocationContent(_MessageContent):
    msgtype: Literal["m.location"] = "m.location"
    geo_uri: str


MessageContent = Annotated[
    Union[
        TextContent,
        EmoteContent,
        NoticeContent,
        ImageContent,
        FileContent,
        VideoContent,
        AudioContent,
        LocationContent,
    ],
    Field(discriminator="msgtype"),
]


# --- Events (discriminated by ``type``) ---

class MemberContent(_Frozen):
    membership: str | None = None
    displayname: str | None = None
    avatar_url: str | None = None

    @property
    def is_invite(self) -> bool:
        return self.membership == Membership.invite


class RoomNameContent(_Frozen):
    name: str | None = None


class MessageEvent(_Frozen):
    type: Literal["m.room.message"] = "m.room.message"
    sender: str
    content: MessageContent
    event_id: str | None = None
    origin_server_ts: int | None = None

    @property
    def body(self) -> str:
        return self.content.body


class MemberEvent(_Frozen):
    """Membership change. Appears both in timelines and in stripped invite state."""

    type: Literal["m.room.member"] = "m.room.member"
    sender: str | None = None
    state_key: str | None = None
    content: MemberContent = MemberContent()
    event_id: str | None = None
    origin_server_ts: int | None = None


class RedactionEvent(_Frozen):
    type: Literal["m.room.redaction"] = "m.room.redaction"
    sender: str | None = None
    redacts: str | None = None
    content: dict[str, Any] = {}
    event_id: str | None = None
    origin_server_ts: int | None = None

    @property
    def redacted_event_id(self) -> str | None:
        # Room version 11 moved ``redacts`` into the content.
        return self.redacts or self.content.get("redacts")


class RoomNameEvent(_Frozen):
    type: Literal["m.room.name"] = "m.room.name"
    sender: str | None = None
    state_key: str | None = None
    content: RoomNameContent = RoomNameContent()


RoomEvent = Annotated[
    Union[MessageEvent, MemberEvent, RedactionEvent],
    Field(discriminator="type"),
]

StrippedStateEvent = Annotated[
    Union[MemberEvent, RoomNameEvent],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Discriminator string → model mapping
# ---------------------------------------------------------------------------

def _by_tag(field_name: str, *classes: type[MatrixModel]) -> dict[str, type[MatrixModel]]:
    return {cls.model_fields[field_name].default: cls for cls in classes}


MESSAGE_TYPES = _by_tag(
    "msgtype",
    TextContent,
    EmoteContent,
    NoticeContent,
    ImageContent,
    FileContent,
    VideoContent,
    AudioContent,
    LocationContent,
)

ROOM_EVENT_TYPES = _by_tag("type", MessageEvent, MemberEvent, RedactionEvent)

STRIPPED_EVENT_TYPES = _by_tag("type", MemberEvent, RoomNameEvent)
