"""SDK response and event models."""

from dementia.models.base import MatrixModel
from dementia.models.errors import ErrorCode, ErrorResponse

from dementia.models.auth import LoginFlow, LoginFlowsResponse, LoginResponse, WhoAmIResponse
from dementia.models.enums import Membership, RoomPreset
from dementia.models.events import (
    AudioContent,
    EmoteContent,
    FileContent,
    ImageContent,
    LocationContent,
    MemberContent,
    MemberEvent,
    MessageContent,
    MessageEvent,
    NoticeContent,
    RedactionEvent,
    RoomEvent,
    RoomNameContent,
    RoomNameEvent,
    StrippedStateEvent,
    TextContent,
    VideoContent,
)
from dementia.models.rooms import CreateRoomResponse, JoinResponse, SendResponse
from dementia.models.sync import InviteInfo, JoinInfo, Rooms, SyncResult, Timeline

__all__ = [
    "MatrixModel",
    "ErrorCode",
    "ErrorResponse",
    # enums
    "Membership",
    "RoomPreset",
    # auth
    "LoginFlow",
    "LoginFlowsResponse",
    "LoginResponse",
    "WhoAmIResponse",
    # events
    "AudioContent",
    "EmoteContent",
    "FileContent",
    "ImageContent",
    "LocationContent",
    "MemberContent",
    "MemberEvent",
    "MessageContent",
    "MessageEvent",
    "NoticeContent",
    "RedactionEvent",
    "RoomEvent",
    "RoomNameContent",
    "RoomNameEvent",
    "StrippedStateEvent",
    "TextContent",
    "VideoContent",
    # rooms
    "CreateRoomResponse",
    "JoinResponse",
    "SendResponse",
    # sync
    "InviteInfo",
    "JoinInfo",
    "Rooms",
    "SyncResult",
    "Timeline",
]
