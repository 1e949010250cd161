"""dementia — Matrix client SDK for polling chat bots."""

from dementia.client import Homeserver
from dementia.config import ClientConfig
from dementia.cursor import RoomCursor
from dementia.errors import (
    ConfigError,
    DecodeError,
    DementiaError,
    LoginError,
    MatrixHTTPError,
    MatrixNetworkError,
    TransportError,
)
from dementia.invites import InviteScanner
from dementia.models.events import (
    AudioContent,
    EmoteContent,
    FileContent,
    ImageContent,
    LocationContent,
    MemberEvent,
    MessageEvent,
    NoticeContent,
    RedactionEvent,
    TextContent,
    VideoContent,
)
from dementia.room import Room
from dementia.sync import decode_sync

__all__ = [
    "Homeserver",
    "ClientConfig",
    "Room",
    "RoomCursor",
    "InviteScanner",
    "decode_sync",
    # events
    "MessageEvent",
    "MemberEvent",
    "RedactionEvent",
    "TextContent",
    "EmoteContent",
    "NoticeContent",
    "ImageContent",
    "FileContent",
    "VideoContent",
    "AudioContent",
    "LocationContent",
    # errors
    "DementiaError",
    "TransportError",
    "MatrixHTTPError",
    "MatrixNetworkError",
    "DecodeError",
    "ConfigError",
    "LoginError",
]
