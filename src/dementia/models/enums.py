from enum import Enum


class Membership(str, Enum):
    invite = "invite"
    join = "join"
    leave = "leave"
    ban = "ban"
    knock = "knock"


class RoomPreset(str, Enum):
    private_chat = "private_chat"
    public_chat = "public_chat"
    trusted_private_chat = "trusted_private_chat"
