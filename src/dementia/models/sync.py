from dementia.models.base import MatrixModel
from dementia.models.events import (
    MemberEvent,
    MessageEvent,
    RoomEvent,
    RoomNameEvent,
    StrippedStateEvent,
)


class Timeline(MatrixModel):
    events: list[RoomEvent] = []
    prev_batch: str | None = None
    limited: bool = False

    @property
    def messages(self) -> list[MessageEvent]:
        return [e for e in self.events if isinstance(e, MessageEvent)]


class JoinInfo(MatrixModel):
    timeline: Timeline = Timeline()


class InviteInfo(MatrixModel):
    invite_state: list[StrippedStateEvent] = []

    @property
    def is_invited(self) -> bool:
        """True when the stripped state carries an ``invite`` membership event."""
        return any(
            isinstance(e, MemberEvent) and e.content.is_invite for e in self.invite_state
        )

    @property
    def name(self) -> str | None:
        for event in self.invite_state:
            if isinstance(event, RoomNameEvent):
                return event.content.name
        return None


class Rooms(MatrixModel):
    invite: dict[str, InviteInfo] = {}
    join: dict[str, JoinInfo] = {}


class SyncResult(MatrixModel):
    next_batch: str | None = None
    rooms: Rooms = Rooms()
