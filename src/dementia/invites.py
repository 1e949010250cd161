"""Account-wide invite polling."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dementia.errors import DecodeError, DementiaError, TransportError
from dementia.sync import decode_sync

if TYPE_CHECKING:
    from dementia.api.sync import SyncTransport

log = logging.getLogger(__name__)


class InviteScanner:
    """Lists the rooms the account is currently invited to.

    Keeps no sync token: every call fetches the complete invite state again,
    so listing is idempotent and a failed call loses nothing.
    """

    def __init__(self, transport: SyncTransport) -> None:
        self._transport = transport
        self.last_error: DementiaError | None = None

    def list_invites(self) -> set[str]:
        try:
            result = decode_sync(self._transport.perform_sync(timeline_limit=0))
        except (TransportError, DecodeError) as exc:
            log.warning("Invite sync failed: %s", exc)
            self.last_error = exc
            return set()
        self.last_error = None
        return {room_id for room_id, info in result.rooms.invite.items() if info.is_invited}
