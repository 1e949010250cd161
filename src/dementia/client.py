"""High-level homeserver handle composing HTTP, API groups, and rooms."""

from __future__ import annotations

import logging
from typing import Any

from dementia.api.auth import AuthAPI
from dementia.config import ClientConfig
from dementia.http import HTTPClient
from dementia.invites import InviteScanner
from dementia.room import Room

log = logging.getLogger(__name__)


class Homeserver:
    """Top-level SDK client.

    Usage::

        with Homeserver.from_url("https://matrix.example.org", access_token=tok) as hs:
            room = hs.connect().join_room("#bots:example.org")
            for event in room.get_new_messages():
                ...
    """

    def __init__(self, config: ClientConfig) -> None:
        self.config = config
        self.http = HTTPClient(
            config.homeserver_url,
            config.access_token,
            timeout=config.timeout,
            max_retries=config.max_retries,
        )
        self.auth = AuthAPI(self.http)
        self.user_id: str | None = None

        self._rooms: Any = None
        self._sync: Any = None
        self._invites: InviteScanner | None = None

    @classmethod
    def from_url(
        cls,
        homeserver_url: str,
        *,
        access_token: str | None = None,
        username: str | None = None,
        password: str | None = None,
        **kwargs: Any,
    ) -> Homeserver:
        config = ClientConfig(
            homeserver_url=homeserver_url,
            access_token=access_token,
            username=username,
            password=password,
            **kwargs,
        )
        return cls(config)

    # --- Authentication ---

    def connect(self) -> Homeserver:
        """Obtain an access token via password login unless one is configured."""
        if not self.http.token:
            result = self.auth.login_password(
                self.config.username or "",
                self.config.password or "",
                device_id=self.config.device_id,
                initial_device_display_name=self.config.device_name,
            )
            self.http.token = result.access_token
            self.user_id = result.user_id
            log.info("Logged in to %s as %s", self.config.homeserver_url, result.user_id)
        return self

    # --- API group properties ---

    @property
    def rooms(self) -> Any:
        if self._rooms is None:
            from dementia.api.rooms import RoomsAPI
            self._rooms = RoomsAPI(self.http)
        return self._rooms

    @property
    def sync(self) -> Any:
        if self._sync is None:
            from dementia.api.sync import SyncAPI
            self._sync = SyncAPI(self.http)
        return self._sync

    # --- Rooms ---

    def room(self, room_id: str) -> Room:
        """Handle for a room the account is already in; no request is made."""
        timeout_ms = self.config.sync_timeout_ms or None
        return Room(room_id, self.rooms, self.sync, sync_timeout_ms=timeout_ms)

    def join_room(self, room_id_or_alias: str) -> Room:
        joined = self.rooms.join(room_id_or_alias)
        log.info("Joined %s (%s)", room_id_or_alias, joined.room_id)
        return self.room(joined.room_id)

    def create_room(self, **kwargs: Any) -> Room:
        created = self.rooms.create(**kwargs)
        log.info("Created room %s", created.room_id)
        return self.room(created.room_id)

    def get_invites(self) -> set[str]:
        if self._invites is None:
            self._invites = InviteScanner(self.sync)
        return self._invites.list_invites()

    # --- Context manager ---

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> Homeserver:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
