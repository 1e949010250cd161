"""Client configuration, loadable from ``MATRIX_*`` environment variables."""

from __future__ import annotations

from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dementia.errors import ConfigError

NonNegativeFloat = Annotated[float, Field(ge=0.0)]
PositiveFloat = Annotated[float, Field(gt=0.0)]
NonNegativeInt = Annotated[int, Field(ge=0)]
PositiveInt = Annotated[int, Field(gt=0)]


class ClientConfig(BaseSettings):
    """Connection settings for one homeserver.

    Either ``access_token`` or both ``username`` and ``password`` must be
    set; anything else raises :class:`ConfigError` at construction.
    """

    model_config = SettingsConfigDict(env_prefix="MATRIX_", env_file=".env", extra="ignore")

    homeserver_url: str = Field(min_length=1)
    access_token: str | None = None
    username: str | None = None
    password: str | None = None
    device_id: str | None = None
    device_name: str | None = None
    timeout: PositiveFloat = 30.0
    sync_timeout_ms: NonNegativeInt = 0
    poll_interval: NonNegativeFloat = 10.0
    max_retries: PositiveInt = 3

    @field_validator("homeserver_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @model_validator(mode="after")
    def _check_auth(self) -> ClientConfig:
        if self.access_token:
            return self
        if self.username and self.password:
            return self
        raise ConfigError(
            "either access_token or both username and password must be configured"
        )

    @model_validator(mode="after")
    def _check_sync_timeout(self) -> ClientConfig:
        # The long-poll must return before the HTTP read timeout fires.
        if self.sync_timeout_ms >= self.timeout * 1000:
            raise ConfigError(
                f"sync_timeout_ms ({self.sync_timeout_ms}) must be below timeout ({self.timeout}s)"
            )
        return self

    @property
    def uses_password_login(self) -> bool:
        return not self.access_token
