"""Auth API methods."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from dementia.errors import LoginError
from dementia.http import CLIENT_PREFIX
from dementia.models.auth import LoginFlowsResponse, LoginResponse, WhoAmIResponse

if TYPE_CHECKING:
    from dementia.http import HTTPClient

PASSWORD_LOGIN = "m.login.password"


class AuthAPI:
    """Methods for the login/logout/whoami endpoints."""

    def __init__(self, http: HTTPClient) -> None:
        self._http = http

    def login_flows(self) -> list[str]:
        r = self._http.get(f"{CLIENT_PREFIX}/login")
        return [flow.type for flow in LoginFlowsResponse.model_validate(r.json()).flows]

    def login_password(
        self,
        user: str,
        password: str,
        *,
        device_id: str | None = None,
        initial_device_display_name: str | None = None,
    ) -> LoginResponse:
        """Password login. Does not store the token; see ``Homeserver.connect``."""
        if PASSWORD_LOGIN not in self.login_flows():
            raise LoginError(f"{self._http.base_url} does not offer {PASSWORD_LOGIN}")
        payload: dict[str, Any] = {
            "type": PASSWORD_LOGIN,
            "identifier": {"type": "m.id.user", "user": user},
            "password": password,
        }
        if device_id is not None:
            payload["device_id"] = device_id
        if initial_device_display_name is not None:
            payload["initial_device_display_name"] = initial_device_display_name
        r = self._http.post(f"{CLIENT_PREFIX}/login", json=payload)
        return LoginResponse.model_validate(r.json())

    def whoami(self) -> WhoAmIResponse:
        r = self._http.get(f"{CLIENT_PREFIX}/account/whoami")
        return WhoAmIResponse.model_validate(r.json())

    def logout(self) -> None:
        self._http.post(f"{CLIENT_PREFIX}/logout", json={})
