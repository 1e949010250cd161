"""HTTP client wrapping httpx with auth headers and rate-limit retry."""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from dementia.errors import MatrixHTTPError, MatrixNetworkError

log = logging.getLogger(__name__)

CLIENT_PREFIX = "/_matrix/client/v3"

_DEFAULT_MAX_RETRIES = 3
_BASE_RETRY_DELAY = 1.0


class HTTPClient:
    """Blocking HTTP client for the Matrix client-server API.

    One instance is shared by a homeserver handle and every room derived
    from it, so all of them reuse one connection pool and one access token.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        *,
        timeout: float = 30.0,
        max_retries: int = _DEFAULT_MAX_RETRIES,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._token = token
        self._max_retries = max(1, max_retries)
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
        )

    @property
    def token(self) -> str | None:
        return self._token

    @token.setter
    def token(self, value: str | None) -> None:
        self._token = value

    def _headers(self) -> dict[str, str]:
        h: dict[str, str] = {}
        if self._token:
            h["Authorization"] = f"Bearer {self._token}"
        return h

    def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Make an API request, retrying when the server rate-limits us."""
        for attempt in range(self._max_retries):
            try:
                response = self._client.request(
                    method,
                    path,
                    json=json,
                    params=params,
                    headers=self._headers(),
                )
            except httpx.TransportError as exc:
                raise MatrixNetworkError(str(exc)) from exc

            if response.status_code == 429 and attempt < self._max_retries - 1:
                retry_after = _retry_after(response)
                log.info("Rate limited on %s, retrying in %.2fs", path, retry_after)
                time.sleep(retry_after)
                continue

            if response.status_code >= 400:
                raise MatrixHTTPError.from_response(response)

            return response

        raise MatrixHTTPError.from_response(response)  # type: ignore[possibly-undefined]

    def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> httpx.Response:
        return self.request("PUT", path, **kwargs)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> HTTPClient:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()


def _retry_after(response: httpx.Response) -> float:
    try:
        ms = response.json().get("retry_after_ms")
    except (ValueError, AttributeError):
        ms = None
    if ms:
        return ms / 1000.0
    header = response.headers.get("retry-after")
    if header:
        try:
            return float(header)
        except ValueError:
            pass
    return _BASE_RETRY_DELAY
