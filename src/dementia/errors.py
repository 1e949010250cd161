"""SDK exception hierarchy."""

from __future__ import annotations

import httpx

from dementia.models.errors import ErrorCode, ErrorResponse


class DementiaError(Exception):
    """Base class for every error raised by the SDK."""


class TransportError(DementiaError):
    """A request to the homeserver did not produce a usable response."""


class MatrixHTTPError(TransportError):
    """Raised when the homeserver returns a non-2xx response."""

    def __init__(
        self,
        status: int,
        error: ErrorResponse | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        self.status = status
        self.error = error
        self.response = response
        errcode = error.errcode if error else "UNKNOWN"
        msg = error.error if error else f"HTTP {status}"
        super().__init__(f"[{status}] {errcode}: {msg}")

    @classmethod
    def from_response(cls, response: httpx.Response) -> MatrixHTTPError:
        """Build from an httpx response, attempting to parse the error body."""
        error: ErrorResponse | None = None
        try:
            body = response.json()
            if isinstance(body, dict) and "errcode" in body:
                error = ErrorResponse.model_validate(body)
        except ValueError:
            pass
        return cls(status=response.status_code, error=error, response=response)

    @property
    def errcode(self) -> str | None:
        return self.error.errcode if self.error else None

    @property
    def code(self) -> ErrorCode | None:
        return self.error.code if self.error else None

    @property
    def retry_after_ms(self) -> int | None:
        if self.error:
            return self.error.retry_after_ms
        return None


class MatrixNetworkError(TransportError):
    """Raised when a transport-level error occurs (connection refused, timeout, etc.)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class DecodeError(DementiaError):
    """A sync payload (or one of its events) does not match the expected shape.

    ``path`` names the offending fragment, outermost first.
    """

    def __init__(self, message: str, path: tuple[str, ...] = ()) -> None:
        self.path = path
        self.message = message
        where = "/".join(path) if path else "<root>"
        super().__init__(f"{where}: {message}")


class ConfigError(DementiaError):
    """Raised when a client configuration cannot be used to authenticate."""


class LoginError(DementiaError):
    """Raised when the homeserver does not offer a usable login flow."""
