"""SDK exception hierarchy."""

from __future__ import annotations

import httpx

from tenor_sdk.models.errors import ErrorResponse


class TenorError(Exception):
    """Base class for every error the SDK raises."""


class TenorNetworkError(TenorError):
    """Raised when the HTTP call fails (DNS, connection refused, timeout, non-2xx)."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class TenorHTTPError(TenorNetworkError):
    """Raised when Tenor answers with a non-2xx status."""

    def __init__(
        self,
        status: int,
        error: ErrorResponse | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        self.status = status
        self.error = error
        self.response = response
        reason = error.status if error and error.status else "UNKNOWN"
        msg = error.message if error else f"HTTP {status}"
        super().__init__(f"[{status}] {reason}: {msg}")

    @classmethod
    def from_response(cls, response: httpx.Response) -> TenorHTTPError:
        """Build from an httpx response, attempting to parse the error body."""
        error: ErrorResponse | None = None
        try:
            body = response.json()
            if isinstance(body, dict) and isinstance(body.get("error"), dict):
                error = ErrorResponse.model_validate(body["error"])
        except ValueError:
            pass
        return cls(status=response.status_code, error=error, response=response)

    @property
    def message(self) -> str | None:
        return self.error.message if self.error else None


class TenorSerializationError(TenorError):
    """Raised when a response body isn't JSON or doesn't match the expected schema."""

    def __init__(self, message: str, body: str | None = None) -> None:
        self.body = body
        super().__init__(message)
