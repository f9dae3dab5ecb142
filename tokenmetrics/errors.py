from __future__ import annotations

from typing import Any


class TokenMetricsError(RuntimeError):
    """Base class for every error raised by this package."""

    pass


class AuthError(TokenMetricsError):
    """Raised when no usable API key is configured."""

    pass


class APIConnectionError(TokenMetricsError):
    """Raised when the API could not be reached (DNS, refused connection, timeout)."""

    pass


class APIError(TokenMetricsError):
    """Raised when the API answers with a non-2xx status.

    `body` holds the decoded JSON error payload when the server sent one,
    otherwise the raw response text.
    """

    def __init__(self, message: str, status_code: int, body: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @classmethod
    def from_status(cls, status_code: int, body: Any) -> APIError:
        detail = body.get("message") if isinstance(body, dict) else body
        message = f"Token Metrics API request failed: {status_code}"
        if detail:
            message = f"{message} {detail}"
        return cls(message, status_code=status_code, body=body)
