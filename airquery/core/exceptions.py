"""Custom exception hierarchy."""

from __future__ import annotations

from collections.abc import Iterable


class AirQueryError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(AirQueryError):
    """Client options are missing or malformed.

    Raised at construction time, before any network access.
    """

    def __init__(self, missing: Iterable[str] = (), message: str | None = None) -> None:
        self.missing = tuple(missing)
        if message is None:
            message = f"Missing options {', '.join(self.missing)} in AirTable client"
        super().__init__(message)


class ApiError(AirQueryError):
    """Non-200 response from the backing service."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class RateLimitError(ApiError):
    """Service rate limit exceeded."""

    def __init__(self, message: str, retry_after: int = 30) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after


class TransportError(AirQueryError):
    """Underlying network or HTTP client failure."""

    pass


class ResponseParseError(AirQueryError):
    """Response body could not be decoded as JSON."""

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ValidationError(AirQueryError):
    """Invalid argument passed to a builder or mutation call."""

    pass
