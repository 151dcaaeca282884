"""aiohttp implementation of the HTTP gateway."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp

from ...core.exceptions import ApiError, RateLimitError, ResponseParseError, TransportError
from .transport import QueryParams

logger = logging.getLogger(__name__)

_BODY_PREVIEW = 200


class HTTPClient:
    """Async HTTP client bound to one base URL root and one API key."""

    def __init__(self, base_url: str, api_key: str, timeout: float = 30.0) -> None:
        self.base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self._headers)
        return self._session

    def url_for(self, path: str) -> str:
        return f"{self.base_url}{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: QueryParams | None = None,
        json_body: Any | None = None,
    ) -> Any:
        """Send one request and decode the JSON response.

        Raises:
            ApiError: Non-200 status, with the service message
            RateLimitError: Status 429
            ResponseParseError: Body is not decodable text or not valid JSON
            TransportError: Connection or timeout failure
        """
        url = self.url_for(path)
        logger.debug("http_request", extra={"method": method, "url": url})

        try:
            async with self.session.request(
                method, url, params=params, json=json_body
            ) as response:
                status = response.status
                retry_after = response.headers.get("Retry-After")
                charset = response.charset or "utf-8"
                raw = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(
                "http_transport_error",
                extra={"method": method, "url": url, "error_type": type(e).__name__},
            )
            raise TransportError(f"{method} {url} failed: {e}") from e

        payload = self._decode(raw, status, charset)

        if status == 200:
            return payload

        message = extract_error_message(payload, status)
        logger.debug(
            "http_error_response", extra={"method": method, "url": url, "status": status}
        )
        if status == 429:
            raise RateLimitError(message, retry_after=_parse_retry_after(retry_after))
        raise ApiError(message, status_code=status)

    @staticmethod
    def _decode(raw: bytes, status: int, charset: str = "utf-8") -> Any:
        if not raw:
            return {}
        try:
            return json.loads(raw.decode(charset))
        except (LookupError, ValueError) as e:
            # UnicodeDecodeError is a ValueError
            raise ResponseParseError(
                f"Invalid JSON in response (HTTP {status})",
                status_code=status,
                body=raw[:_BODY_PREVIEW].decode("utf-8", errors="replace"),
            ) from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def extract_error_message(payload: Any, status: int) -> str:
    """Pull the service message out of an error body.

    Accepts ``{"message": ...}``, ``{"error": {"message": ...}}`` and
    ``{"error": "CODE"}``.
    """
    if isinstance(payload, dict):
        if payload.get("message"):
            return str(payload["message"])
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error
    return f"HTTP {status}"


def _parse_retry_after(value: str | None) -> int:
    if value is None:
        return 30
    try:
        return max(0, int(value))
    except ValueError:
        return 30
