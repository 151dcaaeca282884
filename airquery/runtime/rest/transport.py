"""Gateway interface consumed by the query and mutation layers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

QueryParams = Sequence[tuple[str, str]] | Mapping[str, str]


@runtime_checkable
class HttpGateway(Protocol):
    """Performs one HTTP request against a base URL root.

    Implementations return the decoded JSON body of a 200 response and raise
    ApiError, TransportError or ResponseParseError otherwise.
    """

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: QueryParams | None = None,
        json_body: Any | None = None,
    ) -> Any: ...
