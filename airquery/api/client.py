"""Client entry point.

Architecture:
    AirTable validates its options once, then builds one Base, with its
    own gateway, per base id on first use and reuses it afterwards. Every
    builder obtained from the same base shares that gateway and credential
    read-only; nothing is stored at module level.

Example:
    >>> async with AirTable({"url": API_URL, "key": "pat...", "base": "app..."}) as airtable:
    ...     tasks = await airtable.table("Tasks").where("Status", "Done").get()
    ...     people = await airtable.on("appOther").table("People").first()
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from ..core.config import ClientOptions
from ..runtime.pagination import Sleep
from ..runtime.rest.http_client import HTTPClient
from ..runtime.rest.transport import HttpGateway
from .base import Base
from .builder import QueryBuilder

logger = logging.getLogger(__name__)

GatewayFactory = Callable[[str, ClientOptions], HttpGateway]


def default_gateway_factory(base_url: str, options: ClientOptions) -> HttpGateway:
    return HTTPClient(base_url, api_key=options.key, timeout=options.timeout)


class AirTable:
    """Manager for the bases reachable with one API key."""

    def __init__(
        self,
        options: Mapping[str, Any] | ClientOptions,
        *,
        gateway_factory: GatewayFactory | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            options: ``url`` (template with a ``{base_id}`` placeholder),
                ``key`` and ``base``, plus optional ``timeout``
            gateway_factory: Builds the gateway of a base from its URL root
            sleep: Coroutine used for inter-request delays

        Raises:
            ConfigurationError: If a mandatory option is missing
        """
        if isinstance(options, ClientOptions):
            self.options = options
        else:
            self.options = ClientOptions.from_mapping(options)
        self._gateway_factory = gateway_factory or default_gateway_factory
        self._sleep = sleep
        self._bases: dict[str, Base] = {}

    def table(self, name: str) -> QueryBuilder:
        """Get a builder for a table of the default base."""
        return self.on(self.options.base).table(name)

    def on(self, base_id: str) -> Base:
        """Get a base, building its gateway the first time it is used."""
        base = self._bases.get(base_id)
        if base is None:
            base_url = self.options.base_url(base_id)
            gateway = self._gateway_factory(base_url, self.options)
            base = self._bases[base_id] = Base(base_id, gateway, sleep=self._sleep)
            logger.debug("base_registered", extra={"base_id": base_id, "base_url": base_url})
        return base

    async def close(self) -> None:
        """Close every gateway opened by this client."""
        for base in self._bases.values():
            await base.close()
        self._bases.clear()

    async def __aenter__(self) -> AirTable:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
