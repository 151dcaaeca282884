"""A base: a group of tables sharing one gateway."""

from __future__ import annotations

from ..core.exceptions import ValidationError
from ..models.table import TableRef
from ..runtime.pagination import Sleep
from ..runtime.rest.transport import HttpGateway
from .builder import QueryBuilder


class Base:
    """Hands out query builders for the tables of one base."""

    def __init__(self, base_id: str, gateway: HttpGateway, *, sleep: Sleep | None = None) -> None:
        self.base_id = base_id
        self.gateway = gateway
        self._sleep = sleep

    def table(self, name: str) -> QueryBuilder:
        """Get a fresh builder for a table."""
        if not isinstance(name, str) or not name.strip():
            raise ValidationError(f"table name must be a non-empty string, got {name!r}")
        return QueryBuilder(
            self.gateway, TableRef(base_id=self.base_id, name=name), sleep=self._sleep
        )

    async def close(self) -> None:
        close = getattr(self.gateway, "close", None)
        if close is not None:
            await close()

    def __repr__(self) -> str:
        return f"Base({self.base_id!r})"
