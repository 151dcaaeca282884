"""Fluent query builder for one table.

Architecture:
    The builder accumulates filter, sort, pagination and field selection
    intent in private working state. Terminal operations snapshot that
    state into a frozen QuerySpec with build() and hand it to the runtime:
    - get()/all()/first()/count() → PaginatedListFetcher
    - update(mapping)/patch(mapping) → BatchMutationExecutor
    - find/insert/update/patch/delete on a single id → gateway directly

Design Decisions:
    - Fluent API: every configuration method returns the builder itself
    - Immutable snapshot: a running fetch never sees later builder calls
    - where() and where_raw() share a single formula slot, last call wins

Example:
    >>> records = await (client.table("Tasks")
    ...     .where("Status", "Done")
    ...     .order_by("Due", "desc")
    ...     .fields(["Name", "Due"])
    ...     .take(50)
    ...     .get())
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import timedelta
from typing import Any

from ..core.enums import MutationVerb, SortDirection
from ..core.exceptions import ValidationError
from ..models.query import DEFAULT_DELAY, QuerySpec, SortTerm
from ..models.record import Record, format_record
from ..models.table import TableRef
from ..runtime.chunking import BatchMutationExecutor
from ..runtime.pagination import PaginatedListFetcher, Sleep
from ..runtime.rest.transport import HttpGateway

# Marks an omitted where() value; None is a legitimate value
_MISSING: Any = object()


class QueryBuilder:
    """Builds and runs queries against a single table."""

    def __init__(
        self,
        gateway: HttpGateway,
        table: TableRef,
        *,
        sleep: Sleep | None = None,
    ) -> None:
        self._gateway = gateway
        self._table = table
        self._sleep = sleep

        self._typecast = False
        self._delay = DEFAULT_DELAY
        self._fields: list[str] = []
        self._formula: str | None = None
        self._view: str | None = None
        self._sort: list[SortTerm] = []
        self._limit: int | None = None
        self._offset: str | None = None

    @property
    def table(self) -> TableRef:
        return self._table

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def typecast(self, value: bool = True) -> QueryBuilder:
        """Let the service convert string values to the field types on writes."""
        self._typecast = bool(value)
        return self

    def delay(self, value: float | timedelta) -> QueryBuilder:
        """Set the pause between successive requests, in seconds."""
        seconds = value.total_seconds() if isinstance(value, timedelta) else float(value)
        if seconds < 0:
            raise ValidationError(f"delay must be non-negative, got {seconds}")
        self._delay = seconds
        return self

    def fields(self, names: str | Iterable[str]) -> QueryBuilder:
        """Restrict the returned fields. Repeated calls append."""
        if isinstance(names, str):
            names = [names]
        self._fields.extend(names)
        return self

    def where(self, field: str, operator: Any, value: Any = _MISSING) -> QueryBuilder:
        """Filter on one field.

        ``where(field, value)`` compares with ``=``. With three arguments the
        second one is the operator. Without a third argument the second one
        is always the value, even when it looks like an operator:
        ``where("Age", ">")`` yields ``{Age}=">"``.

        Field and value are not escaped.
        """
        if value is _MISSING:
            value = operator
            operator = "="

        self._formula = "{" + field + "}" + str(operator) + '"' + str(value) + '"'
        return self

    def where_raw(self, formula: str) -> QueryBuilder:
        """Filter with a raw formula, replacing any previous filter."""
        self._formula = formula
        return self

    def view(self, name: str) -> QueryBuilder:
        self._view = name
        return self

    def order_by(self, field: str, direction: str | SortDirection = "asc") -> QueryBuilder:
        """Append a sort term."""
        try:
            parsed = SortDirection.from_str(direction)
        except ValueError as e:
            raise ValidationError(str(e)) from e
        self._sort.append(SortTerm(field=field, direction=parsed))
        return self

    def limit(self, value: int) -> QueryBuilder:
        """Set the page size."""
        if value < 1:
            raise ValidationError(f"limit must be at least 1, got {value}")
        self._limit = value
        return self

    def take(self, value: int) -> QueryBuilder:
        """Alias to limit()."""
        return self.limit(value)

    def offset(self, cursor: str) -> QueryBuilder:
        """Start listing from a continuation cursor."""
        self._offset = cursor
        return self

    def skip(self, cursor: str) -> QueryBuilder:
        """Alias to offset()."""
        return self.offset(cursor)

    def build(self) -> QuerySpec:
        """Snapshot the current state into an immutable QuerySpec."""
        return QuerySpec(
            formula=self._formula,
            view=self._view,
            sort=tuple(self._sort),
            field_names=tuple(self._fields),
            page_size=self._limit,
            cursor=self._offset,
            typecast=self._typecast,
            delay=self._delay,
        )

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get(self) -> list[Record]:
        """Fetch every record matching the query, following pagination."""
        fetcher = PaginatedListFetcher(self._gateway, self._table, sleep=self._sleep)
        return await fetcher.fetch(self.build())

    async def all(self) -> list[Record]:
        """Alias to get()."""
        return await self.get()

    async def first(self) -> Record | None:
        """Return the first matching record, or None when nothing matches."""
        records = await self.get()
        return records[0] if records else None

    async def count(self) -> int:
        return len(await self.get())

    async def find(self, record_id: str) -> Record:
        """Fetch one record by id."""
        raw = await self._gateway.request("GET", self._record_path(record_id))
        return format_record(raw)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def insert(self, data: Mapping[str, Any]) -> Record:
        raw = await self._gateway.request(
            "POST", self._table.path, json_body=self._body(data)
        )
        return format_record(raw)

    async def update(
        self,
        record_id: str | Mapping[str, Mapping[str, Any]],
        data: Mapping[str, Any] | None = None,
    ) -> Record | list[Record]:
        """Replace a record, or many records when given an id to fields mapping.

        Fields left out of the payload are cleared by the service.
        """
        return await self._mutate(record_id, data, MutationVerb.PUT)

    async def patch(
        self,
        record_id: str | Mapping[str, Mapping[str, Any]],
        data: Mapping[str, Any] | None = None,
    ) -> Record | list[Record]:
        """Partially update a record, or many records when given a mapping."""
        return await self._mutate(record_id, data, MutationVerb.PATCH)

    async def delete(self, record_id: str) -> dict[str, Any]:
        """Delete a record and return the service acknowledgement as-is."""
        return await self._gateway.request("DELETE", self._record_path(record_id))

    async def _mutate(
        self,
        record_id: str | Mapping[str, Mapping[str, Any]],
        data: Mapping[str, Any] | None,
        verb: MutationVerb,
    ) -> Record | list[Record]:
        if isinstance(record_id, Mapping):
            if data is not None:
                raise ValidationError("data must be omitted when updating many records")
            spec = self.build()
            executor = BatchMutationExecutor(self._gateway, self._table, sleep=self._sleep)
            return await executor.execute(
                record_id, verb=verb, typecast=spec.typecast, delay=spec.delay
            )

        if data is None:
            raise ValidationError(f"data is required to {verb.value} record {record_id!r}")
        raw = await self._gateway.request(
            verb.value, self._record_path(record_id), json_body=self._body(data)
        )
        return format_record(raw)

    def _record_path(self, record_id: str) -> str:
        if not isinstance(record_id, str) or not record_id.strip():
            raise ValidationError(f"record id must be a non-empty string, got {record_id!r}")
        return self._table.record_path(record_id)

    def _body(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return {"fields": dict(data), "typecast": self._typecast}
