"""Cursor-driven list fetching.

The list endpoint returns at most one page of records plus an optional
``offset`` cursor. The fetcher follows the cursor until the service stops
returning one, sleeping between pages to stay under the per-base rate limit.

Records are concatenated in the order the service emits them. Pages are
never merged by position: every page numbers its records from zero, so a
keyed merge would silently drop everything after the first page.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from time import perf_counter
from typing import Any

from ..core.exceptions import ResponseParseError
from ..models.query import QuerySpec
from ..models.record import Record, format_records
from ..models.table import TableRef
from .rest.transport import HttpGateway

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[Any]]


def build_list_params(spec: QuerySpec, cursor: str | None = None) -> list[tuple[str, str]]:
    """Build list endpoint query parameters from the non-empty parts of a spec.

    Sort terms are flattened to ``sort[i][field]``/``sort[i][direction]`` and
    selected fields to repeated ``fields[]`` entries.
    """
    params: list[tuple[str, str]] = []
    if spec.formula:
        params.append(("filterByFormula", spec.formula))
    if spec.view:
        params.append(("view", spec.view))
    for name in spec.field_names:
        params.append(("fields[]", name))
    for index, term in enumerate(spec.sort):
        params.append((f"sort[{index}][field]", term.field))
        params.append((f"sort[{index}][direction]", term.direction.value))
    if spec.page_size:
        params.append(("pageSize", str(spec.page_size)))
    if cursor:
        params.append(("offset", cursor))
    return params


class PaginatedListFetcher:
    """Fetches every page of a list query, in order."""

    def __init__(
        self,
        gateway: HttpGateway,
        table: TableRef,
        *,
        sleep: Sleep | None = None,
    ) -> None:
        self._gateway = gateway
        self._table = table
        self._sleep = sleep or asyncio.sleep

    async def fetch(self, spec: QuerySpec) -> list[Record]:
        """Fetch all pages and return the formatted records.

        Args:
            spec: Query to run; ``spec.cursor`` is the first page's offset

        Returns:
            Formatted records across all pages in emission order
        """
        raw_records: list[dict[str, Any]] = []
        cursor = spec.cursor
        has_more = True
        pages = 0
        start = perf_counter()

        while has_more:
            page = await self._gateway.request(
                "GET", self._table.path, params=build_list_params(spec, cursor)
            )
            pages += 1
            if not isinstance(page, dict):
                raise ResponseParseError(
                    f"Expected a JSON object for page {pages} of {self._table.name!r}, "
                    f"got {type(page).__name__}",
                    body=repr(page)[:200],
                )
            records = page.get("records") or []
            raw_records.extend(records)

            cursor = page.get("offset") or None
            has_more = cursor is not None
            logger.debug(
                "page_fetched",
                extra={
                    "table": self._table.name,
                    "page": pages,
                    "records": len(records),
                    "has_more": has_more,
                },
            )
            if has_more:
                await self._sleep(spec.delay)

        logger.debug(
            "list_fetch_complete",
            extra={
                "table": self._table.name,
                "pages": pages,
                "total_records": len(raw_records),
                "latency_ms": (perf_counter() - start) * 1000.0,
            },
        )
        return format_records(raw_records)
