"""Chunk execution logic for bulk record mutations.

This module provides the BatchMutationExecutor class that splits a bulk
update payload into chunks, submits them one after the other and
aggregates the returned records in order.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Mapping
from time import perf_counter
from typing import Any

from ...core.enums import MutationVerb
from ...core.exceptions import ResponseParseError
from ...models.record import Record, format_records
from ...models.table import TableRef
from ..rest.transport import HttpGateway
from .definitions import ChunkPlan, ChunkResult
from .planners import ChunkPlanner
from .telemetry import log_chunk_completed, log_chunk_error, log_chunk_execution_complete

Sleep = Callable[[float], Awaitable[Any]]


class BatchMutationExecutor:
    """Submits bulk PUT/PATCH payloads in fixed-size chunks.

    Chunks are sent sequentially. The configured delay is applied between
    two chunks and never after the last one.
    """

    def __init__(
        self,
        gateway: HttpGateway,
        table: TableRef,
        *,
        planner: ChunkPlanner | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        """Initialize batch executor.

        Args:
            gateway: Gateway bound to the table's base
            table: Table the records belong to
            planner: Optional planner (default: chunks of MAX_BATCH_SIZE)
            sleep: Optional coroutine used for the inter-chunk delay
        """
        self._gateway = gateway
        self._table = table
        self._planner = planner or ChunkPlanner()
        self._sleep = sleep or asyncio.sleep

    async def execute(
        self,
        payload: Mapping[str, Mapping[str, Any]],
        *,
        verb: MutationVerb,
        typecast: bool = False,
        delay: float = 0.0,
    ) -> list[Record]:
        """Submit the payload and return the formatted records.

        Args:
            payload: Mapping of record id to field values
            verb: PUT for full replace, PATCH for partial update
            typecast: Forwarded in every request body
            delay: Seconds to wait between chunks

        Returns:
            Formatted records in submission order
        """
        endpoint_id = f"{verb.value} {self._table.name}"
        plans = self._planner.plan(payload, endpoint_id=endpoint_id)
        result = await self._run(
            plans, endpoint_id=endpoint_id, verb=verb, typecast=typecast, delay=delay
        )
        return format_records(result.records)

    async def _run(
        self,
        plans: list[ChunkPlan],
        *,
        endpoint_id: str,
        verb: MutationVerb,
        typecast: bool,
        delay: float,
    ) -> ChunkResult:
        result = ChunkResult()
        start = perf_counter()

        for plan in plans:
            chunk_start = perf_counter()
            try:
                records = await self._submit_chunk(plan, verb=verb, typecast=typecast)
            except Exception as e:
                log_chunk_error(
                    endpoint_id=endpoint_id,
                    chunk_index=plan.chunk_index,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise

            result.records.extend(records)
            result.chunks_used += 1
            log_chunk_completed(
                endpoint_id=endpoint_id,
                chunk_index=plan.chunk_index,
                rows_aggregated=len(records),
                latency_ms=(perf_counter() - chunk_start) * 1000.0,
            )

            if not plan.is_last:
                await self._sleep(delay)
                result.throttle_applied = True

        if plans:
            log_chunk_execution_complete(
                endpoint_id=endpoint_id,
                result=result,
                total_latency_ms=(perf_counter() - start) * 1000.0,
            )
        return result

    async def _submit_chunk(
        self, plan: ChunkPlan, *, verb: MutationVerb, typecast: bool
    ) -> list[dict[str, Any]]:
        response = await self._gateway.request(
            verb.value,
            self._table.path,
            json_body={"fields": plan.payload, "typecast": typecast},
        )
        if not isinstance(response, dict):
            raise ResponseParseError(
                f"Expected a JSON object for chunk {plan.chunk_index}, "
                f"got {type(response).__name__}",
                body=repr(response)[:200],
            )
        return list(response.get("records") or [])
