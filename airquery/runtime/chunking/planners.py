"""Chunk planning for bulk mutations."""

from __future__ import annotations

from collections.abc import Mapping
from itertools import islice
from typing import Any

from .definitions import MAX_BATCH_SIZE, ChunkPlan
from .telemetry import log_chunk_plan


class ChunkPlanner:
    """Splits an id to fields mapping into fixed-size chunks.

    Insertion order of the mapping is kept within and across chunks.
    """

    def __init__(self, max_chunk_size: int = MAX_BATCH_SIZE) -> None:
        if max_chunk_size < 1:
            raise ValueError(f"max_chunk_size must be positive, got {max_chunk_size}")
        self.max_chunk_size = max_chunk_size

    def plan(self, payload: Mapping[str, Any], *, endpoint_id: str = "unknown") -> list[ChunkPlan]:
        """Create chunk plans for a payload.

        Args:
            payload: Mapping of record id to field values
            endpoint_id: Identifier used in telemetry

        Returns:
            List of ChunkPlan, empty if the payload is empty
        """
        items = iter(payload.items())
        chunks: list[dict[str, Any]] = []
        while batch := dict(islice(items, self.max_chunk_size)):
            chunks.append(batch)

        plans = [
            ChunkPlan(payload=chunk, chunk_index=index, total_chunks=len(chunks))
            for index, chunk in enumerate(chunks)
        ]

        log_chunk_plan(
            endpoint_id=endpoint_id,
            total_chunks=len(plans),
            max_chunk_size=self.max_chunk_size,
            total_records=len(payload),
        )
        return plans
