"""Chunking metadata definitions.

This module defines the data structures used to describe how a bulk
mutation payload is split and what the executor reports back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Service-imposed limit of records per batch request
MAX_BATCH_SIZE = 10


@dataclass(frozen=True)
class ChunkPlan:
    """Plan for a single chunk.

    Attributes:
        payload: Record id to field mapping submitted in this chunk
        chunk_index: Zero-based index of this chunk in the overall plan
        total_chunks: Number of chunks in the overall plan
    """

    payload: dict[str, Any]
    chunk_index: int = 0
    total_chunks: int = 1

    @property
    def size(self) -> int:
        return len(self.payload)

    @property
    def is_last(self) -> bool:
        return self.chunk_index >= self.total_chunks - 1


@dataclass
class ChunkResult:
    """Result of chunked execution.

    Attributes:
        records: Raw record envelopes, in submission order
        chunks_used: Number of chunks that were submitted
        throttle_applied: Whether a delay was applied between chunks
    """

    records: list[dict[str, Any]] = field(default_factory=list)
    chunks_used: int = 0
    throttle_applied: bool = False

    @property
    def total_records(self) -> int:
        return len(self.records)
