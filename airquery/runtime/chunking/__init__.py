"""Chunking layer for bulk record mutations.

Architecture:
    - definitions.py: Chunk metadata structures (ChunkPlan, ChunkResult)
    - planners.py: Splits a payload into chunks of at most MAX_BATCH_SIZE
    - executors.py: Submits chunks and aggregates the returned records
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import MAX_BATCH_SIZE, ChunkPlan, ChunkResult
from .executors import BatchMutationExecutor
from .planners import ChunkPlanner

__all__ = [
    "MAX_BATCH_SIZE",
    "ChunkPlan",
    "ChunkResult",
    "ChunkPlanner",
    "BatchMutationExecutor",
]
