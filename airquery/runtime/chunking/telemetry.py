"""Structured logging for chunking operations.

This module provides telemetry hooks for bulk mutations, emitting
structured logs for observability.
"""

from __future__ import annotations

import logging

from .definitions import ChunkResult

logger = logging.getLogger(__name__)


def log_chunk_plan(
    *,
    endpoint_id: str,
    total_chunks: int,
    max_chunk_size: int,
    total_records: int,
) -> None:
    """Log chunk plan creation.

    Args:
        endpoint_id: Endpoint identifier
        total_chunks: Total number of chunks planned
        max_chunk_size: Maximum records per chunk
        total_records: Records in the whole payload
    """
    logger.info(
        "chunk_plan_created",
        extra={
            "endpoint_id": endpoint_id,
            "total_chunks": total_chunks,
            "max_chunk_size": max_chunk_size,
            "total_records": total_records,
        },
    )


def log_chunk_completed(
    *,
    endpoint_id: str,
    chunk_index: int,
    rows_aggregated: int,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single chunk."""
    logger.info(
        "chunk_completed",
        extra={
            "endpoint_id": endpoint_id,
            "chunk_index": chunk_index,
            "rows_aggregated": rows_aggregated,
            "latency_ms": latency_ms,
        },
    )


def log_chunk_execution_complete(
    *,
    endpoint_id: str,
    result: ChunkResult,
    total_latency_ms: float | None = None,
) -> None:
    logger.info(
        "chunk_execution_complete",
        extra={
            "endpoint_id": endpoint_id,
            "chunks_used": result.chunks_used,
            "total_records": result.total_records,
            "throttle_applied": result.throttle_applied,
            "total_latency_ms": total_latency_ms,
        },
    )


def log_chunk_error(
    *,
    endpoint_id: str,
    chunk_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log chunk execution error.

    Args:
        endpoint_id: Endpoint identifier
        chunk_index: Zero-based index of the chunk that failed
        error_type: Type of error (e.g., "ApiError", "TransportError")
        error_message: Error message
    """
    logger.error(
        "chunk_error",
        extra={
            "endpoint_id": endpoint_id,
            "chunk_index": chunk_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
