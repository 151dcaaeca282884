"""Runtime layer: HTTP gateway, pagination and chunked mutations."""

from .chunking import MAX_BATCH_SIZE, BatchMutationExecutor, ChunkPlanner
from .pagination import PaginatedListFetcher, build_list_params
from .rest import HTTPClient, HttpGateway

__all__ = [
    "HTTPClient",
    "HttpGateway",
    "PaginatedListFetcher",
    "build_list_params",
    "BatchMutationExecutor",
    "ChunkPlanner",
    "MAX_BATCH_SIZE",
]
