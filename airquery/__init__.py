"""airquery - fluent query builder and record access for Airtable-style REST tables."""

from .api import AirTable, Base, QueryBuilder
from .core import (
    API_URL,
    AirQueryError,
    ApiError,
    ClientOptions,
    ConfigurationError,
    MutationVerb,
    RateLimitError,
    ResponseParseError,
    SortDirection,
    TransportError,
    ValidationError,
)
from .models import QuerySpec, Record, SortTerm, TableRef, format_record
from .runtime import (
    MAX_BATCH_SIZE,
    BatchMutationExecutor,
    HTTPClient,
    HttpGateway,
    PaginatedListFetcher,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "AirTable",
    "Base",
    "QueryBuilder",
    "API_URL",
    "ClientOptions",
    # Models
    "QuerySpec",
    "SortTerm",
    "SortDirection",
    "MutationVerb",
    "Record",
    "TableRef",
    "format_record",
    # Runtime
    "HTTPClient",
    "HttpGateway",
    "PaginatedListFetcher",
    "BatchMutationExecutor",
    "MAX_BATCH_SIZE",
    # Exceptions
    "AirQueryError",
    "ApiError",
    "ConfigurationError",
    "RateLimitError",
    "ResponseParseError",
    "TransportError",
    "ValidationError",
]
