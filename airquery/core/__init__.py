"""Core components."""

from .config import API_URL, MANDATORY_OPTIONS, ClientOptions
from .enums import MutationVerb, SortDirection
from .exceptions import (
    AirQueryError,
    ApiError,
    ConfigurationError,
    RateLimitError,
    ResponseParseError,
    TransportError,
    ValidationError,
)

__all__ = [
    "API_URL",
    "MANDATORY_OPTIONS",
    "ClientOptions",
    "SortDirection",
    "MutationVerb",
    # Exceptions
    "AirQueryError",
    "ApiError",
    "ConfigurationError",
    "RateLimitError",
    "ResponseParseError",
    "TransportError",
    "ValidationError",
]
