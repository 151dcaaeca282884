"""REST runtime abstractions."""

from .http_client import HTTPClient, extract_error_message
from .transport import HttpGateway, QueryParams

__all__ = [
    "HTTPClient",
    "HttpGateway",
    "QueryParams",
    "extract_error_message",
]
