"""Public API: client, bases and query builders."""

from .base import Base
from .builder import QueryBuilder
from .client import AirTable, GatewayFactory, default_gateway_factory

__all__ = [
    "AirTable",
    "Base",
    "QueryBuilder",
    "GatewayFactory",
    "default_gateway_factory",
]
