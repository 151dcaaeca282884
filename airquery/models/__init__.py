"""Data models.

Records stay plain dicts; the query and addressing types are frozen
pydantic models so that a spec handed to a fetch cannot change under it.
"""

from .query import DEFAULT_DELAY, QuerySpec, SortTerm
from .record import RESERVED_KEYS, Record, format_record, format_records
from .table import TableRef

__all__ = [
    "DEFAULT_DELAY",
    "QuerySpec",
    "SortTerm",
    "Record",
    "RESERVED_KEYS",
    "format_record",
    "format_records",
    "TableRef",
]
