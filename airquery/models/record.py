"""Record shape normalization.

The service wraps every record in an envelope::

    {"id": "rec...", "createdTime": "2024-01-01T00:00:00.000Z", "fields": {...}}

Callers get a flat mapping instead, with ``id`` and ``createdTime`` at the
top level next to the user fields.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

Record = dict[str, Any]

# Layered last, in this order, so they win over user fields of the same name
RESERVED_KEYS = ("createdTime", "id")


def format_record(raw: Mapping[str, Any]) -> Record:
    """Flatten a raw record envelope.

    Envelopes without ``fields`` (delete acknowledgements, for instance) are
    returned unchanged.
    """
    if "fields" not in raw:
        return raw  # type: ignore[return-value]

    record: Record = dict(raw["fields"] or {})
    for key in RESERVED_KEYS:
        if key in raw:
            record.pop(key, None)
            record[key] = raw[key]
    return record


def format_records(raw_records: Iterable[Mapping[str, Any]]) -> list[Record]:
    return [format_record(raw) for raw in raw_records]
