"""String enums shared across the query and runtime layers."""

from enum import Enum


class SortDirection(str, Enum):
    """Sort direction accepted by the list endpoint."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_str(cls, value: "str | SortDirection") -> "SortDirection":
        """Parse a direction case-insensitively."""
        if isinstance(value, SortDirection):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError as e:
            raise ValueError(f"Invalid sort direction: {value!r}") from e


class MutationVerb(str, Enum):
    """HTTP verb used to submit record updates.

    PUT replaces every field of the record, PATCH only the given ones.
    """

    PUT = "PUT"
    PATCH = "PATCH"

