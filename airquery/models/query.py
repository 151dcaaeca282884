"""Query specification model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import SortDirection

DEFAULT_DELAY = 0.2


class SortTerm(BaseModel):
    """One ``{field, direction}`` sort term."""

    field: str = Field(..., min_length=1)
    direction: SortDirection = SortDirection.ASC

    model_config = ConfigDict(frozen=True)


class QuerySpec(BaseModel):
    """Immutable snapshot of a QueryBuilder.

    Attributes:
        formula: filterByFormula expression, from where() or where_raw()
        view: View name to read records from
        sort: Ordered sort terms
        field_names: Fields to return (empty means all fields)
        page_size: Records per page
        cursor: Continuation cursor to start listing from
        typecast: Whether the service should coerce string values on writes
        delay: Seconds to wait between successive requests of one operation
    """

    formula: str | None = None
    view: str | None = None
    sort: tuple[SortTerm, ...] = ()
    field_names: tuple[str, ...] = ()
    page_size: int | None = Field(default=None, ge=1)
    cursor: str | None = None
    typecast: bool = False
    delay: float = Field(default=DEFAULT_DELAY, ge=0)

    model_config = ConfigDict(frozen=True)
