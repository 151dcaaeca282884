"""Table addressing."""

from __future__ import annotations

from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field


class TableRef(BaseModel):
    """A base id and table name pair.

    Paths are relative to the base URL root the gateway was built with.
    """

    base_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)

    model_config = ConfigDict(frozen=True)

    @property
    def path(self) -> str:
        return quote(self.name, safe="")

    def record_path(self, record_id: str) -> str:
        return f"{self.path}/{quote(record_id, safe='')}"
