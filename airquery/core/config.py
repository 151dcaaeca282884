"""Client configuration.

The client needs three options: the base URL template, the API key and the
default base id. The URL template contains a ``{base_id}`` placeholder that
is filled once per base.
"""

from __future__ import annotations

from collections.abc import Mapping
from string import Formatter
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .exceptions import ConfigurationError

API_URL = "https://api.airtable.com/v0/{base_id}/"

MANDATORY_OPTIONS = ("url", "key", "base")


class ClientOptions(BaseModel):
    """Validated client options."""

    url: str = Field(..., min_length=1)
    key: str = Field(..., min_length=1)
    base: str = Field(..., min_length=1)
    timeout: float = Field(default=30.0, gt=0)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="ignore")

    @field_validator("url")
    @classmethod
    def validate_url_template(cls, v: str) -> str:
        """Require exactly the {base_id} placeholder in the URL template."""
        try:
            names = {name for _, name, _, _ in Formatter().parse(v) if name is not None}
        except ValueError as e:
            raise ConfigurationError(message=f"Malformed url template {v!r}: {e}") from e
        if names != {"base_id"}:
            raise ConfigurationError(
                message=(
                    f"url template {v!r} must contain a {{base_id}} placeholder "
                    f"and no other fields, found {sorted(names)}"
                )
            )
        return v

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> ClientOptions:
        """Build options from a plain mapping.

        Raises:
            ConfigurationError: If any of ``url``, ``key`` or ``base`` is
                missing or empty. Every missing key is reported.
        """
        missing = [key for key in MANDATORY_OPTIONS if not options.get(key)]
        if missing:
            raise ConfigurationError(missing)
        return cls(**options)

    def base_url(self, base_id: str) -> str:
        """Resolve the URL root for a base."""
        return self.url.format(base_id=base_id)
