"""Error detail records reported by the Vertex AI API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetails(BaseModel):
    """One upstream cause attached to an API error response.

    The API may send fields beyond the recognized ones; they are kept as
    extra attributes.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    type: str | None = Field(default=None, alias="@type", description="Detail type URL")
    reason: str | None = Field(default=None, description="Machine-readable reason")
    domain: str | None = Field(default=None, description="Logical grouping of the reason")
    metadata: dict[str, Any] | None = Field(default=None, description="Extra structured info")
