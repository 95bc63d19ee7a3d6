"""Hit model — Typed view over one entry of ``hits.hits``."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Hit(BaseModel):
    """A single matched document as returned by the engine."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str = Field(alias="_id", description="Document identifier")
    index: str | None = Field(default=None, alias="_index", description="Index the document lives in")
    score: float | None = Field(default=None, alias="_score", description="Relevance score")
    source: dict[str, Any] = Field(default_factory=dict, alias="_source", description="Stored document fields")
    stored_fields: dict[str, Any] = Field(
        default_factory=dict,
        alias="fields",
        description="Requested stored/docvalue fields",
    )
    highlight: dict[str, list[str]] = Field(default_factory=dict, description="Raw highlight fragments per field")
    sort: list[Any] | None = Field(default=None, description="Sort values of the hit")

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> Hit:
        """Build a ``Hit`` from a raw engine hit."""
        return cls.model_validate(raw)
