"""Query input models — The three shapes a caller-supplied query can take.

A query is classified exactly once, when a ``SearchRequest`` is built:

1. **Structured** — anything with a map-like representation (a mapping, a
   pydantic model, or a DSL object exposing ``to_dict()``). Sent as ``body``.
2. **JSON** — text whose first non-whitespace character is ``{``. Sent
   verbatim as ``body``; it is never parsed here.
3. **Free text** — anything else. Sent as the ``q`` URI parameter.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class StructuredQuery(BaseModel):
    """A query DSL object converted to its dict representation."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["structured"] = "structured"
    body: dict[Any, Any] = Field(description="Query DSL body, keys and values passed through unchecked")


class JsonQuery(BaseModel):
    """A raw JSON query body, kept as the caller wrote it."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["json"] = "json"
    body: str = Field(description="Unparsed JSON text")


class FreeTextQuery(BaseModel):
    """A free-text (query string syntax) query."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["free_text"] = "free_text"
    q: Any = Field(description="Query string, passed through untouched")


QueryInput = StructuredQuery | JsonQuery | FreeTextQuery


def as_mapping(query: Any) -> dict[Any, Any] | None:
    """Return the map-like representation of *query*, or None if it has none."""
    if isinstance(query, Mapping):
        return dict(query)
    if isinstance(query, BaseModel):
        return query.model_dump(exclude_none=True)
    to_dict = getattr(query, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return None


def classify_query(query: Any) -> QueryInput:
    """Resolve a caller-supplied query into one of the tagged variants.

    Checks run in order and the first match wins. Nothing is validated: an
    object that is neither map-like nor JSON text ends up as free text and
    the engine decides whether it is acceptable.
    """
    if isinstance(query, (StructuredQuery, JsonQuery, FreeTextQuery)):
        return query

    body = as_mapping(query)
    if body is not None:
        return StructuredQuery(body=body)

    if isinstance(query, str) and query.lstrip().startswith("{"):
        return JsonQuery(body=query)

    return FreeTextQuery(q=query)
