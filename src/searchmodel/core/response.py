"""Search response — Lazy wrapper around a ``SearchRequest``.

The wrapper is handed out by ``Searchable.search()`` before anything has
been sent to the engine. The request is executed on the first access to a
result accessor (``response``, ``hits``, ``results``, ``ids``, ``total``,
iteration, ...) and the raw response is cached for every later access.
"""

from __future__ import annotations

from collections.abc import Iterator
from functools import cached_property
from typing import TYPE_CHECKING, Any

from searchmodel.models.hit import Hit

if TYPE_CHECKING:
    from searchmodel.core.request import SearchableModel, SearchRequest


class SearchResponse:
    """Deferred search response for a model class.

    Args:
        model: The model class the search was issued for.
        search: The request to execute on first access.
    """

    def __init__(self, model: type[SearchableModel], search: SearchRequest) -> None:
        self.model = model
        self.search = search

    @property
    def executed(self) -> bool:
        """Whether the request has been sent already."""
        return "response" in self.__dict__

    @cached_property
    def response(self) -> dict[str, Any]:
        """The raw engine response. Executes the request on first access."""
        return self.search.execute()

    @property
    def hits(self) -> list[dict[str, Any]]:
        """Raw hit records, in engine order."""
        return self.response["hits"]["hits"]

    @cached_property
    def results(self) -> list[Hit]:
        """Hits as typed ``Hit`` objects."""
        return [Hit.from_raw(hit) for hit in self.hits]

    @property
    def ids(self) -> list[str]:
        return [hit["_id"] for hit in self.hits]

    @property
    def total(self) -> int:
        """Total number of matching documents.

        Handles both the object form (``{"value": n, "relation": "eq"}``) and
        the legacy integer form of ``hits.total``.
        """
        total = self.response["hits"].get("total", 0)
        if isinstance(total, dict):
            return total.get("value", 0)
        return total

    @property
    def max_score(self) -> float | None:
        return self.response["hits"].get("max_score")

    @property
    def took(self) -> int | None:
        return self.response.get("took")

    @property
    def timed_out(self) -> bool | None:
        return self.response.get("timed_out")

    @property
    def scroll_id(self) -> str | None:
        return self.response.get("_scroll_id")

    def __iter__(self) -> Iterator[Hit]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.hits)

    def __getitem__(self, index: int) -> Hit:
        return self.results[index]

    def __repr__(self) -> str:
        state = "executed" if self.executed else "pending"
        return f"<SearchResponse model={getattr(self.model, '__name__', self.model)!r} {state}>"
