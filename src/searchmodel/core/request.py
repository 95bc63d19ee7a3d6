"""Search request — Query normalization and deferred execution.

A ``SearchRequest`` is built in two phases:

1. **Build** (constructor) — the caller's query and options are normalized
   into an immutable ``RequestDefinition``. No I/O happens here.
2. **Execute** (``execute()``) — the definition is sent to the model's
   search client. Every call issues exactly one search; nothing is cached.

Consumers such as ``SearchResponse`` hold on to the request and call
``execute()`` only when results are first needed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any, Protocol

from searchmodel.models.query import JsonQuery, StructuredQuery, classify_query

if TYPE_CHECKING:
    from searchmodel.adapters.base.client import SearchClient

logger = logging.getLogger(__name__)


class SearchableModel(Protocol):
    """What a model class must expose to be searched."""

    @classmethod
    def index_name(cls) -> str: ...

    @classmethod
    def document_type(cls) -> str: ...

    @classmethod
    def search_client(cls) -> SearchClient: ...


class RequestDefinition(Mapping[str, Any]):
    """Immutable, ordered, fully resolved search request.

    Holds ``index``, ``type`` and either ``body`` or ``q``, followed by any
    passthrough options. Options are applied last, key by key, so they
    override the computed defaults on collision.
    """

    __slots__ = ("_data",)

    def __init__(self, defaults: Mapping[str, Any], options: Mapping[str, Any] | None = None) -> None:
        data = dict(defaults)
        data.update(options or {})
        self._data = data

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"RequestDefinition({self._data!r})"

    @property
    def index(self) -> str:
        return self._data["index"]

    @property
    def document_type(self) -> str:
        return self._data["type"]

    @property
    def body(self) -> Any:
        return self._data.get("body")

    @property
    def q(self) -> Any:
        return self._data.get("q")

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable copy, e.g. for keyword-argument expansion."""
        return dict(self._data)


class SearchRequest:
    """Wraps a search request definition for a model class.

    Args:
        model: The model class. Supplies the default index name, document
            type and the search client.
        query: A mapping / DSL object, a JSON string, or a free-text query.
        options: Parameters passed through to the search client. ``index``
            and ``type`` override the model defaults; any other key is sent
            as-is.

    Example:
        >>> request = SearchRequest(Article, "title:foo", {"default_operator": "AND"})
        >>> request.definition.q
        'title:foo'
        >>> raw = request.execute()  # one search call
    """

    def __init__(self, model: type[SearchableModel], query: Any, options: Mapping[str, Any] | None = None) -> None:
        self.model = model
        self.options: dict[str, Any] = dict(options or {})

        index = self.options.get("index") or model.index_name()
        document_type = self.options.get("type") or model.document_type()

        self.query = classify_query(query)
        if isinstance(self.query, (StructuredQuery, JsonQuery)):
            defaults = {"index": index, "type": document_type, "body": self.query.body}
        else:
            defaults = {"index": index, "type": document_type, "q": self.query.q}

        self.definition = RequestDefinition(defaults, self.options)

    def execute(self) -> dict[str, Any]:
        """Perform the request and return the raw response from the client.

        Client and engine errors propagate unchanged.
        """
        logger.debug(
            "Executing %s search on %s/%s",
            self.query.kind,
            self.definition.index,
            self.definition.document_type,
        )
        return self.model.search_client().search(self.definition)

    def __repr__(self) -> str:
        return f"<SearchRequest model={getattr(self.model, '__name__', self.model)!r} definition={self.definition!r}>"
