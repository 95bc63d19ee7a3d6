"""Searching — Class-level search capabilities for model classes.

Mix ``Searchable`` into a model class (an ORM model or any plain class) to
get ``search()`` and ``scan_all_ids()``::

    class Article(Base, Searchable):
        __tablename__ = "articles"
        __document_type__ = "article"

    Article.search("foo")                                  # lazy response
    Article.search({"query": {"match": {"title": "foo"}}})
    Article.search('{"query": {"match_all": {}}}')
    Article.scan_all_ids({"query": {"match_all": {}}}, scroll="1m")
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, ClassVar

from searchmodel.core import connection
from searchmodel.core.request import SearchRequest
from searchmodel.core.response import SearchResponse

if TYPE_CHECKING:
    from searchmodel.adapters.base.client import SearchClient

logger = logging.getLogger(__name__)

# Applied over the caller's options for scroll scans (successor of search_type=scan).
SCAN_OPTIONS: dict[str, Any] = {"sort": "_doc"}


def _underscore(name: str) -> str:
    """``BlogPost`` -> ``blog_post``."""
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    name = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", name)
    return name.lower()


def _pluralize(word: str) -> str:
    if re.search(r"[^aeiou]y$", word):
        return word[:-1] + "ies"
    if re.search(r"(s|x|z|ch|sh)$", word):
        return word + "es"
    return word + "s"


class Searchable:
    """Mixin adding search capabilities to a model class.

    Class attributes:
        __index_name__: Index to search. Defaults to ``__tablename__`` when
            the model has one, else the pluralized snake_case class name.
        __document_type__: Document type. Defaults to the snake_case class name.
        __search_client__: Client for this model. Defaults to the
            process-wide client from ``searchmodel.core.connection``.
    """

    __index_name__: ClassVar[str | None] = None
    __document_type__: ClassVar[str | None] = None
    __search_client__: ClassVar[SearchClient | None] = None

    @classmethod
    def index_name(cls) -> str:
        if cls.__index_name__:
            return cls.__index_name__
        tablename = getattr(cls, "__tablename__", None)
        if isinstance(tablename, str):
            return tablename
        return _pluralize(_underscore(cls.__name__))

    @classmethod
    def document_type(cls) -> str:
        if cls.__document_type__:
            return cls.__document_type__
        return _underscore(cls.__name__)

    @classmethod
    def search_client(cls) -> SearchClient:
        if cls.__search_client__ is not None:
            return cls.__search_client__
        return connection.get_client()

    @classmethod
    def search(cls, query: Any, **options: Any) -> SearchResponse:
        """Search within the index and type configured for this model.

        Nothing is sent until a result accessor of the returned response is
        used (``response``, ``hits``, ``results``, ``ids``, iteration...).

        Args:
            query: A mapping or DSL object (sent as ``body``), a JSON string
                (sent verbatim as ``body``), or a free-text query (sent as ``q``).
            **options: Parameters passed through to the client. ``index`` and
                ``type`` override the model defaults.

        Returns:
            A lazy ``SearchResponse``.

        Example:
            >>> response = Article.search(
            ...     {"query": {"match": {"title": "foo"}}, "highlight": {"fields": {"title": {}}}}
            ... )
            >>> response.results[0].source["title"]
            'Foo'
        """
        request = SearchRequest(cls, query, options)
        return SearchResponse(cls, request)

    @classmethod
    def scan_all_ids(cls, query: Any, **options: Any) -> list[str]:
        """Walk a scroll cursor to the end and collect every matching id.

        Useful to feed an SQL ``IN (...)`` clause without paging.

        The caller must pass ``scroll`` (e.g. ``scroll="1m"``); no default is
        applied. Without it the initial search carries no ``scroll`` parameter,
        each continuation is requested with ``scroll=None``, and what happens
        then is up to the client and engine.

        The walk stops at the first page with no hits, and the cursor is then
        released with ``clear_scroll()``. Errors, including a malformed page,
        propagate to the caller and leave the cursor to expire on the engine.

        Returns:
            Ids in cursor order. Duplicates are kept if the engine yields them.
        """
        scroll = options.get("scroll")
        if scroll is None:
            logger.warning("scan_all_ids called on %s without a scroll duration", cls.__name__)

        response = cls.search(query, **{**options, **SCAN_OPTIONS}).response
        client = cls.search_client()

        ids: list[str] = []
        pages = 0
        while response["hits"]["hits"]:
            ids.extend(hit["_id"] for hit in response["hits"]["hits"])
            pages += 1
            response = client.scroll(response["_scroll_id"], scroll)

        scroll_id = response.get("_scroll_id")
        if scroll_id:
            client.clear_scroll(scroll_id)

        logger.debug("Scanned %d ids in %d pages from %s", len(ids), pages, cls.index_name())
        return ids
