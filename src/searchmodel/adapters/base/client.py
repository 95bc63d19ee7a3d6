"""Base search client — Abstract interface for search engine connectors.

A client is the only component that talks to the search engine. It is
responsible for:
  1. Sending a fully normalized request definition as a search call
  2. Continuing and releasing a scroll cursor
  3. Owning transport concerns (timeouts, retries, connection pooling)

Responses are returned as plain mappings following the standard
search-engine response shape (``hits.hits``, ``_scroll_id``, ...).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class SearchClient(ABC):
    """Abstract base class for search engine clients.

    All clients must implement:
      - search(): Execute a request definition and return the raw response
      - scroll(): Fetch the next page of a scroll cursor

    Errors raised by the underlying transport must propagate unchanged.
    Callers above this layer do not catch, wrap, or retry them.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique client name (e.g., 'opensearch')."""

    @abstractmethod
    def search(self, definition: Mapping[str, Any]) -> dict[str, Any]:
        """Execute a search request.

        Args:
            definition: The request definition (``index``, ``type``, and either
                ``body`` or ``q``, plus passthrough options).

        Returns:
            The raw search response.
        """

    @abstractmethod
    def scroll(self, scroll_id: str, scroll: str) -> dict[str, Any]:
        """Continue a scroll cursor.

        Args:
            scroll_id: Opaque cursor id from the previous response.
            scroll: How long the engine should keep the cursor alive (e.g. ``'1m'``).

        Returns:
            The next page of the cursor, in the same shape as ``search()``.
        """

    def clear_scroll(self, scroll_id: str) -> None:
        """Release a scroll cursor before its keep-alive runs out.

        The default does nothing, leaving the cursor to expire on the engine.

        Args:
            scroll_id: Opaque cursor id from the last response.
        """
