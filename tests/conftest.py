"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from searchmodel.adapters.base.client import SearchClient
from searchmodel.config.settings import Settings
from searchmodel.core import connection
from searchmodel.core.searching import Searchable


def make_page(ids: list[str], scroll_id: str | None = "s1") -> dict[str, Any]:
    """Build a raw engine response carrying one hit per id."""
    page: dict[str, Any] = {
        "took": 3,
        "timed_out": False,
        "hits": {
            "total": {"value": len(ids), "relation": "eq"},
            "max_score": 1.0 if ids else None,
            "hits": [{"_index": "articles", "_id": i, "_score": 1.0, "_source": {"title": f"Doc {i}"}} for i in ids],
        },
    }
    if scroll_id is not None:
        page["_scroll_id"] = scroll_id
    return page


@pytest.fixture
def page():
    """Factory for raw engine responses."""
    return make_page


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def search_client() -> MagicMock:
    """A client double recording search and scroll calls."""
    client = MagicMock(spec=SearchClient)
    client.name = "mock"
    client.search.return_value = make_page(["1", "2"])
    client.scroll.return_value = make_page([])
    return client


@pytest.fixture
def article_model(search_client: MagicMock) -> type[Searchable]:
    """A model class bound to the mock client."""

    class Article(Searchable):
        __search_client__ = search_client

    return Article


@pytest.fixture(autouse=True)
def _reset_default_client():
    """Keep the process-wide default client from leaking between tests."""
    connection.set_client(None)
    yield
    connection.set_client(None)
