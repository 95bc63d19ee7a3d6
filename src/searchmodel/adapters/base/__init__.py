"""Base client interface — Abstract classes for search engine connectors."""

from searchmodel.adapters.base.client import SearchClient

__all__ = ["SearchClient"]
