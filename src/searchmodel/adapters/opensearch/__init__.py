from searchmodel.adapters.opensearch.client import OpenSearchClient

__all__ = ["OpenSearchClient"]
