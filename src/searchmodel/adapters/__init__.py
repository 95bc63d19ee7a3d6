"""Search client layer — Connectors for search engine backends.

Built-in clients:
  - opensearch: OpenSearch v2+ (Elasticsearch-compatible query DSL)

Implement ``SearchClient`` to connect your own search backend.
"""
