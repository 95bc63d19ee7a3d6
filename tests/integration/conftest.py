"""Integration test fixtures — a live OpenSearch node seeded with mock data.

Expects a node at ``SEARCHMODEL_TEST_OPENSEARCH`` (default
``http://localhost:9201``), e.g.::

    docker run -p 9201:9200 -e discovery.type=single-node \
        -e DISABLE_SECURITY_PLUGIN=true opensearchproject/opensearch:2

Tests are skipped when the node is not reachable.
"""

from __future__ import annotations

import os
import time
from typing import Any

import pytest

MOCK_DOCUMENTS: list[dict[str, Any]] = [
    {"id": f"doc-{n:03d}", "title": title, "tags": tags}
    for n, (title, tags) in enumerate(
        [
            ("Advances in Solar Nowcasting Using Deep Learning", ["solar", "deep learning"]),
            ("Transformer Models for Natural Language Understanding", ["nlp", "transformers"]),
            ("Federated Learning for Privacy-Preserving Medical Imaging", ["federated learning", "privacy"]),
            ("Reinforcement Learning for Robotic Manipulation", ["reinforcement learning", "robotics"]),
            ("Graph Neural Networks for Drug Discovery", ["graph neural networks", "drug discovery"]),
        ],
        start=1,
    )
]

INDEX = "integration_articles"


def _wait_for_node(client: Any, timeout: float = 60.0) -> bool:
    """Block until the node answers a ping, or timeout."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if client.ping():
            return True
        time.sleep(2)
    return False


@pytest.fixture(scope="session")
def index_name() -> str:
    return INDEX


@pytest.fixture(scope="session")
def mock_documents() -> list[dict[str, Any]]:
    return MOCK_DOCUMENTS


@pytest.fixture(scope="session")
def opensearch_ready():
    """Ensure OpenSearch is running and seeded; returns the host URL."""
    from opensearchpy import OpenSearch

    host = os.environ.get("SEARCHMODEL_TEST_OPENSEARCH", "http://localhost:9201")
    client = OpenSearch(hosts=[host], timeout=5)
    if not _wait_for_node(client, timeout=10.0):
        pytest.skip(f"OpenSearch not available at {host}")

    client.indices.delete(index=INDEX, ignore_unavailable=True)
    client.indices.create(
        index=INDEX,
        body={"mappings": {"properties": {"title": {"type": "text"}, "tags": {"type": "keyword"}}}},
    )
    for doc in MOCK_DOCUMENTS:
        client.index(index=INDEX, id=doc["id"], body={"title": doc["title"], "tags": doc["tags"]})
    client.indices.refresh(index=INDEX)

    yield host

    client.indices.delete(index=INDEX, ignore_unavailable=True)
    client.close()
