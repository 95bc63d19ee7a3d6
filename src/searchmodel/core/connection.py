"""Default client — The process-wide search client shared by all models.

Models that do not set ``__search_client__`` use the client returned by
``get_client()``. It is built from ``Settings`` on first use unless one was
installed with ``set_client()``.
"""

from __future__ import annotations

import logging
import threading

from searchmodel.adapters.base.client import SearchClient
from searchmodel.adapters.opensearch.client import OpenSearchClient
from searchmodel.config.settings import Settings

logger = logging.getLogger(__name__)

_client: SearchClient | None = None
_lock = threading.Lock()


def get_client() -> SearchClient:
    """Return the default client, creating it from settings if needed."""
    global _client
    if _client is None:
        with _lock:
            if _client is None:
                settings = Settings()
                _client = OpenSearchClient.from_settings(settings.opensearch)
                logger.info("Initialized default search client: %s", _client.name)
    return _client


def set_client(client: SearchClient | None) -> None:
    """Install *client* as the default. Passing None resets it."""
    global _client
    with _lock:
        _client = client
