"""OpenSearch client — Synchronous search and scroll calls for OpenSearch (v2+).

OpenSearch is an AWS-maintained fork of Elasticsearch with a compatible
query DSL and API surface. This client wraps ``opensearch-py``'s blocking
``OpenSearch`` class behind the ``SearchClient`` interface.

Install the dependency::

    pip install opensearch-py
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from searchmodel.adapters.base.client import SearchClient
from searchmodel.adapters.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class OpenSearchClient(SearchClient):
    """Search client for OpenSearch (v2+).

    A request definition is expanded into ``OpenSearch.search()`` keyword
    arguments: ``index``, ``body`` (or ``q``) and every passthrough option
    as a URL parameter. Mapping types no longer exist in OpenSearch, so the
    definition's ``type`` entry is not sent.

    Errors from ``opensearch-py`` (``TransportError``, ``ConnectionError``,
    ``NotFoundError``, ...) are not caught.

    Args:
        hosts: List of OpenSearch node URLs.
        username: Optional HTTP basic-auth username.
        password: Optional HTTP basic-auth password.
        verify_certs: Whether to verify TLS certificates.
        timeout: Per-request timeout in seconds.
        client: An existing ``OpenSearch`` instance to use instead of building one.
        **kwargs: Additional keyword arguments forwarded to ``OpenSearch``.
    """

    def __init__(
        self,
        hosts: list[str] | None = None,
        username: str | None = None,
        password: str | None = None,
        verify_certs: bool = True,
        timeout: int = 10,
        client: Any = None,
        **kwargs: Any,
    ) -> None:
        self._hosts = hosts or ["http://localhost:9200"]
        self._username = username
        self._password = password
        self._verify_certs = verify_certs
        self._timeout = timeout
        self._extra_kwargs = kwargs
        self._client: Any = client

    @classmethod
    def from_settings(cls, settings: Any) -> OpenSearchClient:
        """Build a client from ``OpenSearchSettings``."""
        if not settings.hosts:
            raise ConfigurationError("No OpenSearch hosts configured (SEARCHMODEL_OPENSEARCH__HOSTS).")
        return cls(
            hosts=settings.hosts,
            username=settings.username,
            password=settings.password,
            verify_certs=settings.verify_certs,
            timeout=settings.timeout,
            **settings.extra,
        )

    @property
    def name(self) -> str:
        return "opensearch"

    @property
    def client(self) -> Any:
        """The underlying ``OpenSearch`` instance, created on first use."""
        if self._client is None:
            self._client = self._connect()
        return self._client

    def _connect(self) -> Any:
        try:
            from opensearchpy import OpenSearch
        except ImportError as e:
            raise ConfigurationError(
                "opensearch-py package is required.  Install with: pip install opensearch-py"
            ) from e

        client_kwargs: dict[str, Any] = {
            "hosts": self._hosts,
            "verify_certs": self._verify_certs,
            "ssl_show_warn": False,
            "timeout": self._timeout,
        }
        if self._username and self._password:
            client_kwargs["http_auth"] = (self._username, self._password)

        client_kwargs.update(self._extra_kwargs)

        logger.info("Creating OpenSearch client for hosts: %s", self._hosts)
        return OpenSearch(**client_kwargs)

    # ── Search ───────────────────────────────────────────────────────────

    def search(self, definition: Mapping[str, Any]) -> dict[str, Any]:
        """Send a request definition as a search call."""
        params = dict(definition)
        document_type = params.pop("type", None)
        if document_type:
            logger.debug("Ignoring document type '%s': not supported by OpenSearch", document_type)
        return self.client.search(**params)

    def scroll(self, scroll_id: str, scroll: str) -> dict[str, Any]:
        """Fetch the next page of a scroll cursor."""
        return self.client.scroll(scroll_id=scroll_id, scroll=scroll)

    def clear_scroll(self, scroll_id: str) -> None:
        """Release a scroll cursor on the engine."""
        self.client.clear_scroll(scroll_id=scroll_id)

    def close(self) -> None:
        """Close the underlying client's connections."""
        if self._client is not None:
            self._client.close()
            self._client = None
