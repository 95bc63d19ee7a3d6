"""Log output for the ``searchmodel`` logger tree, rendered with structlog.

Library modules log through ``logging.getLogger(__name__)``. Calling
``setup_logging()`` attaches one handler to the ``searchmodel`` logger that
renders those records as JSON or console lines, at the level configured in
``ObservabilitySettings``. The root logger is left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from searchmodel.config.settings import ObservabilitySettings

LIBRARY_LOGGER = "searchmodel"
_HANDLER_NAME = "searchmodel-structlog"


def _formatter(log_format: str) -> structlog.stdlib.ProcessorFormatter:
    renderer = structlog.dev.ConsoleRenderer() if log_format == "console" else structlog.processors.JSONRenderer()
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def setup_logging(settings: ObservabilitySettings | None = None) -> logging.Logger:
    """Route ``searchmodel`` log records through a structlog renderer.

    Safe to call repeatedly; the previous handler is replaced.

    Args:
        settings: Observability settings. Loaded from ``Settings()`` (and so
            from ``SEARCHMODEL_OBSERVABILITY__*``) if None.

    Returns:
        The configured ``searchmodel`` logger.
    """
    if settings is None:
        from searchmodel.config.settings import Settings

        settings = Settings().observability

    logger = logging.getLogger(LIBRARY_LOGGER)
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(_formatter(settings.log_format))

    logger.addHandler(handler)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    # Records are rendered here; ancestors would print them a second time.
    logger.propagate = False
    return logger
