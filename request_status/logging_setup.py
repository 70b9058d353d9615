"""Structured logging for the request status engine."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

LOGGER_NAME = "request_status"


def build_processors(json_output: bool = True) -> list[Processor]:
    """Processor chain ending in a JSON or plain console renderer."""

    renderer: Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(level: str = "INFO", *, json_output: bool = True) -> None:
    level_name = level.upper()
    logging.basicConfig(format="%(message)s", stream=sys.stdout, force=True)
    logging.getLogger(LOGGER_NAME).setLevel(level_name)

    structlog.configure(
        processors=build_processors(json_output),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = LOGGER_NAME, **initial_context: Any) -> structlog.stdlib.BoundLogger:
    """Return a logger under the ``request_status`` namespace with bound context."""

    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"

    logger = structlog.get_logger(name)
    if initial_context:
        return logger.bind(**initial_context)
    return logger
