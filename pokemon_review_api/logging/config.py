# pokemon_review_api/logging/config.py

"""
Logging configuration for the Pokemon Review API.

structlog renders every event, either as JSON lines (production) or as
coloured console output (development). Standard library loggers used by
uvicorn and SQLAlchemy are routed through ``logging.basicConfig`` at the same
level so their output lands on the same stream.

Typical usage in the application factory::

    from pokemon_review_api.logging.config import configure_logging

    log = configure_logging()
    log.info("api_starting")
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from pokemon_review_api.config import Settings, get_settings

DEFAULT_LOGGER_NAME = "pokemon_review_api"

_CONFIGURED = False


def _parse_level(value: Optional[str]) -> int:
    """
    Map a string log level (e.g. 'DEBUG', 'info') to a logging constant,
    falling back to INFO for empty or unknown names.
    """
    if not value:
        return logging.INFO
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(
    settings: Optional[Settings] = None,
    *,
    force: bool = False,
) -> structlog.typing.FilteringBoundLogger:
    """
    Configure structlog and stdlib logging once per process and return the
    service logger.

    Args:
        settings:
            Settings to read ``log_level`` / ``log_format`` from. Defaults to
            the process-wide settings.
        force:
            Reconfigure even if logging was already set up.
    """
    global _CONFIGURED
    settings = settings or get_settings()

    if _CONFIGURED and not force:
        return get_logger()

    level = _parse_level(settings.log_level)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
        force=force,
    )

    _CONFIGURED = True
    return get_logger()


def get_logger(name: Optional[str] = None) -> structlog.typing.FilteringBoundLogger:
    """
    Return a structlog logger bound to ``name`` (the service name by default).
    """
    return structlog.get_logger(name or DEFAULT_LOGGER_NAME)


__all__ = ["DEFAULT_LOGGER_NAME", "configure_logging", "get_logger"]
