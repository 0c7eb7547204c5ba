# pokemon_review_api/logging/__init__.py

"""
Logging helpers for the Pokemon Review API.

API code can simply do:

    from pokemon_review_api.logging import get_logger, configure_logging

and stay decoupled from the concrete structlog setup.
"""

from __future__ import annotations

from .config import DEFAULT_LOGGER_NAME, configure_logging, get_logger

__all__ = ["DEFAULT_LOGGER_NAME", "configure_logging", "get_logger"]
