"""
pokemon_review_api
------------------

CRUD HTTP API for tracking pokemon, their owners, categories and reviews.

This package exposes:

- ``__version__``: installed distribution version.

The ASGI application lives in ``pokemon_review_api.main`` (``create_app()``
and the module-level ``app``), suitable for uvicorn entrypoints like
``pokemon_review_api.main:app``.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("pokemon-review-api")
except _metadata.PackageNotFoundError:  # When running from source tree
    __version__ = "0.0.0"


__all__ = ["__version__"]
