"""
pokemon_review_api.db
=====================

Database package for the Pokemon Review API.

Centralizes the public DB primitives so the rest of the service can import
them from a single place, e.g.:

    from pokemon_review_api.db import Base, SessionLocal, get_db
"""

from .models import Base
from .session import SessionLocal, engine, get_db, init_db

__all__ = [
    "Base",
    "engine",
    "SessionLocal",
    "get_db",
    "init_db",
]
