# pokemon_review_api/db/session.py

from __future__ import annotations

from typing import Any, Dict, Generator, Optional

import structlog
from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from pokemon_review_api.config import Settings, get_settings
from pokemon_review_api.db.models import Base

logger = structlog.get_logger()

# ---------------------------------------------------------------------------
# Engine / Session factory
# ---------------------------------------------------------------------------


def build_engine(settings: Optional[Settings] = None, **kwargs: Any) -> Engine:
    """
    Create an engine for ``settings.database_url``.

    SQLite needs ``check_same_thread=False`` when used from a threaded web
    server, and only enforces foreign keys when asked to per connection.
    """
    settings = settings or get_settings()
    url = settings.database_url

    connect_args: Dict[str, object] = {}
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}

    engine = create_engine(
        url,
        echo=settings.echo_sql,
        connect_args=connect_args,
        **kwargs,
    )

    if url.startswith("sqlite"):
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    return engine


def _enable_sqlite_foreign_keys(dbapi_connection: Any, _record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False,
        class_=Session,
    )


engine = build_engine()
SessionLocal = build_session_factory(engine)


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create all tables that do not exist yet. Safe to call repeatedly.
    """
    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.info("database_initialized", url=bind.url.render_as_string(hide_password=True))


# ---------------------------------------------------------------------------
# FastAPI dependency / helper
# ---------------------------------------------------------------------------


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields one database session per request and
    closes it afterwards.

    Usage:

        from fastapi import Depends
        from pokemon_review_api.db.session import get_db

        @router.get("/category")
        def list_categories(db: Session = Depends(get_db)):
            ...
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


__all__ = [
    "engine",
    "SessionLocal",
    "build_engine",
    "build_session_factory",
    "init_db",
    "get_db",
]
