# pokemon_review_api/repositories/base.py

"""Repository base class used by all concrete repositories."""

from __future__ import annotations

from typing import Any, List, Optional, Type, TypeVar

import structlog
from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from pokemon_review_api.db.models import Base
from pokemon_review_api.errors import DuplicateNameError

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository:
    """
    Thin data-access layer over one explicitly passed ``Session``.

    Mutations are staged on the session and made durable by :meth:`save`,
    which reports whether anything was actually written. Callers never see a
    commit exception: a failed commit is rolled back, logged, and reported as
    ``False``.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._flushed = 0
        self._log = structlog.get_logger(f"pokemon_review_api.repository.{type(self).__name__}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def session(self) -> Session:
        return self._session

    def _list(self, model: Type[ModelT]) -> List[ModelT]:
        stmt = select(model).order_by(model.id)  # type: ignore[attr-defined]
        return list(self.session.execute(stmt).scalars().all())

    def _get(self, model: Type[ModelT], record_id: int) -> Optional[ModelT]:
        return self.session.get(model, record_id)

    def _exists(self, model: Type[Any], record_id: int) -> bool:
        stmt = select(exists().where(model.id == record_id))
        return bool(self.session.execute(stmt).scalar())

    def _flush_unique(self, entity: str, name: str, index: str) -> bool:
        """
        Flush pending changes, turning a violation of the unique-name
        ``index`` into ``DuplicateNameError``.

        Any other flush failure is rolled back, logged and reported as
        ``False`` like a failed :meth:`save`.
        """
        pending = self._pending()
        try:
            self.session.flush()
        except SQLAlchemyError as exc:
            self.session.rollback()
            if isinstance(exc, IntegrityError) and index in str(exc.orig):
                self._log.info("duplicate_name_rejected", entity=entity, name=name)
                raise DuplicateNameError(entity, name) from exc
            self._log.warning("flush_failed", entity=entity, error=str(exc))
            return False
        self._flushed += pending
        return True

    def _pending(self) -> int:
        session = self.session
        return len(session.new) + len(session.dirty) + len(session.deleted)

    # ------------------------------------------------------------------
    # Unit of work
    # ------------------------------------------------------------------

    def save(self) -> bool:
        """
        Commit staged changes. Returns ``True`` if at least one row was
        written.
        """
        session = self.session
        pending = self._pending() + self._flushed
        self._flushed = 0
        try:
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            self._log.warning("commit_failed", error=str(exc))
            return False
        return pending > 0
