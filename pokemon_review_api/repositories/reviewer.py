# pokemon_review_api/repositories/reviewer.py

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select

from pokemon_review_api.db.models import Review, Reviewer

from .base import BaseRepository


class ReviewerRepository(BaseRepository):
    def get_reviewers(self) -> List[Reviewer]:
        return self._list(Reviewer)

    def get_reviewer(self, reviewer_id: int) -> Optional[Reviewer]:
        return self._get(Reviewer, reviewer_id)

    def reviewer_exists(self, reviewer_id: int) -> bool:
        return self._exists(Reviewer, reviewer_id)

    def get_reviews_by_reviewer(self, reviewer_id: int) -> List[Review]:
        stmt = select(Review).where(Review.reviewer_id == reviewer_id).order_by(Review.id)
        return list(self.session.execute(stmt).scalars().all())

    def create_reviewer(self, reviewer: Reviewer) -> bool:
        self.session.add(reviewer)
        return self.save()

    def update_reviewer(self, reviewer: Reviewer) -> bool:
        self.session.merge(reviewer)
        return self.save()

    def delete_reviewer(self, reviewer: Reviewer) -> bool:
        self.session.delete(reviewer)
        return self.save()
