# pokemon_review_api/repositories/review.py

from __future__ import annotations

from typing import Iterable, List, Optional

from sqlalchemy import select

from pokemon_review_api.db.models import Review

from .base import BaseRepository


class ReviewRepository(BaseRepository):
    """
    Data access for reviews.
    """

    def get_reviews(self) -> List[Review]:
        return self._list(Review)

    def get_review(self, review_id: int) -> Optional[Review]:
        return self._get(Review, review_id)

    def review_exists(self, review_id: int) -> bool:
        return self._exists(Review, review_id)

    def get_reviews_of_pokemon(self, pokemon_id: int) -> List[Review]:
        stmt = select(Review).where(Review.pokemon_id == pokemon_id).order_by(Review.id)
        return list(self.session.execute(stmt).scalars().all())

    def create_review(self, review: Review) -> bool:
        """
        Persist ``review``; its ``pokemon`` and ``reviewer`` must already be
        attached by the caller.
        """
        self.session.add(review)
        return self.save()

    def update_review(self, review: Review) -> bool:
        self.session.merge(review)
        return self.save()

    def delete_review(self, review: Review) -> bool:
        self.session.delete(review)
        return self.save()

    def delete_reviews(self, reviews: Iterable[Review]) -> bool:
        """
        Delete several reviews in one commit. An empty batch counts as success.
        """
        batch = list(reviews)
        if not batch:
            return True
        for review in batch:
            self.session.delete(review)
        return self.save()
