# pokemon_review_api/repositories/category.py

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select

from pokemon_review_api.db.models import (
    CATEGORY_NAME_INDEX,
    Category,
    Pokemon,
    PokemonCategory,
)

from .base import BaseRepository


class CategoryRepository(BaseRepository):
    """
    Data access for categories and the pokemon filed under them.
    """

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def get_categories(self) -> List[Category]:
        return self._list(Category)

    def get_category(self, category_id: int) -> Optional[Category]:
        return self._get(Category, category_id)

    def category_exists(self, category_id: int) -> bool:
        return self._exists(Category, category_id)

    def get_pokemon_by_category(self, category_id: int) -> List[Pokemon]:
        stmt = (
            select(Pokemon)
            .join(PokemonCategory, PokemonCategory.pokemon_id == Pokemon.id)
            .where(PokemonCategory.category_id == category_id)
            .order_by(Pokemon.id)
        )
        return list(self.session.execute(stmt).scalars().all())

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create_category(self, category: Category) -> bool:
        self.session.add(category)
        if not self._flush_unique("Category", category.name, CATEGORY_NAME_INDEX):
            return False
        return self.save()

    def update_category(self, category: Category) -> bool:
        self.session.merge(category)
        if not self._flush_unique("Category", category.name, CATEGORY_NAME_INDEX):
            return False
        return self.save()

    def delete_category(self, category: Category) -> bool:
        self.session.delete(category)
        return self.save()
