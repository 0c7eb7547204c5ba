# pokemon_review_api/repositories/pokemon.py

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func, select

from pokemon_review_api.db.models import (
    Category,
    Owner,
    Pokemon,
    PokemonCategory,
    PokemonOwner,
    Review,
)

from .base import BaseRepository


class PokemonRepository(BaseRepository):
    """
    Data access for pokemon, including their owner / category links.
    """

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def get_pokemons(self) -> List[Pokemon]:
        return self._list(Pokemon)

    def get_pokemon(self, pokemon_id: int) -> Optional[Pokemon]:
        return self._get(Pokemon, pokemon_id)

    def get_pokemon_by_name(self, name: str) -> Optional[Pokemon]:
        stmt = select(Pokemon).where(Pokemon.name == name).order_by(Pokemon.id)
        return self.session.execute(stmt).scalars().first()

    def pokemon_exists(self, pokemon_id: int) -> bool:
        return self._exists(Pokemon, pokemon_id)

    def get_pokemon_rating(self, pokemon_id: int) -> float:
        """
        Mean rating over the pokemon's reviews; 0 when it has none.
        """
        stmt = select(func.avg(Review.rating)).where(Review.pokemon_id == pokemon_id)
        rating = self.session.execute(stmt).scalar()
        return float(rating) if rating is not None else 0.0

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create_pokemon(self, owner_id: int, category_id: int, pokemon: Pokemon) -> bool:
        """
        Persist ``pokemon`` together with its owner and category links.
        """
        owner = self.session.get(Owner, owner_id)
        category = self.session.get(Category, category_id)

        self.session.add(pokemon)
        self.session.add(PokemonOwner(owner=owner, pokemon=pokemon))
        self.session.add(PokemonCategory(category=category, pokemon=pokemon))

        return self.save()

    def update_pokemon(
        self,
        owner_id: Optional[int],
        category_id: Optional[int],
        pokemon: Pokemon,
    ) -> bool:
        """
        Update the scalar fields of ``pokemon`` and link it to the given
        owner / category when it is not linked to them yet.
        """
        merged = self.session.merge(pokemon)

        if owner_id is not None and self.session.get(
            PokemonOwner, (merged.id, owner_id)
        ) is None:
            owner = self.session.get(Owner, owner_id)
            self.session.add(PokemonOwner(owner=owner, pokemon=merged))

        if category_id is not None and self.session.get(
            PokemonCategory, (merged.id, category_id)
        ) is None:
            category = self.session.get(Category, category_id)
            self.session.add(PokemonCategory(category=category, pokemon=merged))

        return self.save()

    def delete_pokemon(self, pokemon: Pokemon) -> bool:
        self.session.delete(pokemon)
        return self.save()
