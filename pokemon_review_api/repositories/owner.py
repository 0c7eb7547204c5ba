# pokemon_review_api/repositories/owner.py

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select

from pokemon_review_api.db.models import Owner, Pokemon, PokemonOwner

from .base import BaseRepository


class OwnerRepository(BaseRepository):
    """
    Data access for owners and the pokemon they hold.
    """

    def get_owners(self) -> List[Owner]:
        return self._list(Owner)

    def get_owner(self, owner_id: int) -> Optional[Owner]:
        return self._get(Owner, owner_id)

    def owner_exists(self, owner_id: int) -> bool:
        return self._exists(Owner, owner_id)

    def get_pokemon_by_owner(self, owner_id: int) -> List[Pokemon]:
        stmt = (
            select(Pokemon)
            .join(PokemonOwner, PokemonOwner.pokemon_id == Pokemon.id)
            .where(PokemonOwner.owner_id == owner_id)
            .order_by(Pokemon.id)
        )
        return list(self.session.execute(stmt).scalars().all())

    def get_owners_of_pokemon(self, pokemon_id: int) -> List[Owner]:
        stmt = (
            select(Owner)
            .join(PokemonOwner, PokemonOwner.owner_id == Owner.id)
            .where(PokemonOwner.pokemon_id == pokemon_id)
            .order_by(Owner.id)
        )
        return list(self.session.execute(stmt).scalars().all())

    def create_owner(self, owner: Owner) -> bool:
        self.session.add(owner)
        return self.save()

    def update_owner(self, owner: Owner) -> bool:
        self.session.merge(owner)
        return self.save()

    def delete_owner(self, owner: Owner) -> bool:
        self.session.delete(owner)
        return self.save()
