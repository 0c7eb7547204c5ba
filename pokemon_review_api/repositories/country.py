# pokemon_review_api/repositories/country.py

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select

from pokemon_review_api.db.models import COUNTRY_NAME_INDEX, Country, Owner

from .base import BaseRepository


class CountryRepository(BaseRepository):
    """
    Data access for countries and the owners living in them.
    """

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def get_countries(self) -> List[Country]:
        return self._list(Country)

    def get_country(self, country_id: int) -> Optional[Country]:
        return self._get(Country, country_id)

    def country_exists(self, country_id: int) -> bool:
        return self._exists(Country, country_id)

    def get_country_by_owner(self, owner_id: int) -> Optional[Country]:
        """
        Country of the given owner, or None if the owner does not exist.
        """
        stmt = select(Country).join(Owner, Owner.country_id == Country.id).where(Owner.id == owner_id)
        return self.session.execute(stmt).scalars().first()

    def get_owners_from_country(self, country_id: int) -> List[Owner]:
        stmt = select(Owner).where(Owner.country_id == country_id).order_by(Owner.id)
        return list(self.session.execute(stmt).scalars().all())

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create_country(self, country: Country) -> bool:
        self.session.add(country)
        if not self._flush_unique("Country", country.name, COUNTRY_NAME_INDEX):
            return False
        return self.save()

    def update_country(self, country: Country) -> bool:
        self.session.merge(country)
        if not self._flush_unique("Country", country.name, COUNTRY_NAME_INDEX):
            return False
        return self.save()

    def delete_country(self, country: Country) -> bool:
        self.session.delete(country)
        return self.save()
