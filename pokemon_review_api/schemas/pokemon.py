# pokemon_review_api/schemas/pokemon.py

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .common import APIModel


class PokemonDto(APIModel):
    """
    Transfer record for a pokemon.

    Owner and category are passed as ``ownerId`` / ``catId`` query
    parameters rather than embedded here.
    """

    id: int = Field(0, description="Database identifier (ignored on create)")
    name: str = Field(..., description="Pokemon name")
    birth_date: datetime = Field(..., description="Date the pokemon was born")
