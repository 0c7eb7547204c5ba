# pokemon_review_api/schemas/country.py

from __future__ import annotations

from pydantic import Field

from .common import APIModel


class CountryDto(APIModel):
    """
    Transfer record for a country.
    """

    id: int = Field(0, description="Database identifier (ignored on create)")
    name: str = Field(..., description="Country name, unique ignoring case")
