# pokemon_review_api/schemas/owner.py

from __future__ import annotations

from typing import Optional

from pydantic import Field

from .common import APIModel


class OwnerDto(APIModel):
    """
    Transfer record for an owner.

    The owning country is not part of the payload; it is passed separately
    as the ``countryId`` query parameter on create.
    """

    id: int = Field(0, description="Database identifier (ignored on create)")
    first_name: str = Field(..., description="Given name")
    last_name: str = Field(..., description="Family name")
    gym: Optional[str] = Field(default=None, description="Home gym")
