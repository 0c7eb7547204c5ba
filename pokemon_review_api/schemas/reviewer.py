# pokemon_review_api/schemas/reviewer.py

from __future__ import annotations

from pydantic import Field

from .common import APIModel


class ReviewerDto(APIModel):
    """
    Transfer record for a reviewer.
    """

    id: int = Field(0, description="Database identifier (ignored on create)")
    first_name: str = Field(..., description="Given name")
    last_name: str = Field(..., description="Family name")
