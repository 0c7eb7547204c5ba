# pokemon_review_api/schemas/review.py

from __future__ import annotations

from pydantic import Field

from .common import APIModel


class ReviewDto(APIModel):
    """
    Transfer record for a review.

    The reviewed pokemon and the author are passed as ``pokeId`` /
    ``reviewerId`` query parameters on create.
    """

    id: int = Field(0, description="Database identifier (ignored on create)")
    title: str = Field(..., description="Review headline")
    text: str = Field("", description="Review body")
    rating: int = Field(0, description="Score given by the reviewer")
