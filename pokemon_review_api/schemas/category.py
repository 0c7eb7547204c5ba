# pokemon_review_api/schemas/category.py

from __future__ import annotations

from pydantic import Field

from .common import APIModel


class CategoryDto(APIModel):
    """
    Transfer record for a category.
    """

    id: int = Field(0, description="Database identifier (ignored on create)")
    name: str = Field(..., description="Category name, unique ignoring case")
