# pokemon_review_api/repositories/__init__.py
"""
Repository layer public exports.

Downstream code can import from this module instead of individual files, e.g.:

    from pokemon_review_api.repositories import CategoryRepository
"""

from .base import BaseRepository
from .category import CategoryRepository
from .country import CountryRepository
from .owner import OwnerRepository
from .pokemon import PokemonRepository
from .review import ReviewRepository
from .reviewer import ReviewerRepository

__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "CountryRepository",
    "OwnerRepository",
    "PokemonRepository",
    "ReviewRepository",
    "ReviewerRepository",
]
