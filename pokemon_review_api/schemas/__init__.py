"""
Top-level export module for HTTP API schemas (transfer records).
"""

from .common import CREATED_MESSAGE, APIModel, ErrorMap
from .category import CategoryDto
from .country import CountryDto
from .owner import OwnerDto
from .pokemon import PokemonDto
from .review import ReviewDto
from .reviewer import ReviewerDto

__all__ = [
    "APIModel",
    "ErrorMap",
    "CREATED_MESSAGE",
    "CategoryDto",
    "CountryDto",
    "OwnerDto",
    "PokemonDto",
    "ReviewDto",
    "ReviewerDto",
]
