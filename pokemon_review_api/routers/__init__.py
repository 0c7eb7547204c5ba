"""
HTTP controllers, one router per entity.

Each router builds its repository through a ``get_*_repository`` dependency
so tests can swap in fakes with ``app.dependency_overrides``.
"""

from . import category, country, owner, pokemon, review, reviewer

ALL_ROUTERS = [
    category.router,
    country.router,
    owner.router,
    pokemon.router,
    review.router,
    reviewer.router,
]

__all__ = [
    "category",
    "country",
    "owner",
    "pokemon",
    "review",
    "reviewer",
    "ALL_ROUTERS",
]
