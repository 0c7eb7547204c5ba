# pokemon_review_api/mappers.py

"""
Conversions between ORM records and transfer records.

Each function copies the like-named scalar fields of one record pair and
nothing else; relationship attributes are never read or written here.

`dto_to_*(dto, new=True)` drops the transfer id so the store assigns one;
create endpoints always map that way.
"""

from __future__ import annotations

from typing import Iterable, List

from pokemon_review_api.db.models import (
    Category,
    Country,
    Owner,
    Pokemon,
    Review,
    Reviewer,
)
from pokemon_review_api.schemas import (
    CategoryDto,
    CountryDto,
    OwnerDto,
    PokemonDto,
    ReviewDto,
    ReviewerDto,
)


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------


def category_to_dto(category: Category) -> CategoryDto:
    return CategoryDto(id=category.id, name=category.name)


def dto_to_category(dto: CategoryDto, *, new: bool = False) -> Category:
    return Category(id=None if new else dto.id or None, name=dto.name)


def categories_to_dtos(categories: Iterable[Category]) -> List[CategoryDto]:
    return [category_to_dto(c) for c in categories]


# ---------------------------------------------------------------------------
# Country
# ---------------------------------------------------------------------------


def country_to_dto(country: Country) -> CountryDto:
    return CountryDto(id=country.id, name=country.name)


def dto_to_country(dto: CountryDto, *, new: bool = False) -> Country:
    return Country(id=None if new else dto.id or None, name=dto.name)


def countries_to_dtos(countries: Iterable[Country]) -> List[CountryDto]:
    return [country_to_dto(c) for c in countries]


# ---------------------------------------------------------------------------
# Owner
# ---------------------------------------------------------------------------


def owner_to_dto(owner: Owner) -> OwnerDto:
    return OwnerDto(
        id=owner.id,
        first_name=owner.first_name,
        last_name=owner.last_name,
        gym=owner.gym,
    )


def dto_to_owner(dto: OwnerDto, *, new: bool = False) -> Owner:
    return Owner(
        id=None if new else dto.id or None,
        first_name=dto.first_name,
        last_name=dto.last_name,
        gym=dto.gym,
    )


def owners_to_dtos(owners: Iterable[Owner]) -> List[OwnerDto]:
    return [owner_to_dto(o) for o in owners]


# ---------------------------------------------------------------------------
# Pokemon
# ---------------------------------------------------------------------------


def pokemon_to_dto(pokemon: Pokemon) -> PokemonDto:
    return PokemonDto(
        id=pokemon.id,
        name=pokemon.name,
        birth_date=pokemon.birth_date,
    )


def dto_to_pokemon(dto: PokemonDto, *, new: bool = False) -> Pokemon:
    return Pokemon(id=None if new else dto.id or None, name=dto.name, birth_date=dto.birth_date)


def pokemons_to_dtos(pokemons: Iterable[Pokemon]) -> List[PokemonDto]:
    return [pokemon_to_dto(p) for p in pokemons]


# ---------------------------------------------------------------------------
# Review
# ---------------------------------------------------------------------------


def review_to_dto(review: Review) -> ReviewDto:
    return ReviewDto(
        id=review.id,
        title=review.title,
        text=review.text,
        rating=review.rating,
    )


def dto_to_review(dto: ReviewDto, *, new: bool = False) -> Review:
    return Review(
        id=None if new else dto.id or None,
        title=dto.title,
        text=dto.text,
        rating=dto.rating,
    )


def reviews_to_dtos(reviews: Iterable[Review]) -> List[ReviewDto]:
    return [review_to_dto(r) for r in reviews]


# ---------------------------------------------------------------------------
# Reviewer
# ---------------------------------------------------------------------------


def reviewer_to_dto(reviewer: Reviewer) -> ReviewerDto:
    return ReviewerDto(
        id=reviewer.id,
        first_name=reviewer.first_name,
        last_name=reviewer.last_name,
    )


def dto_to_reviewer(dto: ReviewerDto, *, new: bool = False) -> Reviewer:
    return Reviewer(
        id=None if new else dto.id or None,
        first_name=dto.first_name,
        last_name=dto.last_name,
    )


def reviewers_to_dtos(reviewers: Iterable[Reviewer]) -> List[ReviewerDto]:
    return [reviewer_to_dto(r) for r in reviewers]
