# pokemon_review_api/routers/pokemon.py

from __future__ import annotations

from typing import List, Optional

import structlog
from fastapi import APIRouter, Body, Depends, Query, Response, status
from sqlalchemy.orm import Session

from pokemon_review_api import mappers
from pokemon_review_api.db.session import get_db
from pokemon_review_api.errors import ApiError, ValidationState
from pokemon_review_api.repositories import (
    CategoryRepository,
    OwnerRepository,
    PokemonRepository,
    ReviewRepository,
)
from pokemon_review_api.schemas import PokemonDto

from .category import get_category_repository
from .common import created, no_content, require_body, require_matching_id, save_failed
from .owner import get_owner_repository
from .review import get_review_repository

logger = structlog.get_logger()

router = APIRouter(prefix="/pokemon", tags=["pokemon"])


def get_pokemon_repository(session: Session = Depends(get_db)) -> PokemonRepository:
    return PokemonRepository(session)


def _check_links(
    owners: OwnerRepository,
    categories: CategoryRepository,
    owner_id: Optional[int],
    category_id: Optional[int],
) -> None:
    """
    Reject the request with 404 when a referenced owner or category is missing.
    """
    state = ValidationState()
    if owner_id is not None and not owners.owner_exists(owner_id):
        state.add_error("ownerId", f"Owner {owner_id} does not exist")
    if category_id is not None and not categories.category_exists(category_id):
        state.add_error("catId", f"Category {category_id} does not exist")
    if not state.is_valid:
        raise ApiError(status.HTTP_404_NOT_FOUND, state)


@router.get("", response_model=List[PokemonDto], summary="List pokemon")
def get_pokemons(
    repo: PokemonRepository = Depends(get_pokemon_repository),
) -> List[PokemonDto]:
    return mappers.pokemons_to_dtos(repo.get_pokemons())


@router.get("/{poke_id}", response_model=PokemonDto, summary="Get a single pokemon")
def get_pokemon(
    poke_id: int,
    repo: PokemonRepository = Depends(get_pokemon_repository),
):
    if not repo.pokemon_exists(poke_id):
        return no_content()

    return mappers.pokemon_to_dto(repo.get_pokemon(poke_id))


@router.get(
    "/{poke_id}/rating",
    response_model=float,
    summary="Average review rating of a pokemon",
)
def get_pokemon_rating(
    poke_id: int,
    repo: PokemonRepository = Depends(get_pokemon_repository),
):
    if not repo.pokemon_exists(poke_id):
        return no_content()

    return repo.get_pokemon_rating(poke_id)


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    summary="Create a pokemon",
    description="Owner and category are given by the `ownerId` and `catId` query parameters.",
)
def create_pokemon(
    owner_id: int = Query(..., alias="ownerId"),
    category_id: int = Query(..., alias="catId"),
    pokemon_create: Optional[PokemonDto] = Body(None),
    repo: PokemonRepository = Depends(get_pokemon_repository),
    owners: OwnerRepository = Depends(get_owner_repository),
    categories: CategoryRepository = Depends(get_category_repository),
) -> Response:
    pokemon_create = require_body(pokemon_create)
    _check_links(owners, categories, owner_id, category_id)

    pokemon = mappers.dto_to_pokemon(pokemon_create, new=True)
    if not repo.create_pokemon(owner_id, category_id, pokemon):
        raise save_failed("while saving")

    logger.info(
        "pokemon_created",
        pokemon_id=pokemon.id,
        owner_id=owner_id,
        category_id=category_id,
    )
    return created(status.HTTP_200_OK)


@router.put(
    "/{poke_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update a pokemon",
    description="Optional `ownerId` / `catId` query parameters add owner and category links.",
)
def update_pokemon(
    poke_id: int,
    owner_id: Optional[int] = Query(None, alias="ownerId"),
    category_id: Optional[int] = Query(None, alias="catId"),
    updated_pokemon: Optional[PokemonDto] = Body(None),
    repo: PokemonRepository = Depends(get_pokemon_repository),
    owners: OwnerRepository = Depends(get_owner_repository),
    categories: CategoryRepository = Depends(get_category_repository),
) -> Response:
    updated_pokemon = require_body(updated_pokemon)
    require_matching_id(poke_id, updated_pokemon.id)

    if not repo.pokemon_exists(poke_id):
        return no_content()

    _check_links(owners, categories, owner_id, category_id)

    pokemon = mappers.dto_to_pokemon(updated_pokemon)
    if not repo.update_pokemon(owner_id, category_id, pokemon):
        raise save_failed("updating pokemon")

    return no_content()


@router.delete(
    "/{poke_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a pokemon and its reviews",
)
def delete_pokemon(
    poke_id: int,
    repo: PokemonRepository = Depends(get_pokemon_repository),
    reviews: ReviewRepository = Depends(get_review_repository),
) -> Response:
    if not repo.pokemon_exists(poke_id):
        return no_content()

    reviews_to_delete = reviews.get_reviews_of_pokemon(poke_id)
    pokemon = repo.get_pokemon(poke_id)

    if not reviews.delete_reviews(reviews_to_delete):
        raise save_failed("when deleting reviews")

    if not repo.delete_pokemon(pokemon):
        raise save_failed("deleting pokemon")

    logger.info("pokemon_deleted", pokemon_id=poke_id, reviews_deleted=len(reviews_to_delete))
    return no_content()
