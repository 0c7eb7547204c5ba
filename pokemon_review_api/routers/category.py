# pokemon_review_api/routers/category.py

from __future__ import annotations

from typing import List, Optional

import structlog
from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.orm import Session

from pokemon_review_api import mappers
from pokemon_review_api.db.session import get_db
from pokemon_review_api.repositories import CategoryRepository
from pokemon_review_api.schemas import CategoryDto, PokemonDto

from .common import (
    already_exists,
    created,
    no_content,
    normalize_name,
    require_body,
    require_matching_id,
    save_failed,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/category", tags=["category"])


def get_category_repository(session: Session = Depends(get_db)) -> CategoryRepository:
    """
    Dependency-injected factory for CategoryRepository; tests override it.
    """
    return CategoryRepository(session)


@router.get(
    "",
    response_model=List[CategoryDto],
    summary="List categories",
)
def get_categories(
    repo: CategoryRepository = Depends(get_category_repository),
) -> List[CategoryDto]:
    return mappers.categories_to_dtos(repo.get_categories())


@router.get(
    "/{category_id}",
    response_model=CategoryDto,
    summary="Get a single category",
    description="Returns 204 with an empty body when the category does not exist.",
)
def get_category(
    category_id: int,
    repo: CategoryRepository = Depends(get_category_repository),
):
    if not repo.category_exists(category_id):
        return no_content()

    return mappers.category_to_dto(repo.get_category(category_id))


@router.get(
    "/pokemon/{category_id}",
    response_model=List[PokemonDto],
    summary="List the pokemon in a category",
)
def get_pokemon_by_category(
    category_id: int,
    repo: CategoryRepository = Depends(get_category_repository),
) -> List[PokemonDto]:
    return mappers.pokemons_to_dtos(repo.get_pokemon_by_category(category_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a category",
    description="Rejects names that already exist, ignoring case and surrounding whitespace.",
)
def create_category(
    category_create: Optional[CategoryDto] = Body(None),
    repo: CategoryRepository = Depends(get_category_repository),
) -> Response:
    category_create = require_body(category_create)

    wanted = normalize_name(category_create.name)
    for existing in repo.get_categories():
        if normalize_name(existing.name) == wanted:
            raise already_exists("Category")

    category = mappers.dto_to_category(category_create, new=True)
    if not repo.create_category(category):
        raise save_failed("while saving")

    logger.info("category_created", category_id=category.id, name=category.name)
    return created()


@router.put(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update a category",
)
def update_category(
    category_id: int,
    updated_category: Optional[CategoryDto] = Body(None),
    repo: CategoryRepository = Depends(get_category_repository),
) -> Response:
    updated_category = require_body(updated_category)
    require_matching_id(category_id, updated_category.id)

    if not repo.category_exists(category_id):
        return no_content()

    if not repo.update_category(mappers.dto_to_category(updated_category)):
        raise save_failed("updating category")

    return no_content()


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a category",
)
def delete_category(
    category_id: int,
    repo: CategoryRepository = Depends(get_category_repository),
) -> Response:
    if not repo.category_exists(category_id):
        return no_content()

    category = repo.get_category(category_id)
    if not repo.delete_category(category):
        raise save_failed("deleting category")

    logger.info("category_deleted", category_id=category_id)
    return no_content()
