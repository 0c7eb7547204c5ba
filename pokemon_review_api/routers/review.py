# pokemon_review_api/routers/review.py

from __future__ import annotations

from typing import List, Optional

import structlog
from fastapi import APIRouter, Body, Depends, Query, Response, status
from sqlalchemy.orm import Session

from pokemon_review_api import mappers
from pokemon_review_api.db.session import get_db
from pokemon_review_api.errors import ApiError, ValidationState
from pokemon_review_api.repositories import (
    PokemonRepository,
    ReviewerRepository,
    ReviewRepository,
)
from pokemon_review_api.schemas import ReviewDto

from .common import created, no_content, require_body, require_matching_id, save_failed

logger = structlog.get_logger()

router = APIRouter(prefix="/review", tags=["review"])


def get_review_repository(session: Session = Depends(get_db)) -> ReviewRepository:
    return ReviewRepository(session)


def get_pokemon_lookup(session: Session = Depends(get_db)) -> PokemonRepository:
    return PokemonRepository(session)


def get_reviewer_lookup(session: Session = Depends(get_db)) -> ReviewerRepository:
    return ReviewerRepository(session)


@router.get("", response_model=List[ReviewDto], summary="List reviews")
def get_reviews(
    repo: ReviewRepository = Depends(get_review_repository),
) -> List[ReviewDto]:
    return mappers.reviews_to_dtos(repo.get_reviews())


@router.get("/{review_id}", response_model=ReviewDto, summary="Get a single review")
def get_review(
    review_id: int,
    repo: ReviewRepository = Depends(get_review_repository),
):
    if not repo.review_exists(review_id):
        return no_content()

    return mappers.review_to_dto(repo.get_review(review_id))


@router.get(
    "/pokemon/{poke_id}",
    response_model=List[ReviewDto],
    summary="List the reviews of a pokemon",
)
def get_reviews_of_pokemon(
    poke_id: int,
    repo: ReviewRepository = Depends(get_review_repository),
) -> List[ReviewDto]:
    return mappers.reviews_to_dtos(repo.get_reviews_of_pokemon(poke_id))


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    summary="Create a review",
    description="The reviewed pokemon and the author are given by `pokeId` and `reviewerId`.",
)
def create_review(
    reviewer_id: int = Query(..., alias="reviewerId"),
    poke_id: int = Query(..., alias="pokeId"),
    review_create: Optional[ReviewDto] = Body(None),
    repo: ReviewRepository = Depends(get_review_repository),
    pokemons: PokemonRepository = Depends(get_pokemon_lookup),
    reviewers: ReviewerRepository = Depends(get_reviewer_lookup),
) -> Response:
    review_create = require_body(review_create)

    pokemon = pokemons.get_pokemon(poke_id)
    reviewer = reviewers.get_reviewer(reviewer_id)

    state = ValidationState()
    if pokemon is None:
        state.add_error("pokeId", f"Pokemon {poke_id} does not exist")
    if reviewer is None:
        state.add_error("reviewerId", f"Reviewer {reviewer_id} does not exist")
    if not state.is_valid:
        raise ApiError(status.HTTP_404_NOT_FOUND, state)

    review = mappers.dto_to_review(review_create, new=True)
    review.pokemon = pokemon
    review.reviewer = reviewer

    if not repo.create_review(review):
        raise save_failed("while saving")

    logger.info("review_created", review_id=review.id, pokemon_id=poke_id, reviewer_id=reviewer_id)
    return created(status.HTTP_200_OK)


@router.put(
    "/{review_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update a review",
)
def update_review(
    review_id: int,
    updated_review: Optional[ReviewDto] = Body(None),
    repo: ReviewRepository = Depends(get_review_repository),
) -> Response:
    updated_review = require_body(updated_review)
    require_matching_id(review_id, updated_review.id)

    if not repo.review_exists(review_id):
        return no_content()

    if not repo.update_review(mappers.dto_to_review(updated_review)):
        raise save_failed("updating review")

    return no_content()


@router.delete(
    "/{review_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a review",
)
def delete_review(
    review_id: int,
    repo: ReviewRepository = Depends(get_review_repository),
) -> Response:
    if not repo.review_exists(review_id):
        return no_content()

    review = repo.get_review(review_id)
    if not repo.delete_review(review):
        raise save_failed("deleting review")

    logger.info("review_deleted", review_id=review_id)
    return no_content()
