# pokemon_review_api/routers/reviewer.py

from __future__ import annotations

from typing import List, Optional

import structlog
from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.orm import Session

from pokemon_review_api import mappers
from pokemon_review_api.db.session import get_db
from pokemon_review_api.repositories import ReviewerRepository
from pokemon_review_api.schemas import ReviewDto, ReviewerDto

from .common import created, no_content, require_body, require_matching_id, save_failed

logger = structlog.get_logger()

router = APIRouter(prefix="/reviewer", tags=["reviewer"])


def get_reviewer_repository(session: Session = Depends(get_db)) -> ReviewerRepository:
    return ReviewerRepository(session)


@router.get("", response_model=List[ReviewerDto], summary="List reviewers")
def get_reviewers(
    repo: ReviewerRepository = Depends(get_reviewer_repository),
) -> List[ReviewerDto]:
    return mappers.reviewers_to_dtos(repo.get_reviewers())


@router.get("/{reviewer_id}", response_model=ReviewerDto, summary="Get a single reviewer")
def get_reviewer(
    reviewer_id: int,
    repo: ReviewerRepository = Depends(get_reviewer_repository),
):
    if not repo.reviewer_exists(reviewer_id):
        return no_content()

    return mappers.reviewer_to_dto(repo.get_reviewer(reviewer_id))


@router.get(
    "/{reviewer_id}/reviews",
    response_model=List[ReviewDto],
    summary="List the reviews written by a reviewer",
)
def get_reviews_by_reviewer(
    reviewer_id: int,
    repo: ReviewerRepository = Depends(get_reviewer_repository),
):
    if not repo.reviewer_exists(reviewer_id):
        return no_content()

    return mappers.reviews_to_dtos(repo.get_reviews_by_reviewer(reviewer_id))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create a reviewer")
def create_reviewer(
    reviewer_create: Optional[ReviewerDto] = Body(None),
    repo: ReviewerRepository = Depends(get_reviewer_repository),
) -> Response:
    reviewer_create = require_body(reviewer_create)

    reviewer = mappers.dto_to_reviewer(reviewer_create, new=True)
    if not repo.create_reviewer(reviewer):
        raise save_failed("while saving")

    logger.info("reviewer_created", reviewer_id=reviewer.id)
    return created()


@router.put(
    "/{reviewer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update a reviewer",
)
def update_reviewer(
    reviewer_id: int,
    updated_reviewer: Optional[ReviewerDto] = Body(None),
    repo: ReviewerRepository = Depends(get_reviewer_repository),
) -> Response:
    updated_reviewer = require_body(updated_reviewer)
    require_matching_id(reviewer_id, updated_reviewer.id)

    if not repo.reviewer_exists(reviewer_id):
        return no_content()

    if not repo.update_reviewer(mappers.dto_to_reviewer(updated_reviewer)):
        raise save_failed("updating reviewer")

    return no_content()


@router.delete(
    "/{reviewer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a reviewer and their reviews",
)
def delete_reviewer(
    reviewer_id: int,
    repo: ReviewerRepository = Depends(get_reviewer_repository),
) -> Response:
    if not repo.reviewer_exists(reviewer_id):
        return no_content()

    reviewer = repo.get_reviewer(reviewer_id)
    if not repo.delete_reviewer(reviewer):
        raise save_failed("deleting reviewer")

    logger.info("reviewer_deleted", reviewer_id=reviewer_id)
    return no_content()
