# pokemon_review_api/routers/country.py

from __future__ import annotations

from typing import List, Optional

import structlog
from fastapi import APIRouter, Body, Depends, Response, status
from sqlalchemy.orm import Session

from pokemon_review_api import mappers
from pokemon_review_api.db.session import get_db
from pokemon_review_api.repositories import CountryRepository
from pokemon_review_api.schemas import CountryDto, OwnerDto

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

router = APIRouter(prefix="/country", tags=["country"])


def get_country_repository(session: Session = Depends(get_db)) -> CountryRepository:
    return CountryRepository(session)


@router.get("", response_model=List[CountryDto], summary="List countries")
def get_countries(
    repo: CountryRepository = Depends(get_country_repository),
) -> List[CountryDto]:
    return mappers.countries_to_dtos(repo.get_countries())


@router.get(
    "/{country_id}",
    response_model=CountryDto,
    summary="Get a single country",
    description="Returns 204 with an empty body when the country does not exist.",
)
def get_country(
    country_id: int,
    repo: CountryRepository = Depends(get_country_repository),
):
    if not repo.country_exists(country_id):
        return no_content()

    return mappers.country_to_dto(repo.get_country(country_id))


@router.get(
    "/owners/{owner_id}",
    response_model=CountryDto,
    summary="Get the country of an owner",
)
def get_country_by_owner(
    owner_id: int,
    repo: CountryRepository = Depends(get_country_repository),
):
    country = repo.get_country_by_owner(owner_id)
    if country is None:
        return no_content()

    return mappers.country_to_dto(country)


@router.get(
    "/{country_id}/owners",
    response_model=List[OwnerDto],
    summary="List the owners living in a country",
)
def get_owners_from_country(
    country_id: int,
    repo: CountryRepository = Depends(get_country_repository),
):
    if not repo.country_exists(country_id):
        return no_content()

    return mappers.owners_to_dtos(repo.get_owners_from_country(country_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a country",
    description="Rejects names that already exist, ignoring case and surrounding whitespace.",
)
def create_country(
    country_create: Optional[CountryDto] = Body(None),
    repo: CountryRepository = Depends(get_country_repository),
) -> Response:
    country_create = require_body(country_create)

    wanted = normalize_name(country_create.name)
    if any(normalize_name(c.name) == wanted for c in repo.get_countries()):
        raise already_exists("Country")

    country = mappers.dto_to_country(country_create, new=True)
    if not repo.create_country(country):
        raise save_failed("while saving")

    logger.info("country_created", country_id=country.id, name=country.name)
    return created()


@router.put(
    "/{country_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update a country",
)
def update_country(
    country_id: int,
    updated_country: Optional[CountryDto] = Body(None),
    repo: CountryRepository = Depends(get_country_repository),
) -> Response:
    updated_country = require_body(updated_country)
    require_matching_id(country_id, updated_country.id)

    if not repo.country_exists(country_id):
        return no_content()

    if not repo.update_country(mappers.dto_to_country(updated_country)):
        raise save_failed("updating country")

    return no_content()


@router.delete(
    "/{country_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a country",
    description="Fails with 500 while owners still live in the country.",
)
def delete_country(
    country_id: int,
    repo: CountryRepository = Depends(get_country_repository),
) -> Response:
    if not repo.country_exists(country_id):
        return no_content()

    country = repo.get_country(country_id)
    if not repo.delete_country(country):
        raise save_failed("deleting country")

    logger.info("country_deleted", country_id=country_id)
    return no_content()
