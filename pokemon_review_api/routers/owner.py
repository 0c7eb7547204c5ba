# pokemon_review_api/routers/owner.py

from __future__ import annotations

from typing import List, Optional

import structlog
from fastapi import APIRouter, Body, Depends, Query, Response, status
from sqlalchemy.orm import Session

from pokemon_review_api import mappers
from pokemon_review_api.db.session import get_db
from pokemon_review_api.errors import ApiError
from pokemon_review_api.repositories import CountryRepository, OwnerRepository
from pokemon_review_api.schemas import OwnerDto, PokemonDto

from .common import created, no_content, require_body, require_matching_id, save_failed
from .country import get_country_repository

logger = structlog.get_logger()

router = APIRouter(prefix="/owner", tags=["owner"])


def get_owner_repository(session: Session = Depends(get_db)) -> OwnerRepository:
    return OwnerRepository(session)


@router.get("", response_model=List[OwnerDto], summary="List owners")
def get_owners(
    repo: OwnerRepository = Depends(get_owner_repository),
) -> List[OwnerDto]:
    return mappers.owners_to_dtos(repo.get_owners())


@router.get("/{owner_id}", response_model=OwnerDto, summary="Get a single owner")
def get_owner(
    owner_id: int,
    repo: OwnerRepository = Depends(get_owner_repository),
):
    if not repo.owner_exists(owner_id):
        return no_content()

    return mappers.owner_to_dto(repo.get_owner(owner_id))


@router.get(
    "/{owner_id}/pokemon",
    response_model=List[PokemonDto],
    summary="List the pokemon held by an owner",
)
def get_pokemon_by_owner(
    owner_id: int,
    repo: OwnerRepository = Depends(get_owner_repository),
):
    if not repo.owner_exists(owner_id):
        return no_content()

    return mappers.pokemons_to_dtos(repo.get_pokemon_by_owner(owner_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create an owner",
    description="The owner's country is given by the `countryId` query parameter.",
)
def create_owner(
    country_id: int = Query(..., alias="countryId"),
    owner_create: Optional[OwnerDto] = Body(None),
    repo: OwnerRepository = Depends(get_owner_repository),
    countries: CountryRepository = Depends(get_country_repository),
) -> Response:
    owner_create = require_body(owner_create)

    country = countries.get_country(country_id)
    if country is None:
        raise ApiError.with_message(
            status.HTTP_404_NOT_FOUND, f"Country {country_id} does not exist", key="countryId"
        )

    owner = mappers.dto_to_owner(owner_create, new=True)
    owner.country = country

    if not repo.create_owner(owner):
        raise save_failed("while saving")

    logger.info("owner_created", owner_id=owner.id, country_id=country_id)
    return created()


@router.put(
    "/{owner_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update an owner",
)
def update_owner(
    owner_id: int,
    updated_owner: Optional[OwnerDto] = Body(None),
    repo: OwnerRepository = Depends(get_owner_repository),
) -> Response:
    updated_owner = require_body(updated_owner)
    require_matching_id(owner_id, updated_owner.id)

    if not repo.owner_exists(owner_id):
        return no_content()

    if not repo.update_owner(mappers.dto_to_owner(updated_owner)):
        raise save_failed("updating owner")

    return no_content()


@router.delete(
    "/{owner_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete an owner",
)
def delete_owner(
    owner_id: int,
    repo: OwnerRepository = Depends(get_owner_repository),
) -> Response:
    if not repo.owner_exists(owner_id):
        return no_content()

    owner = repo.get_owner(owner_id)
    if not repo.delete_owner(owner):
        raise save_failed("deleting owner")

    logger.info("owner_deleted", owner_id=owner_id)
    return no_content()
