# pokemon_review_api/routers/common.py

"""
Response helpers shared by every entity controller.
"""

from __future__ import annotations

from typing import Optional, TypeVar

from fastapi import Response, status
from fastapi.responses import JSONResponse

from pokemon_review_api.errors import ApiError
from pokemon_review_api.schemas import CREATED_MESSAGE

DtoT = TypeVar("DtoT")


def no_content() -> Response:
    """
    Empty 204 response. Also used for "not found" on reads, updates and
    deletes, which existing clients rely on.
    """
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def created(status_code: int = status.HTTP_201_CREATED) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=CREATED_MESSAGE)


def require_body(payload: Optional[DtoT]) -> DtoT:
    if payload is None:
        raise ApiError.with_message(status.HTTP_400_BAD_REQUEST, "A request body is required.")
    return payload


def require_matching_id(path_id: int, body_id: int) -> None:
    if path_id != body_id:
        raise ApiError.with_message(
            status.HTTP_400_BAD_REQUEST,
            f"Id in path ({path_id}) does not match id in body ({body_id}).",
        )


def already_exists(entity: str) -> ApiError:
    return ApiError.with_message(
        422, f"{entity} already exists"
    )


def save_failed(action: str) -> ApiError:
    return ApiError.with_message(
        status.HTTP_500_INTERNAL_SERVER_ERROR, f"Something went wrong {action}"
    )


def normalize_name(name: str) -> str:
    return name.strip().upper()


__all__ = [
    "no_content",
    "created",
    "require_body",
    "require_matching_id",
    "already_exists",
    "save_failed",
    "normalize_name",
]
