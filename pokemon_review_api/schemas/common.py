# pokemon_review_api/schemas/common.py

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Base / shared types
# ---------------------------------------------------------------------------


class APIModel(BaseModel):
    """
    Base Pydantic model for all HTTP API schemas.

    Common config:
    - camelCase on the wire, snake_case in Python; both accepted on input
    - read straight from ORM instances
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Accumulated validation errors, keyed by field ("" for model-level errors).
ErrorMap = Dict[str, List[str]]


CREATED_MESSAGE = "Successfully created"


__all__ = ["APIModel", "ErrorMap", "CREATED_MESSAGE"]
