# pokemon_review_api/errors.py

"""
Error types shared by the repositories and the HTTP controllers.

Controllers collect problems in a ``ValidationState`` (a field -> messages
map, ``""`` for model-level errors) and raise ``ApiError`` to send it back
with a status code. The exception handlers in ``main`` render the map as the
response body.
"""

from __future__ import annotations

from typing import Optional

from pokemon_review_api.schemas.common import ErrorMap


class ValidationState:
    """
    Accumulates validation errors for one request.
    """

    def __init__(self) -> None:
        self._errors: ErrorMap = {}

    def add_error(self, key: str, message: str) -> None:
        self._errors.setdefault(key, []).append(message)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    @property
    def errors(self) -> ErrorMap:
        return {key: list(messages) for key, messages in self._errors.items()}


class ApiError(Exception):
    """
    Raised by a controller to end the request with ``status_code`` and the
    accumulated validation state as body.
    """

    def __init__(self, status_code: int, state: Optional[ValidationState] = None) -> None:
        self.status_code = status_code
        self.state = state or ValidationState()
        super().__init__(f"HTTP {status_code}: {self.state.errors}")

    @classmethod
    def with_message(cls, status_code: int, message: str, key: str = "") -> "ApiError":
        state = ValidationState()
        state.add_error(key, message)
        return cls(status_code, state)


class DuplicateNameError(Exception):
    """Raised when the store rejects a name that already exists (ignoring case)."""

    def __init__(self, entity: str, name: str) -> None:
        super().__init__(f"{entity} '{name}' already exists.")
        self.entity = entity
        self.name = name


__all__ = ["ValidationState", "ApiError", "DuplicateNameError"]
