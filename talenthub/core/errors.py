from __future__ import annotations

from typing import Any, Iterable

from pydantic import ValidationError as PydanticValidationError


class StoreError(Exception):
    """Base error for recruitment store failures."""

    def __init__(self, message: str, errors: Iterable[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.errors: list[dict[str, Any]] = list(errors or [])

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationError(StoreError):
    """Malformed payload or a reference to a record that does not exist."""

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls(message, [{"field": field, "message": message}])

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError, message: str) -> "ValidationError":
        errors = []
        for item in exc.errors():
            loc = ".".join(str(part) for part in item.get("loc", ()))
            errors.append({"field": loc, "message": item.get("msg", "invalid value")})
        return cls(message, errors)


class NotFoundError(StoreError):
    """Operation targets an id that does not exist."""


class InternalError(StoreError):
    """Anything unexpected; surfaced generically."""
