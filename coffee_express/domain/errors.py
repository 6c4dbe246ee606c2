"""Domain error taxonomy.

Every failure raised by the repository and service layers is a DomainError
subclass, except cancellation, which is plain asyncio.CancelledError
(re-exported here as Cancelled).  Callers in the hosting layer map these
kinds onto transport responses.

    NotFound          entity absent or soft-deleted
    ValidationFailed  structured field-level errors
    Conflict          natural-key uniqueness violation (e.g. duplicate email)
    StorageError      underlying store fault, chained to the driver exception
    MappingError      no mapping registered for a source/target pair
"""

from __future__ import annotations

import asyncio
from typing import Any

from pydantic import BaseModel, ConfigDict

Cancelled = asyncio.CancelledError


class FieldError(BaseModel):
    """A single failed validation rule."""

    model_config = ConfigDict(frozen=True)

    field: str
    message: str
    attempted_value: Any = None


class DomainError(Exception):
    """Base class for all errors raised by the CRUD layers."""


class NotFound(DomainError):
    def __init__(self, entity_type: str, entity_id: int | None) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id {entity_id} not found")


class ValidationFailed(DomainError):
    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = list(errors)
        summary = "; ".join(f"{e.field}: {e.message}" for e in self.errors)
        super().__init__(f"Validation failed: {summary}")


class Conflict(DomainError):
    def __init__(self, entity_type: str, field: str, value: Any) -> None:
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field} {value!r} already exists")


class StorageError(DomainError):
    """A store fault, carrying enough context to diagnose it.

    The originating driver/SQLAlchemy exception is available as __cause__.
    """

    def __init__(
        self,
        entity_type: str,
        operation: str,
        entity_id: int | None = None,
    ) -> None:
        self.entity_type = entity_type
        self.operation = operation
        self.entity_id = entity_id
        target = entity_type if entity_id is None else f"{entity_type} {entity_id}"
        super().__init__(f"Storage failure during {operation} on {target}")


class ConstraintViolation(StorageError):
    """The store rejected a write because of an integrity constraint.

    constraint is the violated constraint or index name when the driver
    reports one; detail is the driver message.
    """

    def __init__(
        self,
        entity_type: str,
        operation: str,
        entity_id: int | None = None,
        *,
        constraint: str | None = None,
        detail: str = "",
    ) -> None:
        super().__init__(entity_type, operation, entity_id)
        self.constraint = constraint
        self.detail = detail

    def involves(self, name: str) -> bool:
        return self.constraint == name or name in self.detail


class MappingError(DomainError):
    pass
