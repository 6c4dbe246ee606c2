"""Generic repository base interface.

Repository[T] is the root abstraction for all data-access interfaces in this
domain layer.  Concrete implementations live in
coffee_express/infrastructure/persistence/ and are wired at the application
boundary via get_repositories().

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / aiosqlite).
  - T is the domain entity type (never an ORM row or DTO).
  - Soft delete is part of the contract: no read method ever returns an
    entity whose is_deleted flag is set, and delete() only flags the row.
  - Store faults surface as StorageError; cancellation surfaces as
    asyncio.CancelledError and is never wrapped.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from coffee_express.domain.models.base import BaseEntity

T = TypeVar("T", bound=BaseEntity)


class Repository(ABC, Generic[T]):
    """Abstract soft-delete CRUD interface for one entity type."""

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> T | None:
        """Return the live entity with the given id, or None if absent or soft-deleted."""

    @abstractmethod
    async def get_all(self) -> list[T]:
        """Return every live entity ordered by id."""

    @abstractmethod
    async def add(self, entity: T) -> T:
        """Persist a new entity and return it with its store-assigned id.

        created_at is stamped with the current time and is_deleted forced to
        False regardless of the values on the incoming entity.
        """

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Persist the mutable state of an existing entity and stamp updated_at.

        Raises NotFound when no live row with entity.id exists.  id,
        created_at and is_deleted are never written.
        """

    @abstractmethod
    async def delete(self, entity_id: int) -> None:
        """Soft-delete the entity.  A missing or already deleted id is a no-op."""

    @abstractmethod
    async def exists(self, entity_id: int) -> bool:
        """Return True iff a live entity with that id exists."""
