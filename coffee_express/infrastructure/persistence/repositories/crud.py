"""Generic soft-delete CRUD over one ORM row class.

SqlCrud is a helper, not a base class: each concrete repository owns one
instance, delegates the generic contract to it, and adds its own queries
using live() / fetch_one() / fetch_all() / fetch_exists().

Every statement goes through _execute / _flush, which turn SQLAlchemy
faults into StorageError (ConstraintViolation for integrity errors) with the
entity type, operation and id attached.  asyncio.CancelledError is not a
SQLAlchemyError and passes through untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from coffee_express.domain.errors import ConstraintViolation, NotFound, StorageError
from coffee_express.domain.models.base import BaseEntity

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseEntity)
R = TypeVar("R")


class SqlCrud(Generic[E, R]):
    def __init__(
        self,
        session: AsyncSession,
        row_type: type[R],
        entity_name: str,
        to_domain: Callable[[R], E],
        to_row: Callable[[E], R],
        apply: Callable[[R, E], None],
    ) -> None:
        """
        to_row builds a fresh row for insertion (id left to the store).
        apply copies the mutable fields and updated_at of an entity onto an
        existing row; it must not touch id, created_at or is_deleted.
        """
        self._session = session
        self._row_type = row_type
        self.entity_name = entity_name
        self._to_domain = to_domain
        self._to_row = to_row
        self._apply = apply

    # --- query building blocks ---

    def live(self) -> Select:
        """SELECT of the row class with the soft-delete filter already applied."""
        return select(self._row_type).where(self._row_type.is_deleted.is_(False))

    def live_ids(self) -> Select:
        return select(self._row_type.id).where(self._row_type.is_deleted.is_(False))

    async def fetch_one(
        self, stmt: Select, operation: str, entity_id: int | None = None
    ) -> E | None:
        row = await self._first_row(stmt, operation, entity_id)
        return self._to_domain(row) if row is not None else None

    async def fetch_all(self, stmt: Select, operation: str) -> list[E]:
        result = await self._execute(stmt, operation)
        return [self._to_domain(row) for row in result.scalars()]

    async def fetch_exists(
        self, stmt: Select, operation: str, entity_id: int | None = None
    ) -> bool:
        result = await self._execute(stmt.limit(1), operation, entity_id)
        return result.scalar_one_or_none() is not None

    # --- generic contract ---

    async def get_by_id(self, entity_id: int) -> E | None:
        stmt = self.live().where(self._row_type.id == entity_id)
        return await self.fetch_one(stmt, "get_by_id", entity_id)

    async def get_all(self) -> list[E]:
        return await self.fetch_all(self.live().order_by(self._row_type.id), "get_all")

    async def add(self, entity: E) -> E:
        created = entity.as_new()
        row = self._to_row(created)
        self._session.add(row)
        await self._flush("add")
        created = created.model_copy(update={"id": row.id})
        logger.info("Created new %s with id %s", self.entity_name, created.id)
        return created

    async def update(self, entity: E) -> E:
        row = await self._live_row(entity.id, "update")
        if row is None:
            raise NotFound(self.entity_name, entity.id)
        current = self._to_domain(row)
        updated = entity.model_copy(
            update={
                "id": current.id,
                "created_at": current.created_at,
                "is_deleted": False,
                "updated_at": current.next_update_stamp(),
            }
        )
        self._apply(row, updated)
        await self._flush("update", updated.id)
        logger.info("Updated %s with id %s", self.entity_name, updated.id)
        return updated

    async def delete(self, entity_id: int) -> None:
        row = await self._live_row(entity_id, "delete")
        if row is None:
            return
        deleted = self._to_domain(row).soft_deleted()
        row.is_deleted = True
        row.updated_at = deleted.updated_at
        await self._flush("delete", entity_id)
        logger.info("Soft deleted %s with id %s", self.entity_name, entity_id)

    async def exists(self, entity_id: int) -> bool:
        stmt = self.live_ids().where(self._row_type.id == entity_id)
        return await self.fetch_exists(stmt, "exists", entity_id)

    # --- plumbing ---

    async def _live_row(self, entity_id: int | None, operation: str) -> R | None:
        if entity_id is None:
            return None
        stmt = self.live().where(self._row_type.id == entity_id)
        return await self._first_row(stmt, operation, entity_id)

    async def _first_row(
        self, stmt: Select, operation: str, entity_id: int | None = None
    ) -> R | None:
        result = await self._execute(stmt, operation, entity_id)
        return result.scalar_one_or_none()

    async def _execute(self, stmt: Select, operation: str, entity_id: int | None = None) -> Any:
        try:
            return await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.exception(
                "Error during %s on %s (id=%s)", operation, self.entity_name, entity_id
            )
            raise StorageError(self.entity_name, operation, entity_id) from exc

    async def _flush(self, operation: str, entity_id: int | None = None) -> None:
        try:
            await self._session.flush()
        except IntegrityError as exc:
            logger.warning(
                "Constraint violation during %s on %s (id=%s): %s",
                operation,
                self.entity_name,
                entity_id,
                exc.orig,
            )
            raise ConstraintViolation(
                self.entity_name,
                operation,
                entity_id,
                constraint=_constraint_name(exc),
                detail=str(exc.orig),
            ) from exc
        except SQLAlchemyError as exc:
            logger.exception(
                "Error during %s on %s (id=%s)", operation, self.entity_name, entity_id
            )
            raise StorageError(self.entity_name, operation, entity_id) from exc


def _constraint_name(exc: IntegrityError) -> str | None:
    """Constraint name reported by the driver (asyncpg exposes constraint_name).

    The SQLAlchemy asyncpg adapter chains the native error as __cause__.
    SQLite only names the index in its message, which ends up in detail.
    """
    for candidate in (exc.orig, getattr(exc.orig, "__cause__", None)):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return name
    return None
