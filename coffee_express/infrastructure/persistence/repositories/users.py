"""SQLAlchemy implementation of UserRepository."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession

from coffee_express.domain.errors import FieldError, ValidationFailed
from coffee_express.domain.models.base import as_utc
from coffee_express.domain.models.users import User as DomainUser
from coffee_express.domain.repositories.users import UserRepository
from coffee_express.infrastructure.persistence.models.users import User as OrmUser

from .crud import SqlCrud


class SqlUserRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._crud: SqlCrud[DomainUser, OrmUser] = SqlCrud(
            session,
            OrmUser,
            "User",
            to_domain=self._to_domain,
            to_row=self._to_row,
            apply=self._apply,
        )

    @staticmethod
    def _to_domain(row: OrmUser) -> DomainUser:
        return DomainUser(
            id=row.id,
            first_name=row.first_name,
            last_name=row.last_name,
            email=row.email,
            is_active=row.is_active,
            created_at=row.created_at,
            updated_at=row.updated_at,
            is_deleted=row.is_deleted,
        )

    @staticmethod
    def _to_row(entity: DomainUser) -> OrmUser:
        return OrmUser(
            first_name=entity.first_name,
            last_name=entity.last_name,
            email=entity.email,
            is_active=entity.is_active,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            is_deleted=entity.is_deleted,
        )

    @staticmethod
    def _apply(row: OrmUser, entity: DomainUser) -> None:
        row.first_name = entity.first_name
        row.last_name = entity.last_name
        row.email = entity.email
        row.is_active = entity.is_active
        row.updated_at = entity.updated_at

    # --- generic contract ---

    async def get_by_id(self, entity_id: int) -> DomainUser | None:
        return await self._crud.get_by_id(entity_id)

    async def get_all(self) -> list[DomainUser]:
        return await self._crud.get_all()

    async def add(self, entity: DomainUser) -> DomainUser:
        return await self._crud.add(entity)

    async def update(self, entity: DomainUser) -> DomainUser:
        return await self._crud.update(entity)

    async def delete(self, entity_id: int) -> None:
        await self._crud.delete(entity_id)

    async def exists(self, entity_id: int) -> bool:
        return await self._crud.exists(entity_id)

    # --- user queries ---

    async def get_by_email(self, email: str) -> DomainUser | None:
        stmt = self._crud.live().where(func.lower(OrmUser.email) == email.lower())
        return await self._crud.fetch_one(stmt, "get_by_email")

    async def get_active(self) -> list[DomainUser]:
        stmt = (
            self._crud.live()
            .where(OrmUser.is_active.is_(True))
            .order_by(OrmUser.first_name, OrmUser.id)
        )
        return await self._crud.fetch_all(stmt, "get_active")

    async def is_email_taken(self, email: str) -> bool:
        stmt = self._crud.live_ids().where(func.lower(OrmUser.email) == email.lower())
        return await self._crud.fetch_exists(stmt, "is_email_taken")

    async def get_by_date_range(self, start: datetime, end: datetime) -> list[DomainUser]:
        start, end = as_utc(start), as_utc(end)
        if start > end:
            raise ValidationFailed(
                [FieldError(field="start", message="start must not be after end", attempted_value=start)]
            )
        stmt = (
            self._crud.live()
            .where(OrmUser.created_at >= start, OrmUser.created_at <= end)
            .order_by(OrmUser.created_at, OrmUser.id)
        )
        return await self._crud.fetch_all(stmt, "get_by_date_range")
