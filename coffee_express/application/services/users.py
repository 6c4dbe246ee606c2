"""User service: generic CRUD plus email lookups and deactivation."""

from __future__ import annotations

import logging
from datetime import datetime

from coffee_express.application.dtos.users import CreateUserDto, UpdateUserDto, UserDto
from coffee_express.application.mapping.mapper import Mapper
from coffee_express.application.validation.registry import ValidatorRegistry
from coffee_express.domain.errors import Conflict, ConstraintViolation, NotFound
from coffee_express.domain.models.users import EMAIL_UNIQUE_CONSTRAINT, User
from coffee_express.domain.repositories.users import UserRepository

from .base import CrudHooks, CrudService, Service

logger = logging.getLogger(__name__)


class UserService(Service[UserDto, CreateUserDto, UpdateUserDto]):
    """Users are unique by email, compared case-insensitively.

    The duplicate check in the create hook is a read-then-write and can
    race; the partial unique index on lower(email) is the real guard, and a
    ConstraintViolation on that index is reported as the same Conflict.
    Other constraint violations propagate unchanged.
    """

    def __init__(
        self,
        repository: UserRepository,
        mapper: Mapper,
        validators: ValidatorRegistry | None = None,
    ) -> None:
        self._repository = repository
        self._crud: CrudService[User, UserDto, CreateUserDto, UpdateUserDto] = CrudService(
            repository,
            mapper,
            entity_type=User,
            dto_type=UserDto,
            validators=validators,
            hooks=CrudHooks(before_create=self._ensure_email_available),
        )

    async def get_by_id(self, entity_id: int) -> UserDto:
        return await self._crud.get_by_id(entity_id)

    async def get_all(self) -> list[UserDto]:
        return await self._crud.get_all()

    async def create(self, create_dto: CreateUserDto) -> UserDto:
        try:
            return await self._crud.create(create_dto)
        except ConstraintViolation as exc:
            if not exc.involves(EMAIL_UNIQUE_CONSTRAINT):
                raise
            raise Conflict("User", "email", create_dto.email) from exc

    async def update(self, entity_id: int, update_dto: UpdateUserDto) -> UserDto:
        return await self._crud.update(entity_id, update_dto)

    async def delete(self, entity_id: int) -> None:
        await self._crud.delete(entity_id)

    async def get_by_email(self, email: str) -> UserDto | None:
        user = await self._repository.get_by_email(email)
        return self._crud.to_dto(user) if user is not None else None

    async def get_active(self) -> list[UserDto]:
        users = await self._repository.get_active()
        return [self._crud.to_dto(u) for u in users]

    async def get_by_date_range(self, start: datetime, end: datetime) -> list[UserDto]:
        users = await self._repository.get_by_date_range(start, end)
        return [self._crud.to_dto(u) for u in users]

    async def is_email_available(self, email: str) -> bool:
        return not await self._repository.is_email_taken(email)

    async def deactivate(self, entity_id: int) -> UserDto:
        """Clear is_active through the generic update path.  Not a soft delete."""
        user = await self._repository.get_by_id(entity_id)
        if user is None:
            raise NotFound("User", entity_id)
        updated = await self._repository.update(user.deactivated())
        logger.info("Deactivated user with id %s", entity_id)
        return self._crud.to_dto(updated)

    async def _ensure_email_available(self, create_dto: CreateUserDto) -> None:
        if await self._repository.is_email_taken(create_dto.email):
            raise Conflict("User", "email", create_dto.email)
