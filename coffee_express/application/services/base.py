"""Generic service contract and its CRUD implementation.

Service[D, C, U] is the business-level interface over one entity type, in
terms of its read DTO (D), create DTO (C) and update DTO (U).

CrudService implements it once for any entity by composing:
  - a Repository[E] for persistence,
  - a Mapper for every entity ↔ DTO translation,
  - an optional ValidatorRegistry that re-checks DTO field constraints,
  - a CrudHooks strategy for domain rules (e.g. uniqueness checks).

Concrete services wrap a CrudService instead of subclassing it and pass
their domain rules in as hooks.

Flow:
    create  → validate DTO → before_create → map C→E → repo.add    → map E→D
    update  → repo.get_by_id (NotFound) → validate DTO → before_update
              → merge U onto E → repo.update → map E→D
    delete  → repo.exists (NotFound) → repo.delete
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from coffee_express.application.mapping.mapper import Mapper
from coffee_express.application.validation.registry import ValidatorRegistry
from coffee_express.domain.errors import NotFound
from coffee_express.domain.models.base import BaseEntity
from coffee_express.domain.repositories.base import Repository

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseEntity)
D = TypeVar("D", bound=BaseModel)
C = TypeVar("C", bound=BaseModel)
U = TypeVar("U", bound=BaseModel)


class Service(ABC, Generic[D, C, U]):
    """Abstract CRUD service over read/create/update DTOs."""

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> D:
        """Return the DTO for a live entity.  Raises NotFound otherwise."""

    @abstractmethod
    async def get_all(self) -> list[D]:
        """Return DTOs for every live entity."""

    @abstractmethod
    async def create(self, create_dto: C) -> D:
        """Validate, persist and return the new entity as a DTO."""

    @abstractmethod
    async def update(self, entity_id: int, update_dto: U) -> D:
        """Merge the set fields of update_dto onto the entity.  Raises NotFound."""

    @abstractmethod
    async def delete(self, entity_id: int) -> None:
        """Soft-delete the entity.  Raises NotFound if it is absent."""


@dataclass(frozen=True)
class CrudHooks(Generic[C, U]):
    """Domain validation run before writes; None means no extra rule."""

    before_create: Optional[Callable[[C], Awaitable[None]]] = None
    before_update: Optional[Callable[[int, U], Awaitable[None]]] = None


class CrudService(Service[D, C, U], Generic[E, D, C, U]):
    def __init__(
        self,
        repository: Repository[E],
        mapper: Mapper,
        *,
        entity_type: type[E],
        dto_type: type[D],
        validators: ValidatorRegistry | None = None,
        hooks: CrudHooks[C, U] | None = None,
    ) -> None:
        self._repository = repository
        self._mapper = mapper
        self._entity_type = entity_type
        self._dto_type = dto_type
        self._validators = validators
        self._hooks = hooks or CrudHooks()

    @property
    def entity_name(self) -> str:
        return self._entity_type.__name__

    async def get_by_id(self, entity_id: int) -> D:
        entity = await self._repository.get_by_id(entity_id)
        if entity is None:
            raise NotFound(self.entity_name, entity_id)
        return self.to_dto(entity)

    async def get_all(self) -> list[D]:
        entities = await self._repository.get_all()
        return self._mapper.map_many(entities, self._dto_type)

    async def create(self, create_dto: C) -> D:
        self._validate(create_dto)
        if self._hooks.before_create is not None:
            await self._hooks.before_create(create_dto)
        entity = self._mapper.map(create_dto, self._entity_type)
        created = await self._repository.add(entity)
        logger.info("Created %s with id %s", self.entity_name, created.id)
        return self.to_dto(created)

    async def update(self, entity_id: int, update_dto: U) -> D:
        existing = await self._repository.get_by_id(entity_id)
        if existing is None:
            raise NotFound(self.entity_name, entity_id)
        self._validate(update_dto)
        if self._hooks.before_update is not None:
            await self._hooks.before_update(entity_id, update_dto)
        merged = self._mapper.map_onto(update_dto, existing)
        updated = await self._repository.update(merged)
        return self.to_dto(updated)

    async def delete(self, entity_id: int) -> None:
        if not await self._repository.exists(entity_id):
            raise NotFound(self.entity_name, entity_id)
        await self._repository.delete(entity_id)
        logger.info("Deleted %s with id %s", self.entity_name, entity_id)

    def to_dto(self, entity: E) -> D:
        return self._mapper.map(entity, self._dto_type)

    def _validate(self, dto: BaseModel) -> None:
        if self._validators is not None:
            self._validators.validate(dto).raise_if_invalid()
