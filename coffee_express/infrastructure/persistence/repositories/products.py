"""SQLAlchemy implementation of ProductRepository."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from coffee_express.domain.models.enums import ProductCategory
from coffee_express.domain.models.products import Product as DomainProduct
from coffee_express.domain.repositories.products import ProductRepository
from coffee_express.infrastructure.persistence.models.products import Product as OrmProduct

from .crud import SqlCrud


class SqlProductRepository(ProductRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._crud: SqlCrud[DomainProduct, OrmProduct] = SqlCrud(
            session,
            OrmProduct,
            "Product",
            to_domain=self._to_domain,
            to_row=self._to_row,
            apply=self._apply,
        )

    @staticmethod
    def _to_domain(row: OrmProduct) -> DomainProduct:
        return DomainProduct(
            id=row.id,
            name=row.name,
            price=row.price,
            category=ProductCategory(row.category),
            description=row.description,
            created_at=row.created_at,
            updated_at=row.updated_at,
            is_deleted=row.is_deleted,
        )

    @staticmethod
    def _to_row(entity: DomainProduct) -> OrmProduct:
        return OrmProduct(
            name=entity.name,
            price=entity.price,
            category=entity.category.value,
            description=entity.description,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            is_deleted=entity.is_deleted,
        )

    @staticmethod
    def _apply(row: OrmProduct, entity: DomainProduct) -> None:
        row.name = entity.name
        row.price = entity.price
        row.category = entity.category.value
        row.description = entity.description
        row.updated_at = entity.updated_at

    async def get_by_id(self, entity_id: int) -> DomainProduct | None:
        return await self._crud.get_by_id(entity_id)

    async def get_all(self) -> list[DomainProduct]:
        return await self._crud.get_all()

    async def add(self, entity: DomainProduct) -> DomainProduct:
        return await self._crud.add(entity)

    async def update(self, entity: DomainProduct) -> DomainProduct:
        return await self._crud.update(entity)

    async def delete(self, entity_id: int) -> None:
        await self._crud.delete(entity_id)

    async def exists(self, entity_id: int) -> bool:
        return await self._crud.exists(entity_id)
