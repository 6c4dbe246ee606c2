"""End-to-end product flows through ProductService and SqlProductRepository."""

import asyncio
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from coffee_express.application.dtos.products import CreateProductDto, UpdateProductDto
from coffee_express.domain.errors import NotFound, ValidationFailed
from coffee_express.domain.models.enums import ProductCategory
from coffee_express.domain.models.products import Product
from coffee_express.infrastructure.persistence.models import Product as OrmProduct


def _espresso():
    return CreateProductDto(name="Espresso", price=Decimal("4.50"), category="Coffee")


# --- lifecycle ---

async def test_create_read_delete_lifecycle(services):
    before = datetime.now(timezone.utc)
    created = await services.products.create(_espresso())
    assert created.id == 1
    assert created.category == ProductCategory.COFFEE
    assert before - timedelta(seconds=1) <= created.created_at <= datetime.now(timezone.utc)
    assert created.updated_at is None

    fetched = await services.products.get_by_id(created.id)
    assert fetched == created

    await services.products.delete(created.id)
    with pytest.raises(NotFound):
        await services.products.get_by_id(created.id)
    assert await services.products.get_all() == []


async def test_soft_deleted_row_stays_in_store(services, session):
    created = await services.products.create(_espresso())
    await services.products.delete(created.id)
    row = await session.get(OrmProduct, created.id)
    assert row is not None
    assert row.is_deleted is True
    assert row.updated_at is not None


async def test_ids_are_distinct_and_increasing(services):
    first = await services.products.create(_espresso())
    second = await services.products.create(
        CreateProductDto(name="Green Tea", price=Decimal("3.00"), category="tea")
    )
    assert second.id > first.id
    assert [p.id for p in await services.products.get_all()] == [first.id, second.id]


async def test_created_date_is_display_formatted(services):
    created = await services.products.create(_espresso())
    assert created.created_date == created.created_at.strftime("%Y-%m-%d %H:%M:%S")


async def test_invalid_create_leaves_store_unchanged(services):
    with pytest.raises(ValidationFailed):
        await services.products.create(
            CreateProductDto.model_construct(name="", price=Decimal("-10"), category="coffee")
        )
    assert await services.products.get_all() == []


# --- delete ---

async def test_repository_delete_is_idempotent(services, repos):
    created = await services.products.create(_espresso())
    await repos.products.delete(created.id)
    await repos.products.delete(created.id)
    assert await repos.products.exists(created.id) is False


async def test_second_service_delete_raises_not_found(services):
    created = await services.products.create(_espresso())
    await services.products.delete(created.id)
    with pytest.raises(NotFound):
        await services.products.delete(created.id)


async def test_repository_delete_of_unknown_id_is_noop(repos):
    await repos.products.delete(404)


# --- update ---

async def test_update_missing_id_raises_not_found_and_changes_nothing(services, repos):
    created = await services.products.create(_espresso())
    ghost = Product(id=999, name="Ghost", price=Decimal("1"), category=ProductCategory.SNACK)
    with pytest.raises(NotFound):
        await repos.products.update(ghost)
    with pytest.raises(NotFound):
        await services.products.update(999, UpdateProductDto(name="Ghost"))
    assert await services.products.get_all() == [created]


async def test_update_soft_deleted_raises_not_found(services):
    created = await services.products.create(_espresso())
    await services.products.delete(created.id)
    with pytest.raises(NotFound):
        await services.products.update(created.id, UpdateProductDto(name="Ristretto"))


async def test_update_keeps_identity_and_advances_updated_at(services):
    created = await services.products.create(_espresso())
    await asyncio.sleep(0.01)
    first = await services.products.update(created.id, UpdateProductDto(price=Decimal("5.00")))
    assert (first.id, first.created_at) == (created.id, created.created_at)
    assert first.price == Decimal("5.00")
    assert first.product_name == "Espresso"
    assert first.updated_at >= created.created_at

    await asyncio.sleep(0.01)
    second = await services.products.update(created.id, UpdateProductDto(description="Short"))
    assert second.updated_at >= first.updated_at
    assert await services.products.get_by_id(created.id) == second


async def test_update_accepts_category_in_any_case(services):
    created = await services.products.create(_espresso())
    updated = await services.products.update(created.id, UpdateProductDto(category="DESSERT"))
    assert updated.category == ProductCategory.DESSERT
