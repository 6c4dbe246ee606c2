"""Tests for SqlCrud — soft-delete semantics, audit stamps and error wrapping.

Exercised through SqlProductRepository, which delegates the whole generic
contract to its SqlCrud instance.
"""

import asyncio
from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from coffee_express.domain.errors import ConstraintViolation, NotFound, StorageError
from coffee_express.domain.models.enums import ProductCategory
from coffee_express.domain.models.products import Product
from coffee_express.infrastructure.persistence.repositories.products import SqlProductRepository

CREATED = datetime(2025, 6, 7, 15, 30, tzinfo=timezone.utc)


def _orm_product(**overrides):
    defaults = {
        "id": 1,
        "name": "Espresso",
        "price": Decimal("4.50"),
        "category": "coffee",
        "description": "",
        "created_at": CREATED,
        "updated_at": None,
        "is_deleted": False,
    }
    defaults.update(overrides)
    return SimpleNamespace(**defaults)


def _mock_session(scalar_result=None, scalars=None):
    session = AsyncMock()
    session.add = MagicMock()
    session.execute.return_value = MagicMock(
        scalar_one_or_none=MagicMock(return_value=scalar_result),
        scalars=MagicMock(return_value=scalars or []),
    )
    return session


def _domain_product(**overrides):
    defaults = dict(name="Latte", price=Decimal("5.00"), category=ProductCategory.COFFEE)
    defaults.update(overrides)
    return Product(**defaults)


def _compiled(session):
    stmt = session.execute.call_args.args[0]
    return str(stmt.compile(compile_kwargs={"literal_binds": True}))


# --- reads ---

async def test_get_by_id_returns_none_when_not_found():
    repo = SqlProductRepository(_mock_session(scalar_result=None))
    assert await repo.get_by_id(1) is None


async def test_get_by_id_returns_domain_object_when_found():
    repo = SqlProductRepository(_mock_session(scalar_result=_orm_product()))
    result = await repo.get_by_id(1)
    assert result.name == "Espresso"


async def test_get_by_id_filters_soft_deleted_rows():
    session = _mock_session(scalar_result=None)
    await SqlProductRepository(session).get_by_id(1)
    assert "is_deleted IS" in _compiled(session)


async def test_get_all_maps_every_row():
    rows = [_orm_product(id=1), _orm_product(id=2, name="Mocha")]
    repo = SqlProductRepository(_mock_session(scalars=rows))
    result = await repo.get_all()
    assert [p.id for p in result] == [1, 2]


async def test_get_all_orders_by_id_and_filters_deleted():
    session = _mock_session()
    await SqlProductRepository(session).get_all()
    sql = _compiled(session)
    assert "is_deleted IS" in sql
    assert "ORDER BY products.id" in sql


async def test_exists_true_when_row_found():
    repo = SqlProductRepository(_mock_session(scalar_result=1))
    assert await repo.exists(1) is True


async def test_exists_false_when_no_row():
    repo = SqlProductRepository(_mock_session(scalar_result=None))
    assert await repo.exists(1) is False


# --- add ---

async def test_add_returns_store_assigned_id():
    session = _mock_session()
    session.add.side_effect = lambda row: setattr(row, "id", 7)
    created = await SqlProductRepository(session).add(_domain_product())
    assert created.id == 7
    session.flush.assert_awaited_once()


async def test_add_forces_fresh_audit_fields():
    session = _mock_session()
    session.add.side_effect = lambda row: setattr(row, "id", 7)
    stale = _domain_product(id=99, is_deleted=True, created_at=CREATED, updated_at=CREATED)
    created = await SqlProductRepository(session).add(stale)
    assert created.is_deleted is False
    assert created.updated_at is None
    assert created.created_at > CREATED


async def test_add_writes_category_value_to_row():
    session = _mock_session()
    await SqlProductRepository(session).add(_domain_product(category=ProductCategory.TEA))
    row = session.add.call_args.args[0]
    assert row.category == "tea"


async def test_add_raises_constraint_violation_on_integrity_error():
    session = _mock_session()
    session.flush.side_effect = IntegrityError("INSERT", {}, Exception("duplicate"))
    with pytest.raises(ConstraintViolation) as info:
        await SqlProductRepository(session).add(_domain_product())
    assert info.value.operation == "add"
    assert isinstance(info.value.__cause__, IntegrityError)
    assert info.value.detail == "duplicate"
    assert info.value.constraint is None


async def test_add_records_driver_constraint_name():
    class DriverError(Exception):
        constraint_name = "uq_users_email_live"

    session = _mock_session()
    session.flush.side_effect = IntegrityError("INSERT", {}, DriverError("duplicate key"))
    with pytest.raises(ConstraintViolation) as info:
        await SqlProductRepository(session).add(_domain_product())
    assert info.value.constraint == "uq_users_email_live"


async def test_add_reads_constraint_name_from_chained_native_error():
    class NativeError(Exception):
        constraint_name = "uq_users_email_live"

    adapted = Exception("duplicate key")
    adapted.__cause__ = NativeError()
    session = _mock_session()
    session.flush.side_effect = IntegrityError("INSERT", {}, adapted)
    with pytest.raises(ConstraintViolation) as info:
        await SqlProductRepository(session).add(_domain_product())
    assert info.value.involves("uq_users_email_live")


# --- update ---

async def test_update_raises_not_found_when_row_missing():
    repo = SqlProductRepository(_mock_session(scalar_result=None))
    with pytest.raises(NotFound):
        await repo.update(_domain_product(id=1))


async def test_update_raises_not_found_for_unsaved_entity():
    session = _mock_session()
    with pytest.raises(NotFound):
        await SqlProductRepository(session).update(_domain_product())
    session.execute.assert_not_awaited()


async def test_update_keeps_id_and_created_at_from_store():
    row = _orm_product()
    repo = SqlProductRepository(_mock_session(scalar_result=row))
    changed = _domain_product(id=1, name="Latte", created_at=datetime.now(timezone.utc))
    updated = await repo.update(changed)
    assert updated.id == 1
    assert updated.created_at == CREATED


async def test_update_stamps_updated_at_and_applies_fields():
    row = _orm_product()
    repo = SqlProductRepository(_mock_session(scalar_result=row))
    updated = await repo.update(_domain_product(id=1, name="Latte"))
    assert updated.updated_at is not None
    assert updated.updated_at >= CREATED
    assert row.name == "Latte"
    assert row.updated_at == updated.updated_at


async def test_update_never_sets_soft_delete_flag():
    repo = SqlProductRepository(_mock_session(scalar_result=_orm_product()))
    updated = await repo.update(_domain_product(id=1, is_deleted=True))
    assert updated.is_deleted is False


# --- delete ---

async def test_delete_flags_row_instead_of_removing():
    row = _orm_product()
    session = _mock_session(scalar_result=row)
    await SqlProductRepository(session).delete(1)
    assert row.is_deleted is True
    assert row.updated_at is not None
    session.delete.assert_not_called()


async def test_delete_is_noop_when_missing():
    session = _mock_session(scalar_result=None)
    await SqlProductRepository(session).delete(1)
    session.flush.assert_not_awaited()


# --- failures ---

async def test_execute_failure_raises_storage_error_with_context():
    session = _mock_session()
    session.execute.side_effect = OperationalError("SELECT", {}, Exception("connection refused"))
    with pytest.raises(StorageError) as info:
        await SqlProductRepository(session).get_by_id(5)
    assert info.value.entity_type == "Product"
    assert info.value.operation == "get_by_id"
    assert info.value.entity_id == 5
    assert isinstance(info.value.__cause__, OperationalError)


async def test_flush_failure_raises_storage_error():
    session = _mock_session(scalar_result=_orm_product())
    session.flush.side_effect = OperationalError("UPDATE", {}, Exception("gone"))
    with pytest.raises(StorageError) as info:
        await SqlProductRepository(session).delete(1)
    assert not isinstance(info.value, ConstraintViolation)


async def test_cancellation_propagates_unwrapped():
    started = asyncio.Event()

    async def _hang(stmt):
        started.set()
        await asyncio.Event().wait()

    session = _mock_session()
    session.execute.side_effect = _hang
    task = asyncio.create_task(SqlProductRepository(session).get_all())
    await started.wait()
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
