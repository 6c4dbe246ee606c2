"""Tests for coffee_express/domain/repositories/base.py."""

import pytest

from coffee_express.domain.repositories.base import Repository


def test_repository_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        Repository()  # type: ignore[abstract]


def test_repository_concrete_subclass_must_implement_all_methods():
    class _Partial(Repository):
        async def get_by_id(self, entity_id): return None
        # missing get_all, add, update, delete, exists

    with pytest.raises(TypeError):
        _Partial()  # type: ignore[abstract]


def test_repository_full_concrete_subclass_instantiates():
    class _Full(Repository):
        async def get_by_id(self, entity_id): return None
        async def get_all(self): return []
        async def add(self, entity): return entity
        async def update(self, entity): return entity
        async def delete(self, entity_id): return None
        async def exists(self, entity_id): return False

    assert _Full() is not None
