"""Concrete SQLAlchemy repository implementations.

Exports all SqlRepository classes and the get_repositories() factory function
for wiring at the application boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .crud import SqlCrud
from .products import SqlProductRepository
from .users import SqlUserRepository


@dataclass
class Repositories:
    """All repository instances bound to a single AsyncSession."""

    users: SqlUserRepository
    products: SqlProductRepository


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories bound to the given session.

        async for session in get_session():
            repos = get_repositories(session)
            user = await repos.users.get_by_email("ana@example.com")
    """
    return Repositories(
        users=SqlUserRepository(session),
        products=SqlProductRepository(session),
    )


__all__ = [
    "SqlCrud",
    "SqlUserRepository",
    "SqlProductRepository",
    "Repositories",
    "get_repositories",
]
