"""User repository interface."""

from __future__ import annotations

from abc import abstractmethod
from datetime import datetime

from coffee_express.domain.models.users import User

from .base import Repository


class UserRepository(Repository[User]):
    """Read/write interface for User entities.

    Email comparisons are case-insensitive.  Every query below ignores
    soft-deleted rows, exactly like the generic reads.
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """Return the user with the given email (case-insensitive), or None."""

    @abstractmethod
    async def get_active(self) -> list[User]:
        """Return active users ordered by first name."""

    @abstractmethod
    async def is_email_taken(self, email: str) -> bool:
        """Return True if a live user already uses this email (case-insensitive)."""

    @abstractmethod
    async def get_by_date_range(self, start: datetime, end: datetime) -> list[User]:
        """Return users created within [start, end] (inclusive), oldest first.

        Raises ValidationFailed when start is after end.
        """
