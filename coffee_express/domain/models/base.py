"""Base entity shared by every persisted domain object.

Entities are frozen Pydantic models.  Lifecycle transitions (creation
stamp, update stamp, soft delete) never mutate an instance; each returns a
new value via model_copy so that a value handed out by a repository can be
shared safely between coroutines.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Fields owned by the persistence layer; DTO merges never write them.
AUDIT_FIELDS = frozenset({"id", "created_at", "updated_at", "is_deleted"})

E = TypeVar("E", bound="BaseEntity")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops tzinfo on the way back)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class BaseEntity(BaseModel):
    """Identity, audit timestamps and the soft-delete flag.

    id is None until the store assigns one on add().
    updated_at stays None until the first successful update.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime | None = None
    is_deleted: bool = False

    @field_validator("created_at", "updated_at")
    @classmethod
    def _normalise_to_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value) if value is not None else None

    def next_update_stamp(self, now: datetime | None = None) -> datetime:
        """Return an update timestamp that never moves backwards.

        The result is >= the previous updated_at, or >= created_at when the
        entity has never been updated.
        """
        now = as_utc(now) if now is not None else utcnow()
        previous = self.updated_at or self.created_at
        return max(now, previous)

    def as_new(self: E, now: datetime | None = None) -> E:
        """Return a copy ready for insertion: fresh creation stamp, not deleted."""
        return self.model_copy(
            update={
                "id": None,
                "created_at": as_utc(now) if now is not None else utcnow(),
                "updated_at": None,
                "is_deleted": False,
            }
        )

    def touched(self: E, now: datetime | None = None) -> E:
        return self.model_copy(update={"updated_at": self.next_update_stamp(now)})

    def soft_deleted(self: E, now: datetime | None = None) -> E:
        return self.model_copy(
            update={"is_deleted": True, "updated_at": self.next_update_stamp(now)}
        )
