"""User domain model.

is_active is a business status flag and is independent of soft delete:
a deactivated user is still readable through the generic contract, a
soft-deleted one is not.
"""

from __future__ import annotations

from .base import BaseEntity

# Store-level guard for email uniqueness among live users.
EMAIL_UNIQUE_CONSTRAINT = "uq_users_email_live"


class User(BaseEntity):
    first_name: str
    last_name: str
    email: str  # natural key, unique case-insensitively among live users
    is_active: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def deactivated(self) -> User:
        return self.model_copy(update={"is_active": False})
