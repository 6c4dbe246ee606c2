"""Users table."""

from __future__ import annotations

from sqlalchemy import Boolean, Index, Text, func, text
from sqlalchemy.orm import Mapped, mapped_column

from coffee_express.domain.models.users import EMAIL_UNIQUE_CONSTRAINT
from coffee_express.infrastructure.database import Base

from .base import AuditMixin


class User(AuditMixin, Base):
    """A registered user.

    Email uniqueness is enforced case-insensitively, and only among live
    rows, by the partial index below; the service-level duplicate check is
    an early rejection in front of it.
    """

    __tablename__ = "users"

    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


Index(
    EMAIL_UNIQUE_CONSTRAINT,
    func.lower(User.email),
    unique=True,
    postgresql_where=text("is_deleted = false"),
    sqlite_where=text("is_deleted = 0"),
)
Index("ix_users_created_at", User.created_at)
