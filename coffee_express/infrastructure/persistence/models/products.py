"""Products table."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column

from coffee_express.infrastructure.database import Base

from .base import AuditMixin


class Product(AuditMixin, Base):
    __tablename__ = "products"

    name: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)  # coffee / tea / snack / dessert
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
