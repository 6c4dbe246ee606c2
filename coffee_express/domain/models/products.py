"""Product (menu item) domain model."""

from __future__ import annotations

from decimal import Decimal

from .base import BaseEntity
from .enums import ProductCategory


class Product(BaseEntity):
    """A sellable menu item.

    price is a Decimal with at most two places; range checks live on the
    write DTOs, not here, so historical rows always load.
    """

    name: str
    price: Decimal
    category: ProductCategory
    description: str = ""
