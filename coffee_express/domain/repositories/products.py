"""Product repository interface."""

from __future__ import annotations

from coffee_express.domain.models.products import Product

from .base import Repository


class ProductRepository(Repository[Product]):
    """Products need nothing beyond the generic soft-delete CRUD contract."""
