"""Application services package."""

from .base import CrudHooks, CrudService, Service
from .products import ProductService, build_product_service
from .users import UserService

__all__ = [
    "CrudHooks",
    "CrudService",
    "Service",
    "ProductService",
    "build_product_service",
    "UserService",
]
