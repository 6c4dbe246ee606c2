"""Application mapping profile: every entity ↔ DTO pair the services use."""

from __future__ import annotations

from functools import lru_cache

from coffee_express.application.dtos.products import (
    CreateProductDto,
    ProductDto,
    UpdateProductDto,
)
from coffee_express.application.dtos.users import CreateUserDto, UpdateUserDto, UserDto
from coffee_express.domain.models.base import AUDIT_FIELDS
from coffee_express.domain.models.products import Product
from coffee_express.domain.models.users import User

from .mapper import Mapper

DISPLAY_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_mapper() -> Mapper:
    mapper = Mapper()

    # Users
    mapper.register(User, UserDto)
    mapper.register(CreateUserDto, User, ignore=AUDIT_FIELDS)
    mapper.register_merge(UpdateUserDto, User, ignore=AUDIT_FIELDS)

    # Products
    mapper.register(
        Product,
        ProductDto,
        overrides={
            "product_name": lambda p: p.name,
            "created_date": lambda p: p.created_at.strftime(DISPLAY_DATE_FORMAT),
        },
    )
    mapper.register(CreateProductDto, Product, ignore=AUDIT_FIELDS)
    mapper.register_merge(UpdateProductDto, Product, ignore=AUDIT_FIELDS)

    return mapper


@lru_cache(maxsize=1)
def default_mapper() -> Mapper:
    """Process-wide mapper; registrations are read-only after construction."""
    return build_mapper()
