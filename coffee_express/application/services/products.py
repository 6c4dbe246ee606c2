"""Product service: the generic CRUD service bound to the product types."""

from __future__ import annotations

from coffee_express.application.dtos.products import (
    CreateProductDto,
    ProductDto,
    UpdateProductDto,
)
from coffee_express.application.mapping.mapper import Mapper
from coffee_express.application.validation.registry import ValidatorRegistry
from coffee_express.domain.models.products import Product
from coffee_express.domain.repositories.products import ProductRepository

from .base import CrudService

ProductService = CrudService[Product, ProductDto, CreateProductDto, UpdateProductDto]


def build_product_service(
    repository: ProductRepository,
    mapper: Mapper,
    validators: ValidatorRegistry | None = None,
) -> ProductService:
    """Products carry no domain rules beyond their DTO field constraints."""
    return CrudService(
        repository,
        mapper,
        entity_type=Product,
        dto_type=ProductDto,
        validators=validators,
    )
