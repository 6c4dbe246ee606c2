"""Validators for every create/update DTO, and the default registry."""

from __future__ import annotations

from functools import lru_cache

from coffee_express.application.dtos.products import CreateProductDto, UpdateProductDto
from coffee_express.application.dtos.users import CreateUserDto, UpdateUserDto

from .registry import ValidatorRegistry

WRITE_DTOS = (CreateUserDto, UpdateUserDto, CreateProductDto, UpdateProductDto)


def build_validators() -> ValidatorRegistry:
    registry = ValidatorRegistry()
    for dto_type in WRITE_DTOS:
        registry.register(dto_type)
    return registry


@lru_cache(maxsize=1)
def default_validators() -> ValidatorRegistry:
    return build_validators()
