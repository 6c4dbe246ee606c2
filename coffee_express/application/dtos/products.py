"""Product DTO triad."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from coffee_express.domain.models.enums import ProductCategory

from .fields import MAX_DESCRIPTION_LENGTH, MAX_PRICE, NAME_PATTERN, CategoryInput


class ProductDto(BaseModel):
    """Read projection of a product.

    product_name is the entity's name; created_date is created_at rendered
    as "YYYY-MM-DD HH:MM:SS" for display.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    product_name: str
    price: Decimal
    category: ProductCategory
    description: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    created_date: str


class CreateProductDto(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=2, max_length=200, pattern=NAME_PATTERN)
    price: Decimal = Field(..., gt=0, le=MAX_PRICE, decimal_places=2)
    category: CategoryInput
    description: str = Field("", max_length=MAX_DESCRIPTION_LENGTH)


class UpdateProductDto(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=2, max_length=200, pattern=NAME_PATTERN)
    price: Optional[Decimal] = Field(None, gt=0, le=MAX_PRICE, decimal_places=2)
    category: Optional[CategoryInput] = None
    description: Optional[str] = Field(None, max_length=MAX_DESCRIPTION_LENGTH)
