"""Field constraints shared by the write DTOs."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import BeforeValidator

from coffee_express.domain.models.enums import ProductCategory

# Letters (including accented Spanish letters) and spaces.
NAME_PATTERN = r"^[a-zA-ZáéíóúÁÉÍÓÚñÑ ]+$"

MAX_PRICE = Decimal("10000")
MAX_DESCRIPTION_LENGTH = 1000


def _normalise_category(value: object) -> object:
    if isinstance(value, str):
        return value.strip().lower()
    return value


# Accepts "Coffee", "COFFEE", " tea " etc.
CategoryInput = Annotated[ProductCategory, BeforeValidator(_normalise_category)]
