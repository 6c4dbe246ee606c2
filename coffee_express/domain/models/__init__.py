"""Domain model package.

All domain objects are pure Pydantic models with no ORM or infrastructure
dependencies.  Import from this package to avoid coupling application code
to individual module paths.
"""

from .base import AUDIT_FIELDS, BaseEntity, as_utc, utcnow
from .enums import ProductCategory
from .products import Product
from .users import EMAIL_UNIQUE_CONSTRAINT, User

__all__ = [
    "AUDIT_FIELDS",
    "BaseEntity",
    "as_utc",
    "utcnow",
    "ProductCategory",
    "Product",
    "EMAIL_UNIQUE_CONSTRAINT",
    "User",
]
