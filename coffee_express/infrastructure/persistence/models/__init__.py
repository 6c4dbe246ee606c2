"""ORM model registry — imports every table module so each mapper class is
registered with Base.metadata before Alembic or SQLAlchemy runs.
"""

from coffee_express.infrastructure.persistence.models.base import AuditMixin
from coffee_express.infrastructure.persistence.models.products import Product
from coffee_express.infrastructure.persistence.models.users import User

__all__ = [
    "AuditMixin",
    "Product",
    "User",
]
