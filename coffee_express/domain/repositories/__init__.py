"""Domain repository interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in coffee_express/infrastructure/persistence/
and are wired at the application boundary via get_repositories().
"""

from .base import Repository
from .products import ProductRepository
from .users import UserRepository

__all__ = [
    "Repository",
    "ProductRepository",
    "UserRepository",
]
