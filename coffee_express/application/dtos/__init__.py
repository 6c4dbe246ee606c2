"""Transport DTOs, one read/create/update triad per entity."""

from .products import CreateProductDto, ProductDto, UpdateProductDto
from .users import CreateUserDto, UpdateUserDto, UserDto

__all__ = [
    "CreateProductDto",
    "ProductDto",
    "UpdateProductDto",
    "CreateUserDto",
    "UpdateUserDto",
    "UserDto",
]
