"""Service wiring: every application service bound to one AsyncSession."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from coffee_express.application.mapping.profile import default_mapper
from coffee_express.application.services.products import ProductService, build_product_service
from coffee_express.application.services.users import UserService
from coffee_express.application.validation.validators import default_validators
from coffee_express.infrastructure.persistence.repositories import get_repositories


@dataclass
class Services:
    users: UserService
    products: ProductService


def get_services(session: AsyncSession) -> Services:
    """Construct all services for a request.

        async for session in get_session():
            services = get_services(session)
            dto = await services.users.create(CreateUserDto(...))
    """
    repos = get_repositories(session)
    mapper = default_mapper()
    validators = default_validators()
    return Services(
        users=UserService(repos.users, mapper, validators),
        products=build_product_service(repos.products, mapper, validators),
    )
