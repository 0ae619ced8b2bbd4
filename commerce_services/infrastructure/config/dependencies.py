from typing import Annotated, Dict

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from commerce_services.domain.ports.repositories.api_object_repository import ApiObjectRepository
from commerce_services.domain.ports.repositories.entity_collection import EntityCollection
from commerce_services.domain.ports.repositories.order_repository import OrderRepository
from commerce_services.domain.ports.repositories.product_repository import ProductRepository
from commerce_services.domain.ports.repositories.user_repository import UserRepository
from commerce_services.infrastructure.adapters.repositories.in_memory_api_object_repository import (
    InMemoryApiObjectRepository,
)
from commerce_services.infrastructure.adapters.repositories.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from commerce_services.infrastructure.adapters.repositories.in_memory_product_repository import (
    InMemoryProductRepository,
)
from commerce_services.infrastructure.adapters.repositories.in_memory_user_repository import (
    InMemoryUserRepository,
)
from commerce_services.infrastructure.adapters.repositories.sqlalchemy_api_object_repository import (
    SQLAlchemyApiObjectRepository,
)
from commerce_services.infrastructure.adapters.repositories.sqlalchemy_order_repository import (
    SQLAlchemyOrderRepository,
)
from commerce_services.infrastructure.adapters.repositories.sqlalchemy_product_repository import (
    SQLAlchemyProductRepository,
)
from commerce_services.infrastructure.adapters.repositories.sqlalchemy_user_repository import (
    SQLAlchemyUserRepository,
)
from commerce_services.infrastructure.config.settings import Settings
from commerce_services.infrastructure.persistence.database import get_session


class _MemoryStore:
    repositories: Dict[type, EntityCollection] = {}


def _memory_repository(repository_class: type) -> EntityCollection:
    # one collection per entity type for the life of the process
    if repository_class not in _MemoryStore.repositories:
        _MemoryStore.repositories[repository_class] = repository_class()
    return _MemoryStore.repositories[repository_class]


def reset_memory_store() -> None:
    _MemoryStore.repositories.clear()


def get_settings() -> Settings:
    return Settings()


SettingsDep = Annotated[Settings, Depends(get_settings)]
SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_product_repository(settings: SettingsDep, session: SessionDep) -> ProductRepository:
    if settings.STORAGE_BACKEND == "memory":
        return _memory_repository(InMemoryProductRepository)
    return SQLAlchemyProductRepository(session)


def get_user_repository(settings: SettingsDep, session: SessionDep) -> UserRepository:
    if settings.STORAGE_BACKEND == "memory":
        return _memory_repository(InMemoryUserRepository)
    return SQLAlchemyUserRepository(session)


def get_order_repository(settings: SettingsDep, session: SessionDep) -> OrderRepository:
    if settings.STORAGE_BACKEND == "memory":
        return _memory_repository(InMemoryOrderRepository)
    return SQLAlchemyOrderRepository(session)


def get_api_object_repository(settings: SettingsDep, session: SessionDep) -> ApiObjectRepository:
    if settings.STORAGE_BACKEND == "memory":
        return _memory_repository(InMemoryApiObjectRepository)
    return SQLAlchemyApiObjectRepository(session)
