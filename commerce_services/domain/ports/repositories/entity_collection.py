from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

from commerce_services.domain.models.page import Page
from commerce_services.domain.query.criteria import FilterCriteria

T = TypeVar("T")


class EntityCollection(ABC, Generic[T]):
    @abstractmethod
    async def insert(self, entity: T) -> T:
        pass

    @abstractmethod
    async def insert_all(self, entities: List[T]) -> List[T]:
        pass

    @abstractmethod
    async def get(self, entity_id: int) -> T:
        pass

    @abstractmethod
    async def update_if_version_matches(self, entity_id: int, new_state: T, expected_version: int) -> T:
        pass

    @abstractmethod
    async def delete(self, entity_id: int) -> None:
        pass

    @abstractmethod
    async def scan(self) -> List[T]:
        pass

    @abstractmethod
    async def query(self, criteria: FilterCriteria) -> Page[T]:
        pass
