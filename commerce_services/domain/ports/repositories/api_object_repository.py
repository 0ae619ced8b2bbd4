from abc import abstractmethod
from typing import List

from commerce_services.domain.models.api_object import ApiObject
from commerce_services.domain.ports.repositories.entity_collection import EntityCollection


class ApiObjectRepository(EntityCollection[ApiObject]):
    @abstractmethod
    async def search_by_name(self, name: str) -> List[ApiObject]:
        pass
