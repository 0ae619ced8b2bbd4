from typing import List, Optional

from commerce_services.domain.models.api_object import ApiObject
from commerce_services.domain.ports.repositories.api_object_repository import ApiObjectRepository


class GetApiObjectsUseCase:
    def __init__(self, api_object_repository: ApiObjectRepository):
        self.api_object_repository = api_object_repository

    async def execute(self, name: Optional[str] = None) -> List[ApiObject]:
        if name is not None:
            return await self.api_object_repository.search_by_name(name)
        return await self.api_object_repository.scan()
