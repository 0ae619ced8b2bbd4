from commerce_services.domain.models.api_object import ApiObject
from commerce_services.domain.ports.repositories.api_object_repository import ApiObjectRepository


class GetApiObjectUseCase:
    def __init__(self, api_object_repository: ApiObjectRepository):
        self.api_object_repository = api_object_repository

    async def execute(self, object_id: int) -> ApiObject:
        return await self.api_object_repository.get(object_id)
