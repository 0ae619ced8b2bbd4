from commerce_services.applications.interfaces.dtos.api_object import ApiObjectSchema
from commerce_services.applications.services.dto_mapper import ApiObjectDtoMapper
from commerce_services.domain.models.api_object import ApiObject
from commerce_services.domain.ports.repositories.api_object_repository import ApiObjectRepository


class CreateApiObjectUseCase:
    def __init__(self, api_object_repository: ApiObjectRepository):
        self.api_object_repository = api_object_repository

    async def execute(self, object_data: ApiObjectSchema) -> ApiObject:
        return await self.api_object_repository.insert(ApiObjectDtoMapper.to_domain(object_data))
