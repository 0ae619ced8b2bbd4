from commerce_services.applications.interfaces.dtos.api_object import ApiObjectSchema
from commerce_services.applications.services.dto_mapper import ApiObjectDtoMapper
from commerce_services.domain.models.api_object import ApiObject
from commerce_services.domain.ports.repositories.api_object_repository import ApiObjectRepository


class UpdateApiObjectUseCase:
    def __init__(self, api_object_repository: ApiObjectRepository):
        self.api_object_repository = api_object_repository

    async def execute(self, object_id: int, object_data: ApiObjectSchema) -> ApiObject:
        existing = await self.api_object_repository.get(object_id)
        new_state = ApiObjectDtoMapper.apply(existing, object_data)
        return await self.api_object_repository.update_if_version_matches(object_id, new_state, existing.version)
