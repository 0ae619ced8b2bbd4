from commerce_services.domain.ports.repositories.api_object_repository import ApiObjectRepository


class DeleteApiObjectUseCase:
    def __init__(self, api_object_repository: ApiObjectRepository):
        self.api_object_repository = api_object_repository

    async def execute(self, object_id: int) -> None:
        await self.api_object_repository.delete(object_id)
