from commerce_services.domain.models.user import User
from commerce_services.domain.ports.repositories.user_repository import UserRepository


class GetUserUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: int) -> User:
        return await self.user_repository.get(user_id)
