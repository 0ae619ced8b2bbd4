from typing import List, Optional

from commerce_services.domain.models.user import User
from commerce_services.domain.ports.repositories.user_repository import UserRepository


class GetUsersUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, username: Optional[str] = None) -> List[User]:
        if username:
            return await self.user_repository.search_by_username(username)
        return await self.user_repository.scan()
