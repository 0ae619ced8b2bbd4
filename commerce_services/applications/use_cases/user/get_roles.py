from typing import List

from commerce_services.domain.ports.repositories.user_repository import UserRepository


class GetRolesUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self) -> List[str]:
        return await self.user_repository.distinct_roles()
