from commerce_services.domain.models.page import Page
from commerce_services.domain.models.user import User
from commerce_services.domain.ports.repositories.user_repository import UserRepository
from commerce_services.domain.query.criteria import UserFilterCriteria


class SearchUsersUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, criteria: UserFilterCriteria) -> Page[User]:
        return await self.user_repository.query(criteria)
