from commerce_services.domain.exceptions import NotFoundError
from commerce_services.domain.models.user import User
from commerce_services.domain.ports.repositories.user_repository import UserRepository


class GetUserByEmailUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, email: str) -> User:
        user = await self.user_repository.get_by_email(email)
        if not user:
            raise NotFoundError(f"User not found with email: {email}")
        return user
