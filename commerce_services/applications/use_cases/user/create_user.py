from typing import Optional

from commerce_services.applications.interfaces.dtos.user import UserSchema
from commerce_services.applications.services.dto_mapper import UserDtoMapper
from commerce_services.domain.exceptions import ConflictError
from commerce_services.domain.models.user import User
from commerce_services.domain.ports.repositories.user_repository import UserRepository
from commerce_services.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


async def ensure_unique(user_repository: UserRepository, user: User, user_id: Optional[int] = None) -> None:
    username_owner = await user_repository.get_by_username(user.username)
    if username_owner and username_owner.id != user_id:
        raise ConflictError(f"Username '{user.username}' is already taken")

    email_owner = await user_repository.get_by_email(user.email)
    if email_owner and email_owner.id != user_id:
        raise ConflictError(f"Email '{user.email}' is already registered")


class CreateUserUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, user_data: UserSchema) -> User:
        logger.info(f"Creating user: {user_data.username}")

        user = UserDtoMapper.to_domain(user_data)
        await ensure_unique(self.user_repository, user)
        created_user = await self.user_repository.insert(user)

        logger.info(f"User created successfully: {created_user.username}")
        return created_user
