from typing import List

from commerce_services.applications.interfaces.dtos.user import UserSchemaV2
from commerce_services.applications.services.dto_mapper import UserDtoMapper
from commerce_services.applications.use_cases.user.create_user import ensure_unique
from commerce_services.domain.exceptions import ConflictError
from commerce_services.domain.models.user import User
from commerce_services.domain.ports.repositories.user_repository import UserRepository
from commerce_services.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class BulkCreateUsersUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, users_data: List[UserSchemaV2]) -> List[User]:
        users = [UserDtoMapper.to_domain(user_data) for user_data in users_data]

        usernames, emails = set(), set()
        for user in users:
            if user.username in usernames or user.email in emails:
                raise ConflictError(f"Duplicate username or email for '{user.username}' in bulk request")
            usernames.add(user.username)
            emails.add(user.email)
            await ensure_unique(self.user_repository, user)

        created = await self.user_repository.insert_all(users)
        logger.info(f"Bulk created {len(created)} users")
        return created
