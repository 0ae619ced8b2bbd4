from commerce_services.domain.models.user import User
from commerce_services.domain.ports.repositories.user_repository import UserRepository
from commerce_services.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class DeactivateUserUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: int) -> User:
        user = await self.user_repository.mark_inactive(user_id)
        logger.info(f"User soft deleted: {user_id}")
        return user
