from commerce_services.domain.exceptions import ValidationError
from commerce_services.domain.models.user import STATUSES, User
from commerce_services.domain.ports.repositories.user_repository import UserRepository
from commerce_services.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class UpdateUserStatusUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: int, status: str) -> User:
        if status not in STATUSES:
            raise ValidationError("Invalid user status", {"status": f"Must be one of: {', '.join(STATUSES)}"})

        existing_user = await self.user_repository.get(user_id)
        new_state = existing_user.model_copy(update={"status": status})
        updated_user = await self.user_repository.update_if_version_matches(
            user_id, new_state, existing_user.version
        )

        logger.info(f"User {user_id} status changed from {existing_user.status} to {status}")
        return updated_user
