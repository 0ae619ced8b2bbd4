from typing import Optional

from commerce_services.applications.interfaces.dtos.user import UserSchema
from commerce_services.applications.services.dto_mapper import UserDtoMapper
from commerce_services.applications.use_cases.user.create_user import ensure_unique
from commerce_services.domain.models.user import User
from commerce_services.domain.ports.repositories.user_repository import UserRepository


class UpdateUserUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: int, user_data: UserSchema, expected_version: Optional[int] = None) -> User:
        existing_user = await self.user_repository.get(user_id)

        new_state = UserDtoMapper.apply(existing_user, user_data)
        await ensure_unique(self.user_repository, new_state, user_id)

        version = existing_user.version if expected_version is None else expected_version
        return await self.user_repository.update_if_version_matches(user_id, new_state, version)
