from commerce_services.applications.interfaces.dtos.user import UserStatsResponse
from commerce_services.applications.services.dto_mapper import UserDtoMapper
from commerce_services.domain.ports.repositories.user_repository import UserRepository


class GetUserStatisticsUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self) -> UserStatsResponse:
        report = await self.user_repository.statistics()
        return UserDtoMapper.to_stats_response(report)
