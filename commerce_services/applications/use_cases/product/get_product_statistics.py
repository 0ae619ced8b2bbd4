from commerce_services.applications.interfaces.dtos.product import ProductStatsResponse
from commerce_services.applications.services.dto_mapper import ProductDtoMapper
from commerce_services.domain.ports.repositories.product_repository import ProductRepository
from commerce_services.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class GetProductStatisticsUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    async def execute(self) -> ProductStatsResponse:
        logger.info("Calculating product statistics")
        report = await self.product_repository.statistics()
        return ProductDtoMapper.to_stats_response(report)
