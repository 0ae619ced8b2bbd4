from commerce_services.domain.models.page import Page
from commerce_services.domain.models.product import Product
from commerce_services.domain.ports.repositories.product_repository import ProductRepository
from commerce_services.domain.query.criteria import ProductFilterCriteria
from commerce_services.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class SearchProductsUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    async def execute(self, criteria: ProductFilterCriteria) -> Page[Product]:
        logger.info(f"Searching products with filter: {criteria}")
        return await self.product_repository.query(criteria)
