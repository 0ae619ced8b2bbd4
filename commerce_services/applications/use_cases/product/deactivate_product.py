from commerce_services.domain.models.product import Product
from commerce_services.domain.ports.repositories.product_repository import ProductRepository
from commerce_services.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class DeactivateProductUseCase:
    """Soft delete: the product stays stored with ``active`` set to false."""

    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    async def execute(self, product_id: int) -> Product:
        product = await self.product_repository.mark_inactive(product_id)
        logger.info(f"Product soft deleted: {product_id}")
        return product
