from commerce_services.domain.ports.repositories.product_repository import ProductRepository
from commerce_services.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class DeleteProductUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    async def execute(self, product_id: int) -> None:
        await self.product_repository.delete(product_id)
        logger.info(f"Product deleted: {product_id}")
