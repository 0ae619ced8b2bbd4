from commerce_services.applications.interfaces.dtos.product import ProductSchema
from commerce_services.applications.services.dto_mapper import ProductDtoMapper
from commerce_services.domain.exceptions import ConflictError
from commerce_services.domain.models.product import Product
from commerce_services.domain.ports.repositories.product_repository import ProductRepository
from commerce_services.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateProductUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    async def execute(self, product_data: ProductSchema) -> Product:
        logger.info(f"Creating product: {product_data.name}")

        product = ProductDtoMapper.to_domain(product_data)
        if product.sku and await self.product_repository.get_by_sku(product.sku):
            raise ConflictError(f"Product with SKU {product.sku} already exists")

        created_product = await self.product_repository.insert(product)

        logger.info(f"Product created with id: {created_product.id}")
        return created_product
