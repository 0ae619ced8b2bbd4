from typing import List

from commerce_services.applications.interfaces.dtos.product import ProductSchemaV2
from commerce_services.applications.services.dto_mapper import ProductDtoMapper
from commerce_services.domain.exceptions import ConflictError
from commerce_services.domain.models.product import Product
from commerce_services.domain.ports.repositories.product_repository import ProductRepository
from commerce_services.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class BulkCreateProductsUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    async def execute(self, products_data: List[ProductSchemaV2]) -> List[Product]:
        """Create every product or none of them.

        The whole batch is checked for SKU clashes, inside the batch and
        against stored products, before anything is written.
        """
        logger.info(f"Bulk creating {len(products_data)} products")
        products = [ProductDtoMapper.to_domain(product_data) for product_data in products_data]

        seen = set()
        for product in products:
            if product.sku in seen:
                raise ConflictError(f"Duplicate SKU {product.sku} in bulk request")
            seen.add(product.sku)
            if await self.product_repository.get_by_sku(product.sku):
                raise ConflictError(f"Product with SKU {product.sku} already exists")

        created = await self.product_repository.insert_all(products)
        logger.info(f"Bulk created {len(created)} products")
        return created
