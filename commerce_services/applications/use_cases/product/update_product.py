from typing import Optional

from commerce_services.applications.interfaces.dtos.product import ProductSchema
from commerce_services.applications.services.dto_mapper import ProductDtoMapper
from commerce_services.domain.exceptions import ConflictError
from commerce_services.domain.models.product import Product
from commerce_services.domain.ports.repositories.product_repository import ProductRepository
from commerce_services.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class UpdateProductUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    async def execute(
        self, product_id: int, product_data: ProductSchema, expected_version: Optional[int] = None
    ) -> Product:
        """Apply a full update to a product.

        Without an ``expected_version`` the version read here is used, so the
        write still fails if another writer commits in between.
        """
        logger.info(f"Updating product id: {product_id}")
        existing_product = await self.product_repository.get(product_id)

        new_state = ProductDtoMapper.apply(existing_product, product_data)
        if new_state.sku and new_state.sku != existing_product.sku:
            sku_owner = await self.product_repository.get_by_sku(new_state.sku)
            if sku_owner and sku_owner.id != product_id:
                raise ConflictError(f"Product with SKU {new_state.sku} already exists")

        version = existing_product.version if expected_version is None else expected_version
        return await self.product_repository.update_if_version_matches(product_id, new_state, version)
