from commerce_services.domain.exceptions import NotFoundError
from commerce_services.domain.models.product import Product
from commerce_services.domain.ports.repositories.product_repository import ProductRepository


class GetProductBySkuUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    async def execute(self, sku: str) -> Product:
        product = await self.product_repository.get_by_sku(sku)
        if not product:
            raise NotFoundError(f"Product not found with SKU: {sku}")
        return product
