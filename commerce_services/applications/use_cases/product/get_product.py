from commerce_services.domain.models.product import Product
from commerce_services.domain.ports.repositories.product_repository import ProductRepository


class GetProductUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    async def execute(self, product_id: int) -> Product:
        return await self.product_repository.get(product_id)
