from typing import List, Optional

from commerce_services.domain.models.product import Product
from commerce_services.domain.ports.repositories.product_repository import ProductRepository


class GetProductsUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    async def execute(self, name: Optional[str] = None) -> List[Product]:
        if name:
            return await self.product_repository.search_by_name(name)
        return await self.product_repository.scan()
