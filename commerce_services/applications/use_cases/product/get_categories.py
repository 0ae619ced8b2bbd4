from typing import List

from commerce_services.domain.ports.repositories.product_repository import ProductRepository


class GetCategoriesUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    async def execute(self) -> List[str]:
        return await self.product_repository.distinct_categories()
