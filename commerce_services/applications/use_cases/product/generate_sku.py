import random
import time

from commerce_services.applications.interfaces.dtos.product import GeneratedSku
from commerce_services.domain.exceptions import ConflictError
from commerce_services.domain.ports.repositories.product_repository import ProductRepository

MAX_ATTEMPTS = 20


class GenerateSkuUseCase:
    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    @staticmethod
    def random_sku() -> str:
        return f"PRD-{int(time.time() * 1000) % 100000:05d}-{random.randint(1000, 1999):04d}"

    async def execute(self) -> GeneratedSku:
        for _ in range(MAX_ATTEMPTS):
            sku = self.random_sku()
            if not await self.product_repository.get_by_sku(sku):
                return GeneratedSku(sku=sku)
        raise ConflictError(f"Could not generate an unused SKU after {MAX_ATTEMPTS} attempts")
