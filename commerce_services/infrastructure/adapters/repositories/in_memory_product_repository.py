from typing import List, Optional

from commerce_services.domain.models.product import LOW_STOCK_THRESHOLD, Product
from commerce_services.domain.ports.repositories.product_repository import ProductRepository
from commerce_services.domain.query.predicates import contains_ignore_case
from commerce_services.domain.query.schema import PRODUCT_QUERY_SCHEMA
from commerce_services.domain.query.statistics import AggregateReport, summarize
from commerce_services.infrastructure.adapters.repositories.in_memory_collection import InMemoryEntityCollection


class InMemoryProductRepository(InMemoryEntityCollection[Product], ProductRepository):
    schema = PRODUCT_QUERY_SCHEMA
    entity_name = "Product"
    unique_fields = ("sku",)

    async def get_by_sku(self, sku: str) -> Optional[Product]:
        return next((product for product in self._snapshot() if product.sku == sku), None)

    async def search_by_name(self, name: str) -> List[Product]:
        matches = contains_ignore_case("name", name)
        return [product for product in self._snapshot() if matches(product)]

    async def mark_inactive(self, product_id: int) -> Product:
        return await self._mark_inactive(product_id)

    async def distinct_categories(self) -> List[str]:
        return sorted({p.category for p in self._snapshot() if p.active and p.category is not None})

    async def statistics(self) -> AggregateReport:
        return summarize(
            self._snapshot(),
            group_by=("category",),
            numeric_field="price",
            quantity_field="stock",
            low_threshold=LOW_STOCK_THRESHOLD,
        )
