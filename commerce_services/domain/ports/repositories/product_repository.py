from abc import abstractmethod
from typing import List, Optional

from commerce_services.domain.models.product import Product
from commerce_services.domain.ports.repositories.entity_collection import EntityCollection
from commerce_services.domain.query.statistics import AggregateReport


class ProductRepository(EntityCollection[Product]):
    @abstractmethod
    async def get_by_sku(self, sku: str) -> Optional[Product]:
        pass

    @abstractmethod
    async def search_by_name(self, name: str) -> List[Product]:
        pass

    @abstractmethod
    async def mark_inactive(self, product_id: int) -> Product:
        pass

    @abstractmethod
    async def distinct_categories(self) -> List[str]:
        pass

    @abstractmethod
    async def statistics(self) -> AggregateReport:
        pass
