from abc import abstractmethod
from typing import List

from commerce_services.domain.models.order import Order
from commerce_services.domain.ports.repositories.entity_collection import EntityCollection


class OrderRepository(EntityCollection[Order]):
    @abstractmethod
    async def get_by_user_id(self, user_id: int) -> List[Order]:
        pass

    @abstractmethod
    async def get_by_status(self, status: str) -> List[Order]:
        pass
