from typing import List

from commerce_services.domain.models.order import Order
from commerce_services.domain.ports.repositories.order_repository import OrderRepository
from commerce_services.domain.query.schema import ORDER_QUERY_SCHEMA
from commerce_services.infrastructure.adapters.repositories.in_memory_collection import InMemoryEntityCollection


class InMemoryOrderRepository(InMemoryEntityCollection[Order], OrderRepository):
    schema = ORDER_QUERY_SCHEMA
    entity_name = "Order"

    async def get_by_user_id(self, user_id: int) -> List[Order]:
        return [order for order in self._snapshot() if order.user_id == user_id]

    async def get_by_status(self, status: str) -> List[Order]:
        return [order for order in self._snapshot() if order.status == status]
