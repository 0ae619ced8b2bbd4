from commerce_services.domain.models.order import Order
from commerce_services.domain.ports.repositories.order_repository import OrderRepository


class GetOrderUseCase:
    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def execute(self, order_id: int) -> Order:
        return await self.order_repository.get(order_id)
