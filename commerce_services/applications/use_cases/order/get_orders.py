from typing import List

from commerce_services.domain.models.order import Order, normalize_status
from commerce_services.domain.ports.repositories.order_repository import OrderRepository


class GetOrdersUseCase:
    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def execute(self) -> List[Order]:
        return await self.order_repository.scan()


class GetOrdersByUserUseCase:
    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def execute(self, user_id: int) -> List[Order]:
        return await self.order_repository.get_by_user_id(user_id)


class GetOrdersByStatusUseCase:
    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def execute(self, status: str) -> List[Order]:
        return await self.order_repository.get_by_status(normalize_status(status))
