from commerce_services.domain.models.order import Order
from commerce_services.domain.models.page import Page
from commerce_services.domain.ports.repositories.order_repository import OrderRepository
from commerce_services.domain.query.criteria import OrderFilterCriteria


class ListOrdersPageUseCase:
    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def execute(self, criteria: OrderFilterCriteria) -> Page[Order]:
        return await self.order_repository.query(criteria)
