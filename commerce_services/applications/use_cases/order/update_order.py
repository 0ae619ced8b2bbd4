from commerce_services.applications.interfaces.dtos.order import OrderSchema
from commerce_services.applications.services.dto_mapper import OrderDtoMapper
from commerce_services.domain.models.order import Order
from commerce_services.domain.ports.repositories.order_repository import OrderRepository


class UpdateOrderUseCase:
    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def execute(self, order_id: int, order_data: OrderSchema) -> Order:
        existing_order = await self.order_repository.get(order_id)
        new_state = OrderDtoMapper.apply(existing_order, order_data)
        return await self.order_repository.update_if_version_matches(order_id, new_state, existing_order.version)
