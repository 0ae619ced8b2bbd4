from commerce_services.applications.interfaces.dtos.order import OrderSchema
from commerce_services.applications.services.dto_mapper import OrderDtoMapper
from commerce_services.domain.models.order import Order
from commerce_services.domain.ports.repositories.order_repository import OrderRepository
from commerce_services.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateOrderUseCase:
    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def execute(self, order_data: OrderSchema) -> Order:
        order = OrderDtoMapper.to_domain(order_data).model_copy(update={"status": "PENDING"})
        created_order = await self.order_repository.insert(order)
        logger.info(f"Order {created_order.id} created for user {created_order.user_id}")
        return created_order
