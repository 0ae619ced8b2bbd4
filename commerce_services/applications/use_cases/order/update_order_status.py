from commerce_services.domain.exceptions import ValidationError
from commerce_services.domain.models.order import Order, normalize_status
from commerce_services.domain.ports.repositories.order_repository import OrderRepository
from commerce_services.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class UpdateOrderStatusUseCase:
    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def execute(self, order_id: int, status: str) -> Order:
        status = normalize_status(status)
        if not status:
            raise ValidationError("Invalid order status", {"status": "Status is required"})

        existing_order = await self.order_repository.get(order_id)
        new_state = existing_order.model_copy(update={"status": status})
        updated_order = await self.order_repository.update_if_version_matches(
            order_id, new_state, existing_order.version
        )
        logger.info(f"Order {order_id} moved from {existing_order.status} to {status}")
        return updated_order
