from typing import Any, Dict, List

from commerce_services.domain.models.order import Order as DomainOrder
from commerce_services.domain.ports.repositories.order_repository import OrderRepository
from commerce_services.domain.query.schema import ORDER_QUERY_SCHEMA
from commerce_services.infrastructure.adapters.repositories.sqlalchemy_collection import SQLAlchemyCollection
from commerce_services.infrastructure.persistence.models import Order as SQLOrder


class SQLAlchemyOrderRepository(SQLAlchemyCollection[DomainOrder, SQLOrder], OrderRepository):
    model = SQLOrder
    schema = ORDER_QUERY_SCHEMA
    entity_name = "Order"

    def _to_domain(self, row: SQLOrder) -> DomainOrder:
        return DomainOrder(
            id=row.id,
            user_id=row.user_id,
            product_id=row.product_id,
            quantity=row.quantity,
            total_price=row.total_price,
            shipping_address=row.shipping_address,
            status=row.status,
            notes=row.notes,
            version=row.version,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _to_sql(self, entity: DomainOrder) -> SQLOrder:
        return SQLOrder(
            user_id=entity.user_id,
            product_id=entity.product_id,
            quantity=entity.quantity,
            total_price=entity.total_price,
            shipping_address=entity.shipping_address,
            status=entity.status,
            notes=entity.notes,
        )

    def _column_values(self, entity: DomainOrder) -> Dict[str, Any]:
        return {
            "user_id": entity.user_id,
            "product_id": entity.product_id,
            "quantity": entity.quantity,
            "total_price": entity.total_price,
            "shipping_address": entity.shipping_address,
            "status": entity.status,
            "notes": entity.notes,
        }

    async def get_by_user_id(self, user_id: int) -> List[DomainOrder]:
        rows = await self.session.scalars(
            self._select().where(SQLOrder.user_id == user_id).order_by(SQLOrder.id)
        )
        return [self._to_domain(row) for row in rows.all()]

    async def get_by_status(self, status: str) -> List[DomainOrder]:
        rows = await self.session.scalars(self._select().where(SQLOrder.status == status).order_by(SQLOrder.id))
        return [self._to_domain(row) for row in rows.all()]
