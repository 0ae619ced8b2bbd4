from typing import Any, Dict, List, Optional

from sqlalchemy import func, select

from commerce_services.domain.models.product import LOW_STOCK_THRESHOLD
from commerce_services.domain.models.product import Product as DomainProduct
from commerce_services.domain.ports.repositories.product_repository import ProductRepository
from commerce_services.domain.query.schema import PRODUCT_QUERY_SCHEMA, RuleKind
from commerce_services.domain.query.statistics import AggregateReport, NumericSummary, money
from commerce_services.infrastructure.adapters.repositories.sqlalchemy_collection import SQLAlchemyCollection
from commerce_services.infrastructure.persistence.models import Product as SQLProduct
from commerce_services.infrastructure.persistence.models import ProductTag as SQLProductTag


class SQLAlchemyProductRepository(SQLAlchemyCollection[DomainProduct, SQLProduct], ProductRepository):
    model = SQLProduct
    schema = PRODUCT_QUERY_SCHEMA
    entity_name = "Product"

    def _to_domain(self, row: SQLProduct) -> DomainProduct:
        return DomainProduct(
            id=row.id,
            name=row.name,
            description=row.description,
            price=row.price,
            stock=row.stock,
            sku=row.sku,
            category=row.category,
            tags=[tag_row.tag for tag_row in row.tag_rows],
            active=row.active,
            version=row.version,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _to_sql(self, entity: DomainProduct) -> SQLProduct:
        return SQLProduct(
            name=entity.name,
            description=entity.description,
            price=entity.price,
            stock=entity.stock,
            sku=entity.sku,
            category=entity.category,
            active=entity.active,
            tag_rows=[SQLProductTag(tag=tag, position=i) for i, tag in enumerate(entity.tags)],
        )

    def _column_values(self, entity: DomainProduct) -> Dict[str, Any]:
        return {
            "name": entity.name,
            "description": entity.description,
            "price": entity.price,
            "stock": entity.stock,
            "sku": entity.sku,
            "category": entity.category,
            "active": entity.active,
        }

    def _clause_overrides(self):
        return {RuleKind.TAG: lambda rule, value: SQLProduct.tag_rows.any(SQLProductTag.tag == value)}

    async def _after_update(self, entity_id: int, new_state: DomainProduct) -> None:
        # orphaned tag rows are deleted on flush, re-added tags become updates
        row = await self._find(entity_id)
        row.tag_rows = [SQLProductTag(tag=tag, position=i) for i, tag in enumerate(new_state.tags)]
        await self.session.flush()

    async def get_by_sku(self, sku: str) -> Optional[DomainProduct]:
        row = await self.session.scalar(self._select().where(SQLProduct.sku == sku))
        return self._to_domain(row) if row else None

    async def search_by_name(self, name: str) -> List[DomainProduct]:
        rows = await self.session.scalars(
            self._select()
            .where(func.lower(SQLProduct.name).contains(name.lower(), autoescape=True))
            .order_by(SQLProduct.id)
        )
        return [self._to_domain(row) for row in rows.all()]

    async def mark_inactive(self, product_id: int) -> DomainProduct:
        return await self._mark_inactive(product_id)

    async def distinct_categories(self) -> List[str]:
        result = await self.session.scalars(
            select(SQLProduct.category)
            .where(SQLProduct.active.is_(True), SQLProduct.category.is_not(None))
            .distinct()
            .order_by(SQLProduct.category)
        )
        return list(result.all())

    async def statistics(self) -> AggregateReport:
        active = SQLProduct.active.is_(True)
        total = await self._count()
        active_count = await self._count(active)

        aggregates = await self.session.execute(
            select(
                func.avg(SQLProduct.price),
                func.min(SQLProduct.price),
                func.max(SQLProduct.price),
                func.coalesce(func.sum(SQLProduct.stock), 0),
            ).where(active)
        )
        average, minimum, maximum, total_stock = aggregates.one()

        return AggregateReport(
            total_count=total,
            active_count=active_count,
            inactive_count=total - active_count,
            groups={"category": await self._group_counts(SQLProduct.category, active)},
            numeric=NumericSummary(average=money(average), minimum=money(minimum), maximum=money(maximum)),
            total_quantity=int(total_stock),
            out_count=await self._count(active, SQLProduct.stock == 0),
            low_count=await self._count(active, SQLProduct.stock > 0, SQLProduct.stock < LOW_STOCK_THRESHOLD),
        )
