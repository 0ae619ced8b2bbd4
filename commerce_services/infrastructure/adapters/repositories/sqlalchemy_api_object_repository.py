from typing import Any, Dict, List

from sqlalchemy import func

from commerce_services.domain.models.api_object import ApiObject as DomainApiObject
from commerce_services.domain.ports.repositories.api_object_repository import ApiObjectRepository
from commerce_services.domain.query.schema import API_OBJECT_QUERY_SCHEMA
from commerce_services.infrastructure.adapters.repositories.sqlalchemy_collection import SQLAlchemyCollection
from commerce_services.infrastructure.persistence.models import ApiObject as SQLApiObject


class SQLAlchemyApiObjectRepository(SQLAlchemyCollection[DomainApiObject, SQLApiObject], ApiObjectRepository):
    model = SQLApiObject
    schema = API_OBJECT_QUERY_SCHEMA
    entity_name = "ApiObject"

    def _to_domain(self, row: SQLApiObject) -> DomainApiObject:
        return DomainApiObject(
            id=row.id,
            name=row.name,
            data=row.data,
            version=row.version,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _to_sql(self, entity: DomainApiObject) -> SQLApiObject:
        return SQLApiObject(name=entity.name, data=entity.data)

    def _column_values(self, entity: DomainApiObject) -> Dict[str, Any]:
        return {"name": entity.name, "data": entity.data}

    async def search_by_name(self, name: str) -> List[DomainApiObject]:
        rows = await self.session.scalars(
            self._select()
            .where(func.lower(SQLApiObject.name).contains(name.lower(), autoescape=True))
            .order_by(SQLApiObject.id)
        )
        return [self._to_domain(row) for row in rows.all()]
