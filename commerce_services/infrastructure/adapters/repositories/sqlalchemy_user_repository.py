from typing import Any, Dict, List, Optional

from sqlalchemy import func, select

from commerce_services.domain.models.user import User as DomainUser
from commerce_services.domain.ports.repositories.user_repository import UserRepository
from commerce_services.domain.query.schema import USER_QUERY_SCHEMA
from commerce_services.domain.query.statistics import AggregateReport
from commerce_services.infrastructure.adapters.repositories.sqlalchemy_collection import SQLAlchemyCollection
from commerce_services.infrastructure.persistence.models import User as SQLUser


class SQLAlchemyUserRepository(SQLAlchemyCollection[DomainUser, SQLUser], UserRepository):
    model = SQLUser
    schema = USER_QUERY_SCHEMA
    entity_name = "User"

    def _to_domain(self, row: SQLUser) -> DomainUser:
        return DomainUser(
            id=row.id,
            username=row.username,
            email=row.email,
            first_name=row.first_name,
            last_name=row.last_name,
            phone=row.phone,
            role=row.role,
            status=row.status,
            active=row.active,
            version=row.version,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    def _to_sql(self, entity: DomainUser) -> SQLUser:
        return SQLUser(
            username=entity.username,
            email=entity.email,
            first_name=entity.first_name,
            last_name=entity.last_name,
            phone=entity.phone,
            role=entity.role,
            status=entity.status,
            active=entity.active,
        )

    def _column_values(self, entity: DomainUser) -> Dict[str, Any]:
        return {
            "username": entity.username,
            "email": entity.email,
            "first_name": entity.first_name,
            "last_name": entity.last_name,
            "phone": entity.phone,
            "role": entity.role,
            "status": entity.status,
            "active": entity.active,
        }

    async def get_by_email(self, email: str) -> Optional[DomainUser]:
        row = await self.session.scalar(self._select().where(SQLUser.email == email))
        return self._to_domain(row) if row else None

    async def get_by_username(self, username: str) -> Optional[DomainUser]:
        row = await self.session.scalar(self._select().where(SQLUser.username == username))
        return self._to_domain(row) if row else None

    async def search_by_username(self, username: str) -> List[DomainUser]:
        rows = await self.session.scalars(
            self._select()
            .where(func.lower(SQLUser.username).contains(username.lower(), autoescape=True))
            .order_by(SQLUser.id)
        )
        return [self._to_domain(row) for row in rows.all()]

    async def mark_inactive(self, user_id: int) -> DomainUser:
        return await self._mark_inactive(user_id)

    async def distinct_roles(self) -> List[str]:
        result = await self.session.scalars(
            select(SQLUser.role).where(SQLUser.role.is_not(None)).distinct().order_by(SQLUser.role)
        )
        return list(result.all())

    async def statistics(self) -> AggregateReport:
        active = SQLUser.active.is_(True)
        total = await self._count()
        active_count = await self._count(active)
        return AggregateReport(
            total_count=total,
            active_count=active_count,
            inactive_count=total - active_count,
            groups={
                "role": await self._group_counts(SQLUser.role, active),
                "status": await self._group_counts(SQLUser.status, active),
            },
        )
