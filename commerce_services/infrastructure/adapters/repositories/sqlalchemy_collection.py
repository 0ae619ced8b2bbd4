from abc import abstractmethod
from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from commerce_services.domain.exceptions import ConflictError, NotFoundError, RepositoryError
from commerce_services.domain.models.page import Page
from commerce_services.domain.ports.repositories.entity_collection import EntityCollection
from commerce_services.domain.query.criteria import FilterCriteria
from commerce_services.domain.query.schema import QuerySchema, RuleKind
from commerce_services.infrastructure.persistence.query_translator import (
    ClauseBuilder,
    order_by_clauses,
    where_clauses,
)

D = TypeVar("D")
M = TypeVar("M")


class SQLAlchemyCollection(EntityCollection[D], Generic[D, M]):
    """Shared CRUD, compare-and-swap and query push-down for one mapped table."""

    model: Type[M]
    schema: QuerySchema
    entity_name: str = "Entity"

    def __init__(self, session: AsyncSession):
        self.session = session

    @abstractmethod
    def _to_domain(self, row: M) -> D:
        pass

    @abstractmethod
    def _to_sql(self, entity: D) -> M:
        pass

    @abstractmethod
    def _column_values(self, entity: D) -> Dict[str, Any]:
        """Columns a full update is allowed to overwrite."""

    def _clause_overrides(self) -> Dict[RuleKind, ClauseBuilder]:
        return {}

    async def _after_update(self, entity_id: int, new_state: D) -> None:
        pass

    def _select(self):
        return select(self.model).execution_options(populate_existing=True)

    async def _find(self, entity_id: int) -> Optional[M]:
        return await self.session.scalar(self._select().where(self.model.id == entity_id))

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError(f"{self.entity_name} violates a uniqueness constraint") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError(f"Failed to persist {self.entity_name}") from e

    async def get(self, entity_id: int) -> D:
        row = await self._find(entity_id)
        if row is None:
            raise NotFoundError(f"{self.entity_name} not found with id: {entity_id}")
        return self._to_domain(row)

    async def insert(self, entity: D) -> D:
        row = self._to_sql(entity)
        self.session.add(row)
        await self._commit()
        return self._to_domain(row)

    async def insert_all(self, entities: List[D]) -> List[D]:
        rows = [self._to_sql(entity) for entity in entities]
        self.session.add_all(rows)
        await self._commit()
        return [self._to_domain(row) for row in rows]

    async def _compare_and_swap(self, entity_id: int, expected_version: int, values: Dict[str, Any]) -> None:
        values = dict(values, version=self.model.version + 1, updated_at=datetime.now())
        statement = (
            update(self.model)
            .where(self.model.id == entity_id, self.model.version == expected_version)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(statement)
        if result.rowcount == 0:
            await self.session.rollback()
            if await self._find(entity_id) is None:
                raise NotFoundError(f"{self.entity_name} not found with id: {entity_id}")
            raise ConflictError(
                f"{self.entity_name} {entity_id} was modified concurrently (expected version {expected_version})"
            )

    async def update_if_version_matches(self, entity_id: int, new_state: D, expected_version: int) -> D:
        try:
            await self._compare_and_swap(entity_id, expected_version, self._column_values(new_state))
            await self._after_update(entity_id, new_state)
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError(f"{self.entity_name} violates a uniqueness constraint") from e
        await self._commit()
        return await self.get(entity_id)

    async def _mark_inactive(self, entity_id: int) -> D:
        current = await self.get(entity_id)
        await self._compare_and_swap(entity_id, current.version, {"active": False})
        await self._commit()
        return await self.get(entity_id)

    async def delete(self, entity_id: int) -> None:
        row = await self._find(entity_id)
        if row is None:
            raise NotFoundError(f"{self.entity_name} not found with id: {entity_id}")
        await self.session.delete(row)
        await self._commit()

    async def scan(self) -> List[D]:
        rows = await self.session.scalars(self._select().order_by(self.model.id))
        return [self._to_domain(row) for row in rows.all()]

    async def query(self, criteria: FilterCriteria) -> Page[D]:
        sort_field = self.schema.validate(criteria)
        clauses = where_clauses(self.schema, criteria, self.model, self._clause_overrides())

        total = await self.session.scalar(select(func.count()).select_from(self.model).where(*clauses))
        rows = await self.session.scalars(
            self._select()
            .where(*clauses)
            .order_by(*order_by_clauses(sort_field, criteria.sort_direction, self.model))
            .offset(criteria.page * criteria.size)
            .limit(criteria.size)
        )
        return Page(
            content=[self._to_domain(row) for row in rows.all()],
            page=criteria.page,
            size=criteria.size,
            total_elements=total or 0,
        )

    async def _count(self, *clauses) -> int:
        return await self.session.scalar(select(func.count()).select_from(self.model).where(*clauses)) or 0

    async def _group_counts(self, column, *clauses) -> Dict[str, int]:
        result = await self.session.execute(
            select(column, func.count()).where(column.is_not(None), *clauses).group_by(column)
        )
        return {key: count for key, count in result.all()}
