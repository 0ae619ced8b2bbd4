import threading
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple, TypeVar

from pydantic import BaseModel

from commerce_services.domain.exceptions import ConflictError, NotFoundError
from commerce_services.domain.models.page import Page
from commerce_services.domain.ports.repositories.entity_collection import EntityCollection
from commerce_services.domain.query.criteria import FilterCriteria
from commerce_services.domain.query.engine import QueryEngine
from commerce_services.domain.query.schema import QuerySchema

T = TypeVar("T", bound=BaseModel)


class InMemoryEntityCollection(EntityCollection[T]):
    """Dictionary-backed collection that keeps entities in insertion order.

    Writes run inside a lock and are compare-and-swap on ``version``. Reads
    take a copy of the current state under the lock and then work on that
    snapshot, so a query never observes a half-applied write.
    """

    schema: QuerySchema
    entity_name: str = "Entity"
    unique_fields: Tuple[str, ...] = ()

    def __init__(self):
        self._entities: Dict[int, T] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        self._engine: QueryEngine[T] = QueryEngine(self.schema)

    def _snapshot(self) -> List[T]:
        with self._lock:
            return [entity.model_copy(deep=True) for entity in self._entities.values()]

    def _taken(self, field: str, value, exclude_id: Optional[int]) -> bool:
        return any(
            getattr(entity, field) == value and entity.id != exclude_id for entity in self._entities.values()
        )

    def _check_unique(self, entities: Iterable[T], exclude_id: Optional[int] = None) -> None:
        for field in self.unique_fields:
            seen = set()
            for entity in entities:
                value = getattr(entity, field)
                if value is None:
                    continue
                if value in seen or self._taken(field, value, exclude_id):
                    raise ConflictError(f"{self.entity_name} with {field} '{value}' already exists")
                seen.add(value)

    def _store_new(self, entity: T) -> T:
        now = datetime.now()
        stored = entity.model_copy(
            update={"id": self._next_id, "version": 0, "created_at": now, "updated_at": now}, deep=True
        )
        self._entities[stored.id] = stored
        self._next_id += 1
        return stored.model_copy(deep=True)

    def _require(self, entity_id: int) -> T:
        current = self._entities.get(entity_id)
        if current is None:
            raise NotFoundError(f"{self.entity_name} not found with id: {entity_id}")
        return current

    def _replace(self, current: T, changes: dict) -> T:
        changes = dict(changes, version=current.version + 1, updated_at=datetime.now())
        stored = current.model_copy(update=changes, deep=True)
        self._entities[current.id] = stored
        return stored.model_copy(deep=True)

    async def insert(self, entity: T) -> T:
        with self._lock:
            self._check_unique([entity])
            return self._store_new(entity)

    async def insert_all(self, entities: List[T]) -> List[T]:
        with self._lock:
            self._check_unique(entities)
            return [self._store_new(entity) for entity in entities]

    async def get(self, entity_id: int) -> T:
        with self._lock:
            return self._require(entity_id).model_copy(deep=True)

    async def update_if_version_matches(self, entity_id: int, new_state: T, expected_version: int) -> T:
        with self._lock:
            current = self._require(entity_id)
            if current.version != expected_version:
                raise ConflictError(
                    f"{self.entity_name} {entity_id} was modified concurrently (expected version {expected_version})"
                )
            self._check_unique([new_state], exclude_id=entity_id)
            changes = new_state.model_dump(exclude={"id", "version", "created_at", "updated_at"})
            return self._replace(current, changes)

    async def _mark_inactive(self, entity_id: int) -> T:
        with self._lock:
            return self._replace(self._require(entity_id), {"active": False})

    async def delete(self, entity_id: int) -> None:
        with self._lock:
            self._require(entity_id)
            del self._entities[entity_id]

    async def scan(self) -> List[T]:
        return self._snapshot()

    async def query(self, criteria: FilterCriteria) -> Page[T]:
        return self._engine.query(criteria, self._snapshot())
