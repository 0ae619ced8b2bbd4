from typing import Any, Generic, Iterable, List, Sequence, TypeVar

from commerce_services.domain.models.page import Page
from commerce_services.domain.query.criteria import FilterCriteria, SortDirection
from commerce_services.domain.query.predicates import all_of, field_value
from commerce_services.domain.query.schema import QuerySchema

T = TypeVar("T")


def sort_key(field: str):
    # missing values sort after present ones in ascending order
    def key(entity: Any):
        value = field_value(entity, field)
        return (value is None, value if value is not None else 0)

    return key


def sort_entities(entities: Iterable[T], field: str, direction: SortDirection) -> List[T]:
    # sorted() is stable, ties keep input order even with reverse=True
    return sorted(entities, key=sort_key(field), reverse=direction == SortDirection.DESC)


def paginate(entities: Sequence[T], page: int, size: int) -> Page[T]:
    skip = page * size
    return Page(
        content=list(entities[skip : skip + size]),
        page=page,
        size=size,
        total_elements=len(entities),
    )


class QueryEngine(Generic[T]):
    """Filters, sorts and paginates a snapshot of entities.

    Pure with respect to its inputs: the entity sequence is never mutated and
    the same criteria over the same snapshot always yields the same page.
    """

    def __init__(self, schema: QuerySchema):
        self.schema = schema

    def query(self, criteria: FilterCriteria, entities: Iterable[T]) -> Page[T]:
        sort_field = self.schema.validate(criteria)
        matches = all_of(self.schema.build_predicates(criteria))
        filtered = [entity for entity in entities if matches(entity)]
        ordered = sort_entities(filtered, sort_field, criteria.sort_direction)
        return paginate(ordered, criteria.page, criteria.size)
