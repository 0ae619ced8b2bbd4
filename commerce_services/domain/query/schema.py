from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, List, Mapping, Optional, Tuple

from commerce_services.domain.exceptions import InvalidPaginationError, InvalidSortFieldError
from commerce_services.domain.query import predicates
from commerce_services.domain.query.criteria import FilterCriteria


class RuleKind(str, Enum):
    EXACT = "exact"
    CONTAINS = "contains"
    MIN = "min"
    MAX = "max"
    TAG = "tag"
    POSITIVE = "positive"


@dataclass(frozen=True)
class FieldRule:
    criterion: str
    field: str
    kind: RuleKind


@dataclass(frozen=True)
class QuerySchema:
    """Declares how a criteria object maps onto one entity type.

    ``sort_fields`` maps the public sort name (``createdAt``) to the entity
    attribute (``created_at``). ``soft_delete_field`` is None for entities
    that are only ever hard-deleted.
    """

    rules: Tuple[FieldRule, ...]
    sort_fields: Mapping[str, str]
    default_sort: str
    soft_delete_field: Optional[str] = "active"

    def active_rules(self, criteria: FilterCriteria) -> Iterator[Tuple[FieldRule, Any]]:
        for rule in self.rules:
            value = getattr(criteria, rule.criterion, None)
            if not predicates.is_blank(value):
                yield rule, value

    def resolve_sort(self, sort_by: Optional[str]) -> str:
        name = self.default_sort if predicates.is_blank(sort_by) else sort_by.strip()
        if name in self.sort_fields:
            return self.sort_fields[name]
        if name in self.sort_fields.values():
            return name
        raise InvalidSortFieldError(name, sorted(self.sort_fields))

    def validate(self, criteria: FilterCriteria) -> str:
        errors = {}
        if criteria.page < 0:
            errors["page"] = "Page number must be 0 or greater"
        if criteria.size < 1:
            errors["size"] = "Page size must be at least 1"
        if errors:
            raise InvalidPaginationError("Invalid pagination parameters", errors)
        return self.resolve_sort(criteria.sort_by)

    def build_predicates(self, criteria: FilterCriteria) -> List[predicates.Predicate]:
        built = []
        if criteria.active_only and self.soft_delete_field:
            built.append(predicates.equals(self.soft_delete_field, True))
        for rule, value in self.active_rules(criteria):
            built.append(_RULE_BUILDERS[rule.kind](rule.field, value))
        return built


_RULE_BUILDERS = {
    RuleKind.EXACT: predicates.equals,
    RuleKind.CONTAINS: predicates.contains_ignore_case,
    RuleKind.MIN: predicates.at_least,
    RuleKind.MAX: predicates.at_most,
    RuleKind.TAG: predicates.has_tag,
    RuleKind.POSITIVE: predicates.positive,
}


PRODUCT_QUERY_SCHEMA = QuerySchema(
    rules=(
        FieldRule("name", "name", RuleKind.CONTAINS),
        FieldRule("category", "category", RuleKind.EXACT),
        FieldRule("min_price", "price", RuleKind.MIN),
        FieldRule("max_price", "price", RuleKind.MAX),
        FieldRule("tag", "tags", RuleKind.TAG),
        FieldRule("in_stock", "stock", RuleKind.POSITIVE),
    ),
    sort_fields={
        "id": "id",
        "name": "name",
        "price": "price",
        "stock": "stock",
        "category": "category",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    },
    default_sort="name",
)

USER_QUERY_SCHEMA = QuerySchema(
    rules=(
        FieldRule("username", "username", RuleKind.CONTAINS),
        FieldRule("email", "email", RuleKind.CONTAINS),
        FieldRule("first_name", "first_name", RuleKind.CONTAINS),
        FieldRule("last_name", "last_name", RuleKind.CONTAINS),
        FieldRule("role", "role", RuleKind.EXACT),
        FieldRule("status", "status", RuleKind.EXACT),
    ),
    sort_fields={
        "id": "id",
        "username": "username",
        "email": "email",
        "firstName": "first_name",
        "lastName": "last_name",
        "role": "role",
        "status": "status",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    },
    default_sort="createdAt",
)

ORDER_QUERY_SCHEMA = QuerySchema(
    rules=(
        FieldRule("user_id", "user_id", RuleKind.EXACT),
        FieldRule("status", "status", RuleKind.EXACT),
    ),
    sort_fields={
        "id": "id",
        "userId": "user_id",
        "productId": "product_id",
        "quantity": "quantity",
        "totalPrice": "total_price",
        "status": "status",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    },
    default_sort="createdAt",
    soft_delete_field=None,
)

API_OBJECT_QUERY_SCHEMA = QuerySchema(
    rules=(FieldRule("name", "name", RuleKind.CONTAINS),),
    sort_fields={
        "id": "id",
        "name": "name",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    },
    default_sort="id",
    soft_delete_field=None,
)
