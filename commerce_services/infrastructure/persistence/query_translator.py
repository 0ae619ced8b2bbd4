from typing import Any, Callable, Dict, List, Optional

from sqlalchemy import ColumnElement, func

from commerce_services.domain.query.criteria import FilterCriteria, SortDirection
from commerce_services.domain.query.schema import FieldRule, QuerySchema, RuleKind

ClauseBuilder = Callable[[FieldRule, Any], ColumnElement[bool]]


def where_clauses(
    schema: QuerySchema,
    criteria: FilterCriteria,
    model: Any,
    overrides: Optional[Dict[RuleKind, ClauseBuilder]] = None,
) -> List[ColumnElement[bool]]:
    """Translate a criteria object into SQL predicates using the same rule
    table the in-memory engine evaluates."""
    overrides = overrides or {}
    clauses = []
    if criteria.active_only and schema.soft_delete_field:
        clauses.append(getattr(model, schema.soft_delete_field).is_(True))

    for rule, value in schema.active_rules(criteria):
        if rule.kind in overrides:
            clauses.append(overrides[rule.kind](rule, value))
            continue

        column = getattr(model, rule.field)
        if rule.kind == RuleKind.EXACT:
            clauses.append(column == value)
        elif rule.kind == RuleKind.CONTAINS:
            clauses.append(func.lower(column).contains(str(value).lower(), autoescape=True))
        elif rule.kind == RuleKind.MIN:
            clauses.append(column >= value)
        elif rule.kind == RuleKind.MAX:
            clauses.append(column <= value)
        elif rule.kind == RuleKind.POSITIVE:
            clauses.append(column > 0 if value else column == 0)
        else:
            raise ValueError(f"No SQL translation registered for rule kind {rule.kind.value}")
    return clauses


def order_by_clauses(sort_field: str, direction: SortDirection, model: Any) -> List[Any]:
    # NULLs last when ascending, first when descending; ties fall back to id
    column = getattr(model, sort_field)
    if direction == SortDirection.DESC:
        return [column.is_(None).desc(), column.desc(), model.id.asc()]
    return [column.is_(None).asc(), column.asc(), model.id.asc()]
