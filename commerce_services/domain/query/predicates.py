from collections.abc import Mapping
from typing import Any, Callable, Iterable

Predicate = Callable[[Any], bool]


def field_value(entity: Any, field: str) -> Any:
    if isinstance(entity, Mapping):
        return entity.get(field)
    return getattr(entity, field, None)


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def equals(field: str, expected: Any) -> Predicate:
    return lambda entity: field_value(entity, field) == expected


def contains_ignore_case(field: str, fragment: str) -> Predicate:
    needle = fragment.lower()

    def predicate(entity: Any) -> bool:
        value = field_value(entity, field)
        return value is not None and needle in str(value).lower()

    return predicate


def at_least(field: str, bound: Any) -> Predicate:
    def predicate(entity: Any) -> bool:
        value = field_value(entity, field)
        return value is not None and value >= bound

    return predicate


def at_most(field: str, bound: Any) -> Predicate:
    def predicate(entity: Any) -> bool:
        value = field_value(entity, field)
        return value is not None and value <= bound

    return predicate


def has_tag(field: str, tag: str) -> Predicate:
    """Exact token membership, so "game" never matches a stored "gaming"."""

    def predicate(entity: Any) -> bool:
        tags = field_value(entity, field) or ()
        return tag in tags

    return predicate


def positive(field: str, flag: bool) -> Predicate:
    if flag:
        return lambda entity: (field_value(entity, field) or 0) > 0
    return lambda entity: (field_value(entity, field) or 0) == 0


def all_of(predicates: Iterable[Predicate]) -> Predicate:
    checks = list(predicates)
    return lambda entity: all(check(entity) for check in checks)
