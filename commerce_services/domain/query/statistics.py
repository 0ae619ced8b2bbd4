from collections import Counter
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, Optional, Sequence

from pydantic import BaseModel, Field

from commerce_services.domain.query.predicates import field_value

CENT = Decimal("0.01")


class NumericSummary(BaseModel):
    average: Decimal = Decimal("0")
    minimum: Decimal = Decimal("0")
    maximum: Decimal = Decimal("0")


class AggregateReport(BaseModel):
    total_count: int = 0
    active_count: int = 0
    inactive_count: int = 0
    groups: Dict[str, Dict[str, int]] = Field(default_factory=dict)
    numeric: NumericSummary = Field(default_factory=NumericSummary)
    total_quantity: int = 0
    out_count: int = 0
    low_count: int = 0

    def group(self, field: str) -> Dict[str, int]:
        return self.groups.get(field, {})

    def distinct(self, field: str) -> int:
        return len(self.group(field))


def money(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP)


def summarize_numbers(values: Sequence[Any]) -> NumericSummary:
    if not values:
        return NumericSummary()
    numbers = [Decimal(str(value)) for value in values]
    return NumericSummary(
        average=money(sum(numbers) / len(numbers)),
        minimum=money(min(numbers)),
        maximum=money(max(numbers)),
    )


def summarize(
    entities: Iterable[Any],
    *,
    group_by: Sequence[str] = (),
    numeric_field: Optional[str] = None,
    quantity_field: Optional[str] = None,
    active_field: Optional[str] = "active",
    low_threshold: int = 10,
) -> AggregateReport:
    """Summary metrics for one entity collection.

    Totals count every entity; groups, numeric and quantity figures only
    consider the active subset. Entities whose grouping value is missing are
    left out of that group map but still counted in the totals.
    """
    everything = list(entities)
    if active_field is None:
        active = everything
    else:
        active = [entity for entity in everything if field_value(entity, active_field)]

    groups = {}
    for field in group_by:
        counts = Counter(field_value(entity, field) for entity in active)
        counts.pop(None, None)
        groups[field] = dict(counts)

    numeric = NumericSummary()
    if numeric_field:
        numeric = summarize_numbers(
            [field_value(e, numeric_field) for e in active if field_value(e, numeric_field) is not None]
        )

    total_quantity = out_count = low_count = 0
    if quantity_field:
        quantities = [field_value(entity, quantity_field) or 0 for entity in active]
        total_quantity = sum(quantities)
        out_count = sum(1 for quantity in quantities if quantity == 0)
        low_count = sum(1 for quantity in quantities if 0 < quantity < low_threshold)

    return AggregateReport(
        total_count=len(everything),
        active_count=len(active),
        inactive_count=len(everything) - len(active),
        groups=groups,
        numeric=numeric,
        total_quantity=total_quantity,
        out_count=out_count,
        low_count=low_count,
    )
