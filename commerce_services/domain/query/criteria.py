from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortDirection":
        # anything other than "desc" falls back to ascending
        if value is not None and str(value).strip().lower() == cls.DESC.value:
            return cls.DESC
        return cls.ASC


class FilterCriteria(BaseModel):
    model_config = ConfigDict(frozen=True)

    active_only: bool = True
    page: int = 0
    size: int = 10
    sort_by: Optional[str] = None
    sort_direction: SortDirection = SortDirection.ASC


class ProductFilterCriteria(FilterCriteria):
    name: Optional[str] = None
    category: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    tag: Optional[str] = None
    in_stock: Optional[bool] = None


class UserFilterCriteria(FilterCriteria):
    username: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[str] = None
    status: Optional[str] = None
    sort_direction: SortDirection = SortDirection.DESC


class OrderFilterCriteria(FilterCriteria):
    user_id: Optional[int] = None
    status: Optional[str] = None
    sort_direction: SortDirection = SortDirection.DESC


class ApiObjectFilterCriteria(FilterCriteria):
    name: Optional[str] = None
