from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

LOW_STOCK_THRESHOLD = 10


class Product(BaseModel):
    name: str
    price: Decimal
    stock: int
    description: Optional[str] = None
    sku: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    active: bool = True
    version: int = 0
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("tags")
    @classmethod
    def _unique_tags(cls, tags: List[str]) -> List[str]:
        # tags behave as a set of tokens, first occurrence wins
        return list(dict.fromkeys(tag.strip() for tag in tags if tag and tag.strip()))

    @property
    def stock_status(self) -> str:
        if not self.stock:
            return "OUT_OF_STOCK"
        if self.stock < LOW_STOCK_THRESHOLD:
            return "LOW_STOCK"
        return "IN_STOCK"
