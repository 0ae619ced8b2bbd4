from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from commerce_services.applications.interfaces.dtos.base import CamelModel, Money


class OrderSchema(CamelModel):
    user_id: int
    product_id: int
    quantity: int = Field(ge=1)
    total_price: Decimal = Field(ge=Decimal("0.01"), max_digits=10, decimal_places=2)
    shipping_address: str = Field(min_length=1, max_length=500)
    notes: Optional[str] = Field(default=None, max_length=1000)


class OrderPublic(CamelModel):
    id: int
    user_id: int
    product_id: int
    quantity: int
    total_price: Money
    status: str
    shipping_address: str
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
