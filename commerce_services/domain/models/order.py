from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


def normalize_status(status: str) -> str:
    """Order statuses are stored and looked up trimmed and upper-cased"""
    return status.strip().upper()


class Order(BaseModel):
    user_id: int
    product_id: int
    quantity: int
    total_price: Decimal
    shipping_address: str
    status: str = "PENDING"
    notes: Optional[str] = None
    version: int = 0
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
