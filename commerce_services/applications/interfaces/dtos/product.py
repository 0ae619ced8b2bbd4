from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import Field

from commerce_services.applications.interfaces.dtos.base import CamelModel, Money


class ProductSchema(CamelModel):
    name: str = Field(min_length=3, max_length=100)
    description: Optional[str] = Field(default=None, max_length=1000)
    price: Decimal = Field(ge=Decimal("0.01"), max_digits=10, decimal_places=2)
    stock: int = Field(ge=0)


class ProductPublic(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Money
    stock: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProductSchemaV2(ProductSchema):
    sku: str = Field(pattern=r"^[A-Z0-9-]{5,20}$")
    category: str = Field(min_length=1, max_length=50)
    tags: List[str] = Field(default_factory=list)
    version: Optional[int] = Field(default=None, description="Expected version for optimistic concurrency")


class ProductPublicV2(ProductPublic):
    sku: Optional[str] = None
    category: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    active: bool
    version: int
    stock_status: str


class ProductFilterRequest(CamelModel):
    name: Optional[str] = None
    category: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    tag: Optional[str] = None
    in_stock: Optional[bool] = None
    active_only: bool = True
    page: int = 0
    size: int = 10
    sort_by: Optional[str] = "name"
    sort_direction: Optional[str] = "asc"


class BulkProductRequest(CamelModel):
    products: List[ProductSchemaV2] = Field(min_length=1)


class ProductStatsResponse(CamelModel):
    total_products: int
    active_products: int
    inactive_products: int
    total_categories: int
    products_by_category: Dict[str, int]
    average_price: Money
    max_price: Money
    min_price: Money
    total_stock: int
    out_of_stock_count: int
    low_stock_count: int


class GeneratedSku(CamelModel):
    sku: str
