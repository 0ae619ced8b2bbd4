from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional

from sqlalchemy import JSON, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, registry, relationship

table_registry = registry()


@table_registry.mapped_as_dataclass
class ProductTag:
    __tablename__ = "product_tags"

    tag: Mapped[str] = mapped_column(String(100), primary_key=True)
    product_id: Mapped[int] = mapped_column(
        ForeignKey("products.id", ondelete="CASCADE"), primary_key=True, default=None
    )
    position: Mapped[int] = mapped_column(default=0)


@table_registry.mapped_as_dataclass
class Product:
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(init=False, primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    stock: Mapped[int]
    description: Mapped[Optional[str]] = mapped_column(String(1000), default=None)
    sku: Mapped[Optional[str]] = mapped_column(String(50), unique=True, default=None)
    category: Mapped[Optional[str]] = mapped_column(String(50), index=True, default=None)
    active: Mapped[bool] = mapped_column(default=True, index=True)
    version: Mapped[int] = mapped_column(default=0)
    created_at: Mapped[datetime] = mapped_column(default_factory=datetime.now)
    updated_at: Mapped[datetime] = mapped_column(default_factory=datetime.now)
    tag_rows: Mapped[List[ProductTag]] = relationship(
        default_factory=list,
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by=ProductTag.position,
    )


@table_registry.mapped_as_dataclass
class User:
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(init=False, primary_key=True)
    username: Mapped[str] = mapped_column(String(50), unique=True)
    email: Mapped[str] = mapped_column(String(100), unique=True)
    first_name: Mapped[str] = mapped_column(String(50))
    last_name: Mapped[str] = mapped_column(String(50))
    phone: Mapped[Optional[str]] = mapped_column(String(20), default=None)
    role: Mapped[str] = mapped_column(String(20), default="USER", index=True)
    status: Mapped[str] = mapped_column(String(20), default="ACTIVE")
    active: Mapped[bool] = mapped_column(default=True, index=True)
    version: Mapped[int] = mapped_column(default=0)
    created_at: Mapped[datetime] = mapped_column(default_factory=datetime.now)
    updated_at: Mapped[datetime] = mapped_column(default_factory=datetime.now)


@table_registry.mapped_as_dataclass
class Order:
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(init=False, primary_key=True)
    user_id: Mapped[int] = mapped_column(index=True)
    product_id: Mapped[int]
    quantity: Mapped[int]
    total_price: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    shipping_address: Mapped[str] = mapped_column(String(500))
    status: Mapped[str] = mapped_column(String(20), default="PENDING", index=True)
    notes: Mapped[Optional[str]] = mapped_column(String(1000), default=None)
    version: Mapped[int] = mapped_column(default=0)
    created_at: Mapped[datetime] = mapped_column(default_factory=datetime.now)
    updated_at: Mapped[datetime] = mapped_column(default_factory=datetime.now)


@table_registry.mapped_as_dataclass
class ApiObject:
    __tablename__ = "api_objects"

    id: Mapped[int] = mapped_column(init=False, primary_key=True)
    name: Mapped[str] = mapped_column(String(255))
    data: Mapped[Any] = mapped_column(JSON, nullable=True, default=None)
    version: Mapped[int] = mapped_column(default=0)
    created_at: Mapped[datetime] = mapped_column(default_factory=datetime.now)
    updated_at: Mapped[datetime] = mapped_column(default_factory=datetime.now)
