from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from commerce_services.applications.interfaces.dtos.base import CamelModel


class ApiObjectSchema(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    data: Any = None


class ApiObjectPublic(CamelModel):
    id: int
    name: str
    data: Any = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
