from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel


class ApiObject(BaseModel):
    name: str
    data: Any = None
    version: int = 0
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
