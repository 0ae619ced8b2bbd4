from datetime import datetime
from typing import Optional

from pydantic import BaseModel

STATUSES = ("ACTIVE", "INACTIVE", "SUSPENDED")


class User(BaseModel):
    username: str
    email: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    role: str = "USER"
    status: str = "ACTIVE"
    active: bool = True
    version: int = 0
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
