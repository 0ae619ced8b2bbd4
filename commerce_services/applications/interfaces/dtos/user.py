from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import EmailStr, Field

from commerce_services.applications.interfaces.dtos.base import CamelModel

Role = Literal["USER", "ADMIN", "MANAGER"]
Status = Literal["ACTIVE", "INACTIVE", "SUSPENDED"]


class UserSchema(CamelModel):
    username: str = Field(min_length=1, max_length=50)
    email: EmailStr = Field(max_length=100)
    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    phone: Optional[str] = Field(default=None, max_length=20)


class UserPublic(CamelModel):
    id: int
    username: str
    email: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserSchemaV2(UserSchema):
    role: Optional[Role] = None
    status: Optional[Status] = None
    active: Optional[bool] = None
    version: Optional[int] = Field(default=None, description="Expected version for optimistic concurrency")


class UserPublicV2(UserPublic):
    role: str
    status: str
    active: bool
    version: int


class UserFilterRequest(CamelModel):
    username: Optional[str] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[str] = None
    status: Optional[str] = None
    active_only: bool = True
    page: int = 0
    size: int = 10
    sort_by: Optional[str] = "createdAt"
    sort_direction: Optional[str] = "desc"


class BulkUserRequest(CamelModel):
    users: List[UserSchemaV2] = Field(min_length=1)


class UserStatsResponse(CamelModel):
    total_users: int
    active_users: int
    inactive_users: int
    users_by_role: Dict[str, int]
    users_by_status: Dict[str, int]


class GeneratedUsername(CamelModel):
    username: str
