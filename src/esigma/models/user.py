"""
User and role Pydantic models
"""

from typing import List, Optional
from datetime import datetime
from pydantic import Field

from esigma.models.base import CamelModel, PartialUpdate


class Role(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    level: int
    is_active: bool = True
    menu_access: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class User(CamelModel):
    id: str
    email: str
    name: str
    role_id: str
    role: Optional[Role] = None
    jurisdiction: Optional[str] = None
    zone: Optional[str] = None
    region: Optional[str] = None
    district: Optional[str] = None
    employee_id: Optional[str] = None
    phone_number: Optional[str] = None
    is_active: bool = True
    created_at: datetime
    updated_at: datetime


class LoginData(CamelModel):
    """Successful login payload"""
    user: User
    token: str


class UserCreateRequest(CamelModel):
    email: str
    name: str
    role_id: str
    jurisdiction: Optional[str] = None
    zone: Optional[str] = None
    region: Optional[str] = None
    district: Optional[str] = None
    employee_id: Optional[str] = None
    phone_number: Optional[str] = None


class UserUpdateRequest(PartialUpdate):
    """Partial update; only fields explicitly supplied are written"""
    non_nullable = frozenset({"email", "name", "role_id", "is_active"})

    email: Optional[str] = None
    name: Optional[str] = None
    role_id: Optional[str] = None
    jurisdiction: Optional[str] = None
    zone: Optional[str] = None
    region: Optional[str] = None
    district: Optional[str] = None
    employee_id: Optional[str] = None
    phone_number: Optional[str] = None
    is_active: Optional[bool] = None


class RoleCreateRequest(CamelModel):
    name: str
    description: Optional[str] = None


class RoleUpdateRequest(PartialUpdate):
    """Name and description only; level is not mutable through updates"""
    non_nullable = frozenset({"name"})

    name: Optional[str] = None
    description: Optional[str] = None
