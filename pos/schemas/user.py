from pydantic import BaseModel, Field, ConfigDict
from typing import Optional


class UserPermissions(BaseModel):
    perm_products: bool = False
    perm_categories: bool = False
    perm_transactions: bool = False
    perm_users: bool = False
    perm_settings: bool = False


class UserSave(UserPermissions):
    """Schema for POST /post: creates without an id, updates with one."""
    id: Optional[int] = None
    username: str = Field(..., min_length=1, max_length=80)
    password: str = Field(..., min_length=1)
    fullname: str = Field("", max_length=255)


class UserResponse(UserPermissions):
    """User as returned by the API. The password hash is never included."""
    id: int
    username: str
    fullname: str
    is_admin: bool = False
    status: str

    model_config = ConfigDict(from_attributes=True)


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)
