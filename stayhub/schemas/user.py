"""
User and authentication schemas.
"""

from typing import Optional

from pydantic import EmailStr, Field

from stayhub.schemas.common.base import BaseRequestSchema, BaseSchema, TimestampMixin
from stayhub.schemas.common.enums import UserRole

__all__ = [
    "User",
    "LoginCredentials",
    "RegisterData",
    "AuthResponse",
    "ProfileUpdate",
    "PasswordChange",
]


class User(BaseSchema, TimestampMixin):
    """User as returned by the backend and cached in persisted storage."""

    id: int = Field(..., description="User identifier")
    name: str = Field(..., description="Display name")
    email: EmailStr = Field(..., description="Login email")
    role: UserRole = Field(UserRole.USER, description="Access role")
    phone: Optional[str] = Field(None, description="Contact phone")
    is_active: Optional[bool] = Field(None, description="Account activation flag")

    @property
    def is_admin(self) -> bool:
        return self.role is UserRole.ADMIN


class LoginCredentials(BaseRequestSchema):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RegisterData(BaseRequestSchema):
    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8)
    phone: Optional[str] = None


class AuthResponse(BaseSchema):
    """Body of ``/auth/login`` and ``/auth/register``."""

    token: str = Field(..., min_length=1, description="Bearer token")
    user: User


class ProfileUpdate(BaseRequestSchema):
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None


class PasswordChange(BaseRequestSchema):
    current_password: str = Field(..., alias="currentPassword", min_length=1)
    new_password: str = Field(..., alias="newPassword", min_length=8)
