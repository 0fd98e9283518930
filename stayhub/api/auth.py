"""Authentication and user profile endpoints."""

from typing import List

from stayhub.api.client import BaseResource
from stayhub.schemas.user import (
    AuthResponse,
    LoginCredentials,
    PasswordChange,
    ProfileUpdate,
    RegisterData,
    User,
)


class AuthApi(BaseResource):

    async def login(self, credentials: LoginCredentials) -> AuthResponse:
        return await self.client.post(
            "/auth/login",
            json=credentials,
            response_model=AuthResponse,
            fallback_message="Login failed",
        )

    async def register(self, data: RegisterData) -> AuthResponse:
        return await self.client.post(
            "/auth/register",
            json=data,
            response_model=AuthResponse,
            fallback_message="Registration failed",
        )

    async def get_profile(self) -> User:
        return await self.client.get(
            "/users/profile",
            response_model=User,
            fallback_message="Failed to fetch profile",
        )

    async def update_profile(self, data: ProfileUpdate) -> User:
        return await self.client.put(
            "/users/profile",
            json=data,
            response_model=User,
            fallback_message="Failed to update profile",
        )

    async def change_password(self, data: PasswordChange) -> None:
        await self.client.put(
            "/users/change-password",
            json=data,
            fallback_message="Failed to change password",
        )


class UsersApi(BaseResource):
    """Admin user management."""

    async def list_users(self, **filters) -> List[User]:
        return await self.client.get(
            "/users",
            params=filters,
            response_model=List[User],
            fallback_message="Failed to fetch users",
        )

    async def get_user(self, user_id: int) -> User:
        return await self.client.get(
            f"/users/{user_id}",
            response_model=User,
            fallback_message="Failed to fetch user",
        )

    async def update_user_profile(self, user_id: int, data: ProfileUpdate) -> User:
        return await self.client.put(
            f"/users/{user_id}/profile",
            json=data,
            response_model=User,
            fallback_message="Failed to update user",
        )

    async def deactivate_user(self, user_id: int) -> None:
        await self.client.put(f"/users/{user_id}/deactivate", fallback_message="Failed to deactivate user")

    async def activate_user(self, user_id: int) -> None:
        await self.client.put(f"/users/{user_id}/activate", fallback_message="Failed to activate user")
