# This file defines user-service schemas for accounts, authentication, and admin management.
# It exists so login and profile payloads are typed at the client boundary.
# The role literal matches the two roles the backend recognizes.

from __future__ import annotations

from datetime import datetime
from typing import Literal

from src.schemas.common import RequestModel, ResponseModel

UserRole = Literal["user", "admin"]


class User(ResponseModel):
    id: int
    email: str
    first_name: str
    last_name: str
    role: UserRole
    is_active: bool
    created_at: datetime
    updated_at: datetime


class CreateUserRequest(RequestModel):
    email: str
    password: str
    first_name: str
    last_name: str


class LoginRequest(RequestModel):
    email: str
    password: str


class RefreshTokenRequest(RequestModel):
    refresh_token: str


class UpdateUserRequest(RequestModel):
    first_name: str | None = None
    last_name: str | None = None


class UpdateUserByAdminRequest(RequestModel):
    first_name: str | None = None
    last_name: str | None = None
    role: UserRole | None = None
    is_active: bool | None = None


class AssignRoleRequest(RequestModel):
    role: UserRole


class ChangePasswordRequest(RequestModel):
    current_password: str
    new_password: str


class LoginResponse(ResponseModel):
    user: User
    token: str


class TokenResponse(ResponseModel):
    token: str


class ListUsersResponse(ResponseModel):
    users: list[User]
    total: int
    offset: int
    limit: int
