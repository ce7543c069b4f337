# This file implements the user service facade over the account endpoints.
# It exists so registration, login, and admin user management go through one typed entry point.
# Login and refresh are the only remote calls that write to the session store.
# Local helpers answer identity questions from the cached snapshot without a network round trip.

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from src.client.http_client import ApiClient
from src.client.session_store import SessionStore
from src.schemas.common import ApiResponse, parse_envelope
from src.schemas.user_schemas import (
    AssignRoleRequest,
    ChangePasswordRequest,
    CreateUserRequest,
    ListUsersResponse,
    LoginRequest,
    LoginResponse,
    RefreshTokenRequest,
    TokenResponse,
    UpdateUserByAdminRequest,
    UpdateUserRequest,
    User,
    UserRole,
)

LOGGER = logging.getLogger("storefront.users")


class UserService:
    def __init__(self, *, api_client: ApiClient, session_store: SessionStore) -> None:
        self.api_client = api_client
        self.session_store = session_store

    # Public endpoints

    def register(self, request: CreateUserRequest) -> ApiResponse[User]:
        payload = self.api_client.post(
            "/users/register", request.to_payload(), evict_on_unauthorized=False
        )
        return parse_envelope(payload, User)

    def login(self, request: LoginRequest) -> ApiResponse[LoginResponse]:
        payload = self.api_client.post(
            "/users/login", request.to_payload(), evict_on_unauthorized=False
        )
        response = parse_envelope(payload, LoginResponse)
        if response.success and response.data is not None:
            self.session_store.save_session(
                token=response.data.token,
                user=response.data.user.model_dump(mode="json"),
            )
            LOGGER.info("Logged in user_id=%s", response.data.user.id)
        return response

    def refresh_token(self, request: RefreshTokenRequest) -> ApiResponse[TokenResponse]:
        payload = self.api_client.post("/users/refresh-token", request.to_payload())
        response = parse_envelope(payload, TokenResponse)
        if response.success and response.data is not None:
            self.session_store.set_token(response.data.token)
        return response

    # Authenticated user endpoints

    def get_profile(self) -> ApiResponse[User]:
        return parse_envelope(self.api_client.get("/users/profile"), User)

    def update_profile(self, request: UpdateUserRequest) -> ApiResponse[User]:
        payload = self.api_client.put("/users/profile", request.to_payload())
        return parse_envelope(payload, User)

    def change_password(self, request: ChangePasswordRequest) -> ApiResponse[Any]:
        payload = self.api_client.post("/users/change-password", request.to_payload())
        return parse_envelope(payload, Any)

    # Admin endpoints

    def list_users(
        self,
        *,
        offset: int | None = None,
        limit: int | None = None,
        search: str | None = None,
    ) -> ApiResponse[ListUsersResponse]:
        params = {"offset": offset, "limit": limit, "search": search}
        return parse_envelope(self.api_client.get("/admin/users", params=params), ListUsersResponse)

    def get_user_by_id(self, user_id: int) -> ApiResponse[User]:
        return parse_envelope(self.api_client.get(f"/admin/users/{user_id}"), User)

    def update_user_by_admin(
        self, user_id: int, request: UpdateUserByAdminRequest
    ) -> ApiResponse[User]:
        payload = self.api_client.put(f"/admin/users/{user_id}", request.to_payload())
        return parse_envelope(payload, User)

    def delete_user(self, user_id: int) -> ApiResponse[Any]:
        return parse_envelope(self.api_client.delete(f"/admin/users/{user_id}"), Any)

    def assign_role(self, user_id: int, role: UserRole) -> ApiResponse[User]:
        request = AssignRoleRequest(role=role)
        payload = self.api_client.post(f"/admin/users/{user_id}/assign-role", request.to_payload())
        return parse_envelope(payload, User)

    # Local session helpers

    def logout(self) -> None:
        self.session_store.clear()

    def get_current_user(self) -> User | None:
        """Return the cached user snapshot, or None when missing or malformed."""

        snapshot = self.session_store.get_user_snapshot()
        if snapshot is None:
            return None
        try:
            return User.model_validate(snapshot)
        except ValidationError:
            LOGGER.debug("Cached user snapshot does not match the User schema")
            return None

    def is_authenticated(self) -> bool:
        return self.session_store.has_token()

    def is_admin(self) -> bool:
        snapshot = self.session_store.get_user_snapshot()
        return bool(snapshot) and snapshot.get("role") == "admin"

    def get_auth_token(self) -> str | None:
        return self.session_store.get_token()
