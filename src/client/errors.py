# This file defines the exception hierarchy raised by the storefront client.
# It exists so callers can tell precondition failures, HTTP rejections, and transport outages apart.
# Every service operation raises one of these types instead of leaking `requests` exceptions.

from __future__ import annotations

from typing import Any


class StorefrontClientError(RuntimeError):
    """Base class for all client-side failures."""


class NotAuthenticatedError(StorefrontClientError):
    """Raised before any network call when no session snapshot is cached."""

    def __init__(self, message: str = "User not authenticated") -> None:
        super().__init__(message)


class ApiError(StorefrontClientError):
    """Raised when the backend answers with a non-2xx status."""

    def __init__(
        self,
        *,
        status_code: int,
        message: str,
        url: str,
        payload: Any | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.url = url
        self.payload = payload
        super().__init__(message)


class UnauthorizedError(ApiError):
    """Raised for 401 responses after stored credentials were evicted."""


class ApiUnavailableError(StorefrontClientError):
    """Raised when the API cannot be reached or does not return JSON."""


class BackendCapabilityMissingError(StorefrontClientError):
    """Raised in strict mode by operations the backend does not serve yet."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Operation '{operation}' is not supported by the backend yet")
