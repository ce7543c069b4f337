# This file implements the shared JSON-over-HTTP client used by every storefront service.
# It exists so bearer-token injection and 401 credential eviction are factored once instead of per service.
# The client normalizes envelope parsing and converts transport failures into the client error types.
# Each call performs exactly one network attempt; retries and caching are left to callers.

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any

import requests

from src.client.errors import ApiError, ApiUnavailableError, UnauthorizedError
from src.client.session_store import SessionStore

LOGGER = logging.getLogger("storefront.http")

UnauthorizedHandler = Callable[[], None]


class LoginRedirect:
    """Default 401 handler: points the user back at the login entry point."""

    def __init__(self, login_url: str = "/login") -> None:
        self.login_url = login_url

    def __call__(self) -> None:
        LOGGER.warning("Session expired or rejected; login required at %s", self.login_url)


def clean_query_params(params: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Drop unset filters and render booleans the way the backend parses them."""

    if not params:
        return None
    cleaned: dict[str, Any] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            cleaned[key] = "true" if value else "false"
        elif isinstance(value, Enum):
            cleaned[key] = value.value
        else:
            cleaned[key] = value
    return cleaned or None


class ApiClient:
    def __init__(
        self,
        *,
        base_url: str,
        session_store: SessionStore,
        on_unauthorized: UnauthorizedHandler | None = None,
        timeout_seconds: int = 30,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session_store = session_store
        self.on_unauthorized = on_unauthorized or LoginRedirect()
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def get(self, path: str, *, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return self.request("GET", path, params=params)

    def post(
        self,
        path: str,
        body: Any | None = None,
        *,
        params: Mapping[str, Any] | None = None,
        evict_on_unauthorized: bool = True,
    ) -> dict[str, Any]:
        return self.request(
            "POST",
            path,
            params=params,
            body=body,
            evict_on_unauthorized=evict_on_unauthorized,
        )

    def put(
        self,
        path: str,
        body: Any | None = None,
        *,
        params: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        return self.request("PUT", path, params=params, body=body)

    def delete(self, path: str, *, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return self.request("DELETE", path, params=params)

    def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        body: Any | None = None,
        evict_on_unauthorized: bool = True,
    ) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(
                method,
                url,
                params=clean_query_params(params),
                json=body,
                headers=self._headers(),
                timeout=self.timeout_seconds,
            )
        except requests.RequestException as exc:
            raise ApiUnavailableError(f"API request failed for {method} {url}: {exc}") from exc

        LOGGER.debug("%s %s -> %s", method, url, response.status_code)

        if response.status_code == 401:
            # Credential exchanges answer bad input with 401; only authenticated calls evict.
            if evict_on_unauthorized:
                self._evict_session()
            payload = self._error_payload(response)
            raise UnauthorizedError(
                status_code=401,
                message=self._error_message(payload, 401),
                url=url,
                payload=payload,
            )
        if response.status_code >= 400:
            payload = self._error_payload(response)
            raise ApiError(
                status_code=response.status_code,
                message=self._error_message(payload, response.status_code),
                url=url,
                payload=payload,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ApiUnavailableError(f"API did not return valid JSON for {method} {url}") from exc

        if not isinstance(payload, dict):
            raise ApiUnavailableError(f"Unexpected payload shape from {method} {url}")
        return payload

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        token = self.session_store.get_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _evict_session(self) -> None:
        LOGGER.warning("Received 401 from API; clearing stored credentials")
        self.session_store.clear()
        self.on_unauthorized()

    @staticmethod
    def _error_payload(response: requests.Response) -> Any | None:
        try:
            return response.json()
        except ValueError:
            return None

    @staticmethod
    def _error_message(payload: Any | None, status_code: int) -> str:
        if isinstance(payload, dict):
            message = payload.get("message") or payload.get("error")
            if isinstance(message, str) and message:
                return message
        return f"HTTP error! status: {status_code}"


def build_api_client(
    *,
    base_url: str,
    session_store: SessionStore,
    on_unauthorized: UnauthorizedHandler | None = None,
    timeout_seconds: int = 30,
    session: requests.Session | None = None,
) -> ApiClient:
    """Single construction path for the per-domain API clients."""

    return ApiClient(
        base_url=base_url,
        session_store=session_store,
        on_unauthorized=on_unauthorized,
        timeout_seconds=timeout_seconds,
        session=session,
    )
