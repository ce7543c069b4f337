# This file provides shared fakes and payload builders for client and service tests.
# It exists so tests can script backend responses without a network or a mocking library.
# The fake session records every call, which lets tests assert that no request was issued.
# Payload builders return server-shaped dicts that individual tests tweak as needed.

from __future__ import annotations

import json
from typing import Any

from src.client.http_client import ApiClient
from src.client.session_store import InMemorySessionStore, SessionStore

API_BASE = "http://api.test/api/v1"
PAYMENT_BASE = "http://payments.test/api/v1"
TIMESTAMP = "2026-03-01T12:00:00Z"

_NO_JSON = object()


class FakeResponse:
    def __init__(self, *, status_code: int = 200, payload: Any = _NO_JSON) -> None:
        self.status_code = status_code
        self._payload = payload

    def json(self) -> Any:
        if self._payload is _NO_JSON:
            raise ValueError("No JSON body")
        return self._payload


class FakeSession:
    def __init__(
        self,
        responses: list[FakeResponse | Exception] | None = None,
    ) -> None:
        self.responses = list(responses or [])
        self.calls: list[dict[str, Any]] = []

    def request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any | None = None,
        headers: dict[str, str] | None = None,
        timeout: int | None = None,
    ) -> FakeResponse:
        self.calls.append(
            {
                "method": method,
                "url": url,
                "params": params,
                "json": json,
                "headers": dict(headers or {}),
                "timeout": timeout,
            }
        )
        if not self.responses:
            raise AssertionError(f"Unexpected request {method} {url}")
        next_item = self.responses.pop(0)
        if isinstance(next_item, Exception):
            raise next_item
        return next_item


class RedirectRecorder:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


def ok(data: Any = None, message: str = "ok") -> FakeResponse:
    payload: dict[str, Any] = {"success": True, "message": message}
    if data is not None:
        payload["data"] = data
    return FakeResponse(status_code=200, payload=payload)


def error(status_code: int, message: str | None = None) -> FakeResponse:
    if message is None:
        return FakeResponse(status_code=status_code)
    return FakeResponse(status_code=status_code, payload={"success": False, "message": message})


def build_client(
    session: FakeSession,
    *,
    store: SessionStore | None = None,
    base_url: str = API_BASE,
    redirect: RedirectRecorder | None = None,
) -> ApiClient:
    return ApiClient(
        base_url=base_url,
        session_store=store if store is not None else InMemorySessionStore(),
        on_unauthorized=redirect or RedirectRecorder(),
        timeout_seconds=5,
        session=session,
    )


def logged_in_store(*, user_id: int = 7, role: str = "user", token: str = "tok-123") -> InMemorySessionStore:
    return InMemorySessionStore(
        {"auth_token": token, "user": json.dumps(user_payload(user_id=user_id, role=role))}
    )


def user_payload(*, user_id: int = 7, role: str = "user", email: str = "ada@example.com") -> dict[str, Any]:
    return {
        "id": user_id,
        "email": email,
        "first_name": "Ada",
        "last_name": "Lovelace",
        "role": role,
        "is_active": True,
        "created_at": TIMESTAMP,
        "updated_at": TIMESTAMP,
    }


def product_payload(*, product_id: int = 11, **overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": product_id,
        "name": "Desk Lamp",
        "price": 39.5,
        "stock_quantity": 12,
        "is_active": True,
        "is_featured": False,
        "created_at": TIMESTAMP,
        "updated_at": TIMESTAMP,
    }
    payload.update(overrides)
    return payload


def basket_payload(*, user_id: int = 7, items: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    rows = items if items is not None else []
    return {
        "id": f"basket-{user_id}",
        "user_id": user_id,
        "items": rows,
        "total": sum(row["total_price"] for row in rows),
        "item_count": sum(row["quantity"] for row in rows),
        "created_at": TIMESTAMP,
        "updated_at": TIMESTAMP,
        "expires_at": "2026-03-08T12:00:00Z",
        "is_expired": False,
    }


def basket_item_payload(*, product_id: int, quantity: int = 1, unit_price: float = 10.0) -> dict[str, Any]:
    return {
        "id": product_id * 100,
        "product_id": product_id,
        "quantity": quantity,
        "unit_price": unit_price,
        "total_price": quantity * unit_price,
        "created_at": TIMESTAMP,
        "updated_at": TIMESTAMP,
    }


def payment_payload(*, payment_id: str = "pay_1", status: str = "pending") -> dict[str, Any]:
    return {
        "id": payment_id,
        "user_id": 7,
        "order_id": "order-42",
        "amount": 99.99,
        "currency": "USD",
        "status": status,
        "payment_method": "credit_card",
        "payment_provider": "stripe",
        "created_at": TIMESTAMP,
        "updated_at": TIMESTAMP,
    }


def refund_payload(*, refund_id: str = "ref_1", status: str = "pending") -> dict[str, Any]:
    return {
        "id": refund_id,
        "payment_id": "pay_1",
        "amount": 10.0,
        "reason": "damaged",
        "status": status,
        "created_at": TIMESTAMP,
        "updated_at": TIMESTAMP,
    }


def payment_method_payload(*, method_id: str = "pm_1", is_default: bool = False) -> dict[str, Any]:
    return {
        "id": method_id,
        "user_id": 7,
        "type": "credit_card",
        "provider": "stripe",
        "last_four_digits": "4242",
        "is_default": is_default,
        "is_active": True,
        "created_at": TIMESTAMP,
        "updated_at": TIMESTAMP,
    }
