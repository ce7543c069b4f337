# This test file validates the shared HTTP client against scripted backend responses.
# It exists so token injection, 401 eviction, and error mapping stay identical for every service.
# The fake session records calls, so tests can assert exactly what went over the wire.

from __future__ import annotations

import pytest
import requests

from src.client.errors import ApiError, ApiUnavailableError, UnauthorizedError
from src.client.http_client import clean_query_params
from src.client.session_store import InMemorySessionStore
from tests.support import (
    API_BASE,
    FakeResponse,
    FakeSession,
    RedirectRecorder,
    build_client,
    error,
    logged_in_store,
    ok,
)


def test_bearer_token_attached_when_stored() -> None:
    session = FakeSession([ok({"value": 1})])
    client = build_client(session, store=logged_in_store(token="abc"))

    payload = client.get("/users/profile")

    assert payload["data"] == {"value": 1}
    call = session.calls[0]
    assert call["url"] == f"{API_BASE}/users/profile"
    assert call["headers"]["Authorization"] == "Bearer abc"
    assert call["headers"]["Content-Type"] == "application/json"
    assert call["timeout"] == 5


def test_no_authorization_header_without_token() -> None:
    session = FakeSession([ok()])
    client = build_client(session, store=InMemorySessionStore())

    client.post("/users/login", {"email": "a@b.c", "password": "pw"})

    call = session.calls[0]
    assert "Authorization" not in call["headers"]
    assert call["json"] == {"email": "a@b.c", "password": "pw"}


def test_unauthorized_clears_session_and_redirects_once() -> None:
    store = logged_in_store()
    redirect = RedirectRecorder()
    session = FakeSession([error(401, "token expired")])
    client = build_client(session, store=store, redirect=redirect)
    writes_before = store.write_count

    with pytest.raises(UnauthorizedError) as exc_info:
        client.get("/users/profile")

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "token expired"
    assert store.get_token() is None
    assert store.get_user_snapshot() is None
    assert store.write_count == writes_before + 1
    assert redirect.calls == 1


def test_unauthorized_without_eviction_keeps_session() -> None:
    store = logged_in_store(token="kept")
    redirect = RedirectRecorder()
    session = FakeSession([error(401, "invalid email or password")])
    client = build_client(session, store=store, redirect=redirect)
    writes_before = store.write_count

    with pytest.raises(UnauthorizedError, match="invalid email or password"):
        client.post("/users/login", {"email": "a@b.c"}, evict_on_unauthorized=False)

    assert store.get_token() == "kept"
    assert store.write_count == writes_before
    assert redirect.calls == 0


def test_other_client_errors_do_not_evict_session() -> None:
    store = logged_in_store()
    redirect = RedirectRecorder()
    session = FakeSession([error(403, "admin only")])
    client = build_client(session, store=store, redirect=redirect)

    with pytest.raises(ApiError) as exc_info:
        client.get("/admin/users")

    assert not isinstance(exc_info.value, UnauthorizedError)
    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "admin only"
    assert store.get_token() == "tok-123"
    assert redirect.calls == 0


def test_error_without_body_uses_generic_message() -> None:
    session = FakeSession([error(502)])
    client = build_client(session)

    with pytest.raises(ApiError, match="HTTP error! status: 502"):
        client.get("/products")


def test_transport_error_raises_unavailable_after_single_attempt() -> None:
    session = FakeSession([requests.ConnectionError("api down")])
    client = build_client(session)

    with pytest.raises(ApiUnavailableError):
        client.get("/products")

    assert len(session.calls) == 1


def test_non_json_success_body_raises_unavailable() -> None:
    session = FakeSession([FakeResponse(status_code=200)])
    client = build_client(session)

    with pytest.raises(ApiUnavailableError, match="valid JSON"):
        client.get("/products")


def test_clean_query_params_drops_unset_and_renders_booleans() -> None:
    cleaned = clean_query_params(
        {"offset": 0, "limit": 20, "brand": None, "is_featured": True, "is_active": False}
    )

    assert cleaned == {"offset": 0, "limit": 20, "is_featured": "true", "is_active": "false"}
    assert clean_query_params({"brand": None}) is None
    assert clean_query_params(None) is None
