# This test file exercises the storefront command line entry point end to end with a fake backend.
# It exists so login caching, whoami, and logout keep working against the file-backed session store.

from __future__ import annotations

import json

import pytest

from src import cli
from src.common.settings import ClientSettings, load_settings
from src.services.dependencies import StorefrontServices, build_services
from tests.support import FakeSession, basket_item_payload, basket_payload, ok, user_payload


def _patch_services(monkeypatch: pytest.MonkeyPatch, session: FakeSession) -> None:
    settings = load_settings(load_env=False)

    def _build(_: ClientSettings) -> StorefrontServices:
        return build_services(settings, http_session=session)

    monkeypatch.setattr(cli, "build_services", _build)


def test_login_whoami_logout_flow(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    session = FakeSession([ok({"user": user_payload(role="admin"), "token": "cli-token"})])
    _patch_services(monkeypatch, session)

    assert cli.main(["login", "--email", "ada@example.com", "--password", "pw"]) == 0
    assert "Logged in as ada@example.com (admin)" in capsys.readouterr().out

    assert cli.main(["whoami"]) == 0
    assert json.loads(capsys.readouterr().out)["email"] == "ada@example.com"

    assert cli.main(["logout"]) == 0
    capsys.readouterr()
    assert cli.main(["whoami"]) == 1
    assert "Not logged in." in capsys.readouterr().out


def test_basket_without_session_reports_error(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    session = FakeSession()
    _patch_services(monkeypatch, session)

    assert cli.main(["basket"]) == 1
    assert "User not authenticated" in capsys.readouterr().err
    assert session.calls == []


def test_basket_prints_items(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    basket = basket_payload(items=[basket_item_payload(product_id=3, quantity=2, unit_price=4.5)])
    session = FakeSession([ok({"user": user_payload(), "token": "t"}), ok(basket)])
    _patch_services(monkeypatch, session)

    cli.main(["login", "--email", "ada@example.com", "--password", "pw"])
    capsys.readouterr()

    assert cli.main(["basket"]) == 0
    output = capsys.readouterr().out
    assert "product 3: 2 x 4.50 = 9.00" in output
    assert "2 item(s), total 9.00" in output
