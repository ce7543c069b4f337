"""
Shared test configuration.
It pins the storefront environment so settings never depend on the developer's shell or `.env`.
These tests are executed by `pytest` locally and in CI and should remain deterministic.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


@pytest.fixture(autouse=True)
def base_test_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Ensure storefront environment variables point at test-only values."""

    defaults = {
        "STOREFRONT_API_URL": "http://api.test",
        "STOREFRONT_PAYMENT_API_URL": "http://payments.test",
        "STOREFRONT_API_VERSION_PATH": "/api/v1",
        "STOREFRONT_REQUEST_TIMEOUT_SECONDS": "5",
        "STOREFRONT_SESSION_FILE": str(tmp_path / "session.json"),
        "STOREFRONT_LOGIN_URL": "/login",
        "STOREFRONT_STRICT_PLACEHOLDERS": "false",
        "LOG_LEVEL": "INFO",
    }

    for key, value in defaults.items():
        monkeypatch.setenv(key, value)
