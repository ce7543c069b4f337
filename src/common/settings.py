"""
Client settings loaded from environment variables.
It centralizes the backend endpoints, session file location, and logging level used by the services.
Keeping these values in one typed model avoids hard-coded URLs scattered across the service modules.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

DEFAULT_API_URL = "http://localhost:8081"
DEFAULT_PAYMENT_API_URL = "http://localhost:8084"
DEFAULT_SESSION_FILE = "~/.storefront/session.json"


class ClientSettings(BaseModel):
    """Typed runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    api_url: str = DEFAULT_API_URL
    payment_api_url: str = DEFAULT_PAYMENT_API_URL
    api_version_path: str = "/api/v1"
    request_timeout_seconds: int = 30
    session_file: Path = Path(DEFAULT_SESSION_FILE).expanduser()
    login_url: str = "/login"
    strict_placeholders: bool = False
    log_level: str = "INFO"

    @field_validator("api_url", "payment_api_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"Base URL must start with http:// or https://, got {value!r}")
        return value.rstrip("/")

    @field_validator("api_version_path")
    @classmethod
    def validate_api_version_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("api_version_path must start with '/'.")
        parts = [part for part in value.split("/") if part]
        if len(parts) < 2 or parts[-1].startswith("v") is False:
            raise ValueError("api_version_path must look like '/api/v1'.")
        return value.rstrip("/")

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_timeout(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be greater than 0.")
        return value

    @property
    def api_base_url(self) -> str:
        return f"{self.api_url}{self.api_version_path}"

    @property
    def payment_base_url(self) -> str:
        return f"{self.payment_api_url}{self.api_version_path}"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be boolean-like, got {raw!r}")


def load_settings(*, load_env: bool = True) -> ClientSettings:
    """Load and validate client settings from `.env` and process environment."""

    if load_env:
        load_dotenv()

    try:
        values: dict[str, object] = {
            "api_url": os.getenv("STOREFRONT_API_URL", DEFAULT_API_URL),
            "payment_api_url": os.getenv("STOREFRONT_PAYMENT_API_URL", DEFAULT_PAYMENT_API_URL),
            "api_version_path": os.getenv("STOREFRONT_API_VERSION_PATH", "/api/v1"),
            "request_timeout_seconds": os.getenv("STOREFRONT_REQUEST_TIMEOUT_SECONDS", "30"),
            "session_file": Path(
                os.getenv("STOREFRONT_SESSION_FILE", DEFAULT_SESSION_FILE)
            ).expanduser(),
            "login_url": os.getenv("STOREFRONT_LOGIN_URL", "/login"),
            "strict_placeholders": _env_bool("STOREFRONT_STRICT_PLACEHOLDERS", False),
            "log_level": os.getenv("LOG_LEVEL", "INFO"),
        }
        return ClientSettings.model_validate(values)
    except (ValidationError, ValueError) as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> ClientSettings:
    """Cached accessor for client settings."""

    return load_settings()
