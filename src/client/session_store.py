# This file implements the client-local session store holding the bearer token and user snapshot.
# It exists so login, refresh, logout, and 401 eviction all write through one explicit abstraction.
# Values are kept as strings under fixed keys, mirroring a browser-style key/value storage.
# The file-backed store persists sessions between CLI invocations with atomic replace writes.

from __future__ import annotations

import json
import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any

LOGGER = logging.getLogger("storefront.session")

TOKEN_KEY = "auth_token"
USER_KEY = "user"


class SessionStore(ABC):
    """Key/value session storage with token and user snapshot accessors."""

    @abstractmethod
    def _load(self) -> dict[str, str]:
        """Return the full stored mapping."""

    @abstractmethod
    def _save(self, values: dict[str, str]) -> None:
        """Replace the full stored mapping in one write."""

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def get_token(self) -> str | None:
        token = self.get_item(TOKEN_KEY)
        return token or None

    def get_user_snapshot(self) -> dict[str, Any] | None:
        """Return the cached user as a dict, or None when absent or unparsable."""

        raw = self.get_item(USER_KEY)
        if not raw:
            return None
        try:
            user = json.loads(raw)
        except ValueError:
            LOGGER.debug("Ignoring unparsable user snapshot in session store")
            return None
        return user if isinstance(user, dict) else None

    def save_session(self, *, token: str, user: Mapping[str, Any]) -> None:
        values = self._load()
        values[TOKEN_KEY] = token
        values[USER_KEY] = json.dumps(dict(user), default=str)
        self._save(values)

    def set_token(self, token: str) -> None:
        values = self._load()
        values[TOKEN_KEY] = token
        self._save(values)

    def clear(self) -> None:
        values = self._load()
        values.pop(TOKEN_KEY, None)
        values.pop(USER_KEY, None)
        self._save(values)

    def has_token(self) -> bool:
        return self.get_token() is not None


class InMemorySessionStore(SessionStore):
    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})
        self.write_count = 0

    def _load(self) -> dict[str, str]:
        return dict(self._values)

    def _save(self, values: dict[str, str]) -> None:
        self._values = dict(values)
        self.write_count += 1


class FileSessionStore(SessionStore):
    """Session store persisted as a small JSON document on disk."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except ValueError:
            LOGGER.warning("Session file %s is not valid JSON; treating it as empty", self.path)
            return {}
        if not isinstance(payload, dict):
            return {}
        return {str(key): str(value) for key, value in payload.items() if value is not None}

    def _save(self, values: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_name(self.path.name + ".tmp")
        temp_path.write_text(json.dumps(values, indent=2, sort_keys=True), encoding="utf-8")
        os.replace(temp_path, self.path)
