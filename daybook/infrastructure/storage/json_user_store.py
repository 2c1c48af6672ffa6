"""Concrete user repository on top of the key-value substrate."""

import json
import logging
from typing import Any

from daybook.application.interfaces import KeyValueStore, UserRepository
from daybook.domain.entities import User
from daybook.domain.exceptions import StorageWriteError
from daybook.infrastructure.storage.json_codec import dump_datetime, load_datetime

logger = logging.getLogger(__name__)

USERS_KEY = "users"
CURRENT_USER_KEY = "currentUser"


class JsonUserStore(UserRepository):
    """Keeps all users under ``users`` and the active one under ``currentUser``."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def _to_entity(self, payload: dict[str, Any]) -> User:
        return User(
            id=str(payload["id"]),
            username=payload["username"],
            email=payload.get("email", ""),
            password=payload["password"],
            created_at=load_datetime(payload["createdAt"]),
        )

    def _to_payload(self, user: User) -> dict[str, Any]:
        return {
            "id": user.id,
            "username": user.username,
            "email": user.email,
            "password": user.password,
            "createdAt": dump_datetime(user.created_at),
        }

    def list_users(self) -> list[User]:
        raw = self._store.get(USERS_KEY)
        if raw is None:
            return []
        try:
            return [self._to_entity(item) for item in json.loads(raw)]
        except (ValueError, TypeError, KeyError, RecursionError) as exc:
            logger.warning("Ignoring unreadable user list: %s", exc)
            return []

    def save_users(self, users: list[User]) -> None:
        self._write(USERS_KEY, [self._to_payload(u) for u in users])

    def load_current(self) -> User | None:
        raw = self._store.get(CURRENT_USER_KEY)
        if raw is None:
            return None
        try:
            return self._to_entity(json.loads(raw))
        except (ValueError, TypeError, KeyError, RecursionError) as exc:
            logger.warning("Ignoring unreadable current user: %s", exc)
            return None

    def save_current(self, user: User) -> None:
        self._write(CURRENT_USER_KEY, self._to_payload(user))

    def clear_current(self) -> None:
        self._store.remove(CURRENT_USER_KEY)

    def _write(self, key: str, payload: Any) -> None:
        try:
            self._store.set(key, json.dumps(payload, ensure_ascii=False))
        except Exception as exc:
            logger.error("Error saving '%s': %s", key, exc)
            raise StorageWriteError(key, exc) from exc
