"""Account lookup over the static user list, and the stored login session."""

from __future__ import annotations

import json
import logging

from storefront.domain.model.user import Role, User
from storefront.domain.repository.user_repository import (
    SESSION_STORAGE_KEY,
    SessionRepository,
    UserRepository,
)
from storefront.infrastructure.persistence.local_storage import LocalStorage

logger = logging.getLogger(__name__)


def _user_from_raw(raw: dict) -> User:
    return User(
        id=str(raw["id"]),
        name=raw["name"],
        email=raw["email"],
        role=Role(raw.get("role", "user")),
    )


def _user_to_raw(user: User) -> dict:
    return {"id": user.id, "name": user.name, "email": user.email, "role": user.role.value}


class StaticUserRepository(UserRepository):
    """Read-only accounts from the seed list."""

    def __init__(self, users: list[dict]) -> None:
        self._users = [_user_from_raw(raw) for raw in users]

    def get_by_email(self, email: str) -> User | None:
        for user in self._users:
            if user.email.lower() == email.lower():
                return user
        return None


class StoredSessionRepository(SessionRepository):
    """Logged-in user kept in LocalStorage under ``SESSION_STORAGE_KEY``."""

    def __init__(self, storage: LocalStorage, key: str = SESSION_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key

    def current_user(self) -> User | None:
        payload = self._storage.get(self._key)
        if payload is None:
            return None
        try:
            return _user_from_raw(json.loads(payload))
        except (ValueError, KeyError, TypeError) as exc:
            logger.warning("Discarding unreadable session: %s", exc)
            return None

    def start(self, user: User) -> None:
        self._storage.set(self._key, json.dumps(_user_to_raw(user)))

    def end(self) -> None:
        self._storage.remove(self._key)
