"""Abstract repositories for accounts and the logged-in session."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user import User

SESSION_STORAGE_KEY = "storefront-session"


class UserRepository(ABC):

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return the account registered with *email*, or None."""


class SessionRepository(ABC):

    @abstractmethod
    def current_user(self) -> User | None:
        """Return the logged-in user, or None."""

    @abstractmethod
    def start(self, user: User) -> None:
        """Remember *user* as logged in."""

    @abstractmethod
    def end(self) -> None:
        """Forget the logged-in user."""
