"""Application services: mock Login, Register and Logout.

Accounts come from a static list; there are no real credentials.  A
login succeeds for any known email with a password of at least
``MIN_PASSWORD_LENGTH`` characters.  Registration never touches the
static list; the new account only lives in the session.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.user import Role, User
from storefront.domain.repository.user_repository import SessionRepository, UserRepository

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class LoginHandler:

    def __init__(self, user_repo: UserRepository, session_repo: SessionRepository) -> None:
        self._user_repo = user_repo
        self._session_repo = session_repo

    def handle(self, email: str, password: str) -> User | None:
        """Log in and return the user, or None on bad credentials."""
        user = self._user_repo.get_by_email(email.strip())
        if user is None or len(password) < MIN_PASSWORD_LENGTH:
            logger.info("Login rejected for %s", email)
            return None
        self._session_repo.start(user)
        return user


class RegisterHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        session_repo: SessionRepository,
        id_factory: Callable[[], str] = lambda: uuid.uuid4().hex,
    ) -> None:
        self._user_repo = user_repo
        self._session_repo = session_repo
        self._id_factory = id_factory

    def handle(self, name: str, email: str, password: str) -> User | None:
        """Create an account and log it in; None if the email is taken."""
        if not name or not name.strip():
            raise ValidationError("Name is required")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        if self._user_repo.get_by_email(email.strip()) is not None:
            return None

        user = User(id=self._id_factory(), name=name.strip(), email=email.strip(), role=Role.USER)
        self._session_repo.start(user)
        return user


class LogoutHandler:

    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def handle(self) -> None:
        self._session_repo.end()
