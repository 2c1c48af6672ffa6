"""Application service owning the active-user pointer."""

import logging

from pydantic import ValidationError

from daybook.application.interfaces import SessionContext, UserRepository
from daybook.application.schemas import UserRegister
from daybook.domain.entities import User
from daybook.domain.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    InvalidRegistrationError,
)

logger = logging.getLogger(__name__)


class SessionManager(SessionContext):
    """Anonymous / Authenticated(user) state machine.

    One instance per session, injected into the record stores; there is no
    process-wide current user. The initial state is read once from the
    persisted pointer.
    """

    def __init__(self, users: UserRepository):
        self._users = users
        self._current: User | None = self._restore()

    def _restore(self) -> User | None:
        pointer = self._users.load_current()
        if pointer is None:
            return None
        for user in self._users.list_users():
            if user.id == pointer.id:
                logger.debug("Restored session for '%s'", user.username)
                return user
        logger.info("Persisted session points at unknown user %s, starting anonymous", pointer.id)
        return None

    # ── Observers ────────────────────────────────────────────────────

    def current_user(self) -> User | None:
        return self._current

    @property
    def user_id(self) -> str | None:
        return self._current.id if self._current else None

    @property
    def is_authenticated(self) -> bool:
        return self._current is not None

    def list_users(self) -> list[User]:
        return self._users.list_users()

    # ── Transitions ──────────────────────────────────────────────────

    def register(self, username: str, email: str, password: str) -> User:
        """Create an account. Does not sign it in.

        Raises InvalidRegistrationError for a blank username or password and
        DuplicateUsernameError if the username is taken.
        """
        try:
            data = UserRegister(username=username, email=email, password=password)
        except ValidationError as exc:
            reason = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
            )
            raise InvalidRegistrationError(username, reason) from exc

        users = self._users.list_users()
        if any(u.username == data.username for u in users):
            raise DuplicateUsernameError(data.username)

        user = User(username=data.username, email=data.email, password=data.password)
        users.append(user)
        self._users.save_users(users)
        logger.info("Registered user '%s' (%s)", user.username, user.id)
        return user

    def login(self, username: str, password: str) -> User:
        """Sign in with an exact username/password match.

        Raises InvalidCredentialsError when nothing matches.
        """
        for user in self._users.list_users():
            if user.matches(username, password):
                self._users.save_current(user)
                self._current = user
                logger.info("User '%s' signed in", username)
                return user
        logger.info("Rejected sign-in for '%s'", username)
        raise InvalidCredentialsError(username)

    def logout(self) -> None:
        if self._current is not None:
            logger.info("User '%s' signed out", self._current.username)
        self._current = None
        self._users.clear_current()
