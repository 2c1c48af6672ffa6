"""Abstract ports the record stores use to find the active user's keys."""

from abc import ABC, abstractmethod

from daybook.domain.entities import User


class SessionContext(ABC):
    """Port exposing who is signed in, implemented by the session service."""

    @abstractmethod
    def current_user(self) -> User | None:
        ...

    @property
    @abstractmethod
    def user_id(self) -> str | None:
        """Id of the signed-in user, None while anonymous."""
        ...


class KeyNamespace(ABC):
    """Port mapping a collection name to a per-user substrate key."""

    @abstractmethod
    def resolve(self, collection: str, user_id: str | None) -> str:
        ...
