"""Abstract repository interface (port) for accounts and the active-user pointer."""

from abc import ABC, abstractmethod

from daybook.domain.entities import User


class UserRepository(ABC):
    """Port for the global user list, which is not scoped to any user."""

    @abstractmethod
    def list_users(self) -> list[User]:
        """Return every registered user; empty if nothing readable is stored."""
        ...

    @abstractmethod
    def save_users(self, users: list[User]) -> None:
        """Rewrite the whole user list."""
        ...

    @abstractmethod
    def load_current(self) -> User | None:
        """Return the persisted active user, or None if absent or unreadable."""
        ...

    @abstractmethod
    def save_current(self, user: User) -> None:
        ...

    @abstractmethod
    def clear_current(self) -> None:
        ...
