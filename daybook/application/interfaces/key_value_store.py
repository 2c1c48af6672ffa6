"""Abstract port for the flat string key-value substrate."""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Durable, synchronous string store, implemented in the infrastructure layer.

    No transactions and no partial writes: callers rewrite whole values.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under key, or None if absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete key. Removing an absent key is a no-op."""
        ...
