"""In-process key-value substrate, used for tests and throwaway sessions."""

from daybook.application.interfaces import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Dictionary-backed KeyValueStore. Nothing survives the process."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)
