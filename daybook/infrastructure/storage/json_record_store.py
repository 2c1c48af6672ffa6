"""Generic user-scoped record store on top of the key-value substrate.

Storage layout:
    <userId>_<collection>   JSON array of records, one per kind
    guest_<collection>      the same while nobody is signed in

Every mutation reads the full collection, changes it in memory and writes
the whole array back. Concurrent writers from separate processes can lose
updates; nothing guards against that.
"""

import json
import logging
from abc import abstractmethod
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any, ClassVar

from pydantic import BaseModel

from daybook.application.interfaces import (
    KeyNamespace,
    KeyValueStore,
    RecordRepository,
    SessionContext,
)
from daybook.application.interfaces.record_repository import CreateT, T, UpdateT
from daybook.domain.exceptions import StorageWriteError, UnauthenticatedError

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JsonRecordStore(RecordRepository[T, CreateT, UpdateT]):
    """Implements the RecordRepository port for one record kind.

    Subclasses name their collection and schemas, and map between the
    entity and its stored JSON object.
    """

    collection: ClassVar[str]
    entity_name: ClassVar[str]
    create_schema: ClassVar[type[BaseModel]]
    update_schema: ClassVar[type[BaseModel]]

    def __init__(
        self,
        store: KeyValueStore,
        session: SessionContext,
        resolver: KeyNamespace,
        clock: Clock = utcnow,
    ):
        self._store = store
        self._session = session
        self._resolver = resolver
        self._clock = clock

    # ── Mapping hooks ───────────────────────────────────────────────

    @abstractmethod
    def _to_entity(self, payload: dict[str, Any]) -> T:
        """Map stored JSON object → domain entity."""
        ...

    @abstractmethod
    def _to_payload(self, record: T) -> dict[str, Any]:
        """Map domain entity → stored JSON object."""
        ...

    @abstractmethod
    def _create(self, data: CreateT, user_id: str, now: datetime) -> T:
        """Build a new entity owned by user_id and stamped with now."""
        ...

    def _after_update(self, record: T, now: datetime) -> None:
        """Hook run after changes are merged into a record."""

    # ── Keys ────────────────────────────────────────────────────────

    @property
    def key(self) -> str:
        """Substrate key of the active user's collection."""
        return self._resolver.resolve(self.collection, self._session.user_id)

    def key_for(self, user_id: str | None) -> str:
        return self._resolver.resolve(self.collection, user_id)

    # ── Reads ───────────────────────────────────────────────────────

    def get_all(self) -> list[T]:
        return self._load(self.key)

    def get(self, record_id: str) -> T | None:
        return next((r for r in self.get_all() if r.id == record_id), None)

    def _load(self, key: str) -> list[T]:
        raw = self._store.get(key)
        if raw is None:
            return []
        try:
            return [self._to_entity(item) for item in json.loads(raw)]
        except (ValueError, TypeError, KeyError, AttributeError, RecursionError) as exc:
            logger.warning(
                "Treating unreadable %s collection '%s' as empty: %s",
                self.entity_name,
                key,
                exc,
            )
            return []

    # ── Writes ──────────────────────────────────────────────────────

    def _save_all(self, records: list[T]) -> None:
        key = self.key
        raw = json.dumps([self._to_payload(r) for r in records], ensure_ascii=False)
        try:
            self._store.set(key, raw)
        except Exception as exc:
            logger.error("Error saving %s collection '%s': %s", self.entity_name, key, exc)
            raise StorageWriteError(key, exc) from exc

    def add(self, data: CreateT | Mapping[str, Any]) -> T:
        user = self._session.current_user()
        if user is None:
            raise UnauthenticatedError(f"add a {self.entity_name}")

        data = self._coerce(self.create_schema, data)
        records = self.get_all()
        record = self._create(data, user.id, self._clock())
        records.append(record)
        self._save_all(records)
        logger.debug("Added %s %s for user %s", self.entity_name, record.id, user.id)
        return record

    def update(self, record_id: str, changes: UpdateT | Mapping[str, Any]) -> T | None:
        changes = self._coerce(self.update_schema, changes)
        records = self.get_all()
        record = next((r for r in records if r.id == record_id), None)
        if record is None:
            return None

        for name, value in changes.model_dump(exclude_unset=True).items():
            setattr(record, name, value)
        self._after_update(record, self._clock())
        self._save_all(records)
        return record

    def delete(self, record_id: str) -> bool:
        records = self.get_all()
        remaining = [r for r in records if r.id != record_id]
        if len(remaining) == len(records):
            return False
        self._save_all(remaining)
        return True

    def clear(self) -> None:
        """Drop the active user's whole collection."""
        self._store.remove(self.key)

    @staticmethod
    def _coerce(schema: type[BaseModel], data: Any) -> Any:
        if isinstance(data, schema):
            return data
        if isinstance(data, BaseModel):
            return schema.model_validate(data.model_dump(exclude_unset=True))
        return schema.model_validate(data)


class CategorizedRecordStore(JsonRecordStore[T, CreateT, UpdateT]):
    """Record store for kinds that carry a ``category`` field."""

    def by_category(self, category: str | None = None) -> list[T]:
        """Records in the given category; None returns everything."""
        records = self.get_all()
        if category is None:
            return records
        return [r for r in records if r.category == category]

    def categories(self) -> list[str]:
        """Distinct categories in first-seen order."""
        return list(dict.fromkeys(r.category for r in self.get_all()))
