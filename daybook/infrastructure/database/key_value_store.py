"""Concrete KeyValueStore backed by a single SQLAlchemy table."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, sessionmaker

from daybook.application.interfaces import KeyValueStore
from daybook.infrastructure.database.models import KeyValueEntryModel

logger = logging.getLogger(__name__)


class SQLAlchemyKeyValueStore(KeyValueStore):
    """Implements the KeyValueStore port; each call runs in its own transaction."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def get(self, key: str) -> str | None:
        with self._session_factory() as session:
            model = session.get(KeyValueEntryModel, key)
            return model.value if model else None

    def set(self, key: str, value: str) -> None:
        with self._session_factory.begin() as session:
            model = session.get(KeyValueEntryModel, key)
            if model is None:
                session.add(KeyValueEntryModel(key=key, value=value))
            else:
                model.value = value
        logger.debug("Wrote '%s' (%d chars)", key, len(value))

    def remove(self, key: str) -> None:
        with self._session_factory.begin() as session:
            session.execute(delete(KeyValueEntryModel).where(KeyValueEntryModel.key == key))

    def keys(self) -> list[str]:
        with self._session_factory() as session:
            return list(session.scalars(select(KeyValueEntryModel.key).order_by(KeyValueEntryModel.key)))
