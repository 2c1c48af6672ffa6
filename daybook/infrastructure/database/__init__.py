from .base import Base
from .session import create_storage_engine, create_session_factory
from .key_value_store import SQLAlchemyKeyValueStore
from .models import KeyValueEntryModel

__all__ = [
    "Base",
    "create_storage_engine",
    "create_session_factory",
    "SQLAlchemyKeyValueStore",
    "KeyValueEntryModel",
]
