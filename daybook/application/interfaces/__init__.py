from .key_value_store import KeyValueStore
from .user_repository import UserRepository
from .session_context import SessionContext, KeyNamespace
from .record_repository import RecordRepository, FolderRepository, DocumentRepository

__all__ = [
    "KeyValueStore",
    "UserRepository",
    "SessionContext",
    "KeyNamespace",
    "RecordRepository",
    "FolderRepository",
    "DocumentRepository",
]
