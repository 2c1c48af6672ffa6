from .memory_key_value_store import InMemoryKeyValueStore
from .json_user_store import JsonUserStore
from .json_record_store import JsonRecordStore, CategorizedRecordStore
from .todo_store import JsonTodoStore
from .note_store import JsonNoteStore
from .folder_store import JsonFolderStore
from .document_store import JsonDocumentStore
from .website_store import JsonWebsiteStore

__all__ = [
    "InMemoryKeyValueStore",
    "JsonUserStore",
    "JsonRecordStore",
    "CategorizedRecordStore",
    "JsonTodoStore",
    "JsonNoteStore",
    "JsonFolderStore",
    "JsonDocumentStore",
    "JsonWebsiteStore",
]
