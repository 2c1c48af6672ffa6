from .user import UserRegister
from .todo import TodoCreate, TodoUpdate
from .note import NoteCreate, NoteUpdate
from .folder import FolderCreate, FolderUpdate
from .document import DocumentCreate, DocumentUpdate
from .website import WebsiteCreate, WebsiteUpdate, favicon_for

__all__ = [
    "UserRegister",
    "TodoCreate",
    "TodoUpdate",
    "NoteCreate",
    "NoteUpdate",
    "FolderCreate",
    "FolderUpdate",
    "DocumentCreate",
    "DocumentUpdate",
    "WebsiteCreate",
    "WebsiteUpdate",
    "favicon_for",
]
