from .user import User
from .todo import Todo
from .note import Note
from .folder import Folder, FolderNode
from .document import Document, PREVIEW_LIMIT, file_type_for
from .website import Website
from .statistics import DashboardStats

__all__ = [
    "User",
    "Todo",
    "Note",
    "Folder",
    "FolderNode",
    "Document",
    "PREVIEW_LIMIT",
    "file_type_for",
    "Website",
    "DashboardStats",
]
