from .namespace_resolver import NamespaceResolver, GUEST_SCOPE
from .session_manager import SessionManager
from .folder_tree import build_folder_tree
from .document_folder_service import DocumentFolderService
from .statistics_service import StatisticsService

__all__ = [
    "NamespaceResolver",
    "GUEST_SCOPE",
    "SessionManager",
    "build_folder_tree",
    "DocumentFolderService",
    "StatisticsService",
]
