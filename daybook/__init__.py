"""Daybook — per-user todos, notes, documents, folders and bookmarks on a key-value store."""

from daybook.infrastructure.dependencies import Workspace, build_workspace
from daybook.infrastructure.logging.log_config import setup_logging

__all__ = ["Workspace", "build_workspace", "setup_logging"]
