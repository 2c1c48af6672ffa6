"""Abstract repository interfaces (ports) for user-scoped record collections."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from daybook.domain.entities import Document, Folder

T = TypeVar("T")
CreateT = TypeVar("CreateT", bound=BaseModel)
UpdateT = TypeVar("UpdateT", bound=BaseModel)


class RecordRepository(ABC, Generic[T, CreateT, UpdateT]):
    """Port for one kind of record owned by the signed-in user.

    Every mutation rewrites the whole collection of the active user.
    """

    @abstractmethod
    def get_all(self) -> list[T]:
        """Return the collection in stored order; empty if absent or unreadable."""
        ...

    @abstractmethod
    def get(self, record_id: str) -> T | None:
        ...

    @abstractmethod
    def add(self, data: CreateT | Mapping[str, Any]) -> T:
        """Stamp id, timestamps and owner, append, persist and return the record.

        Raises UnauthenticatedError when nobody is signed in.
        """
        ...

    @abstractmethod
    def update(self, record_id: str, changes: UpdateT | Mapping[str, Any]) -> T | None:
        """Shallow-merge the fields set in ``changes``. Returns None if not found."""
        ...

    @abstractmethod
    def delete(self, record_id: str) -> bool:
        """Remove a record. Returns True if deleted, False if not found."""
        ...


class FolderRepository(RecordRepository[Folder, CreateT, UpdateT]):
    """Folder collection with the one cascading delete rule."""

    @abstractmethod
    def delete_with_children(self, folder_id: str) -> list[Folder]:
        """Drop the folder and its direct children in one rewrite.

        Returns the removed folders, empty if folder_id does not exist.
        """
        ...


class DocumentRepository(RecordRepository[Document, CreateT, UpdateT]):
    @abstractmethod
    def detach_from_folder(self, folder_id: str) -> int:
        """Move every document filed under folder_id to the root.

        Returns how many documents were moved.
        """
        ...
