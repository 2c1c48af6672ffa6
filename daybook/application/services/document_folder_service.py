"""Application service for filing documents into folders."""

import logging

from daybook.application.interfaces import DocumentRepository, FolderRepository
from daybook.application.schemas import DocumentUpdate, FolderCreate
from daybook.application.services.folder_tree import build_folder_tree
from daybook.domain.entities import Document, Folder, FolderNode

logger = logging.getLogger(__name__)


class DocumentFolderService:
    """Composes the document and folder stores.

    References are never validated: a document may point at a folder id
    that does not exist, and deleting a folder leaves its grandchildren
    with a dangling parent_id.
    """

    def __init__(self, documents: DocumentRepository, folders: FolderRepository):
        self._documents = documents
        self._folders = folders

    def create_folder(self, name: str, parent_id: str | None = None) -> Folder:
        return self._folders.add(FolderCreate(name=name, parent_id=parent_id))

    def rename_folder(self, folder_id: str, name: str) -> Folder | None:
        return self._folders.update(folder_id, {"name": name})

    def folder_tree(self) -> list[FolderNode]:
        return build_folder_tree(self._folders.get_all())

    def documents_in(self, folder_id: str | None) -> list[Document]:
        """Documents whose folder_id equals folder_id exactly; None means root."""
        return [d for d in self._documents.get_all() if d.folder_id == folder_id]

    def move_document(self, document_id: str, target_folder_id: str | None) -> bool:
        moved = self._documents.update(document_id, DocumentUpdate(folder_id=target_folder_id))
        if moved is None:
            return False
        logger.debug("Moved document %s to folder %s", document_id, target_folder_id)
        return True

    def delete_folder(self, folder_id: str) -> bool:
        """Delete a folder and its direct child folders, then unfile its documents.

        Only one level cascades. Documents filed under the removed children
        keep their folder_id.
        """
        removed = self._folders.delete_with_children(folder_id)
        if not removed:
            return False
        unfiled = self._documents.detach_from_folder(folder_id)
        logger.info(
            "Deleted folder %s (%d folders removed, %d documents moved to root)",
            folder_id,
            len(removed),
            unfiled,
        )
        return True
