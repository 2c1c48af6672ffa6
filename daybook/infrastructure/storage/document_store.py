"""Document collection backed by the key-value substrate."""

from datetime import datetime
from typing import Any

from daybook.application.interfaces import DocumentRepository
from daybook.application.schemas import DocumentCreate, DocumentUpdate
from daybook.domain.entities import Document
from daybook.infrastructure.storage.json_codec import dump_datetime, load_datetime
from daybook.infrastructure.storage.json_record_store import CategorizedRecordStore


class JsonDocumentStore(
    CategorizedRecordStore[Document, DocumentCreate, DocumentUpdate],
    DocumentRepository[DocumentCreate, DocumentUpdate],
):
    collection = "documents"
    entity_name = "Document"
    create_schema = DocumentCreate
    update_schema = DocumentUpdate

    def _to_entity(self, payload: dict[str, Any]) -> Document:
        folder_id = payload.get("folderId")
        return Document(
            id=str(payload["id"]),
            name=payload["name"],
            type=payload.get("type", ""),
            size=int(payload.get("size", 0)),
            category=payload.get("category", ""),
            content=payload.get("content"),
            file_data=payload.get("fileData"),
            upload_time=load_datetime(payload["uploadTime"]),
            user_id=payload["userId"],
            folder_id=str(folder_id) if folder_id is not None else None,
        )

    def _to_payload(self, record: Document) -> dict[str, Any]:
        return {
            "id": record.id,
            "name": record.name,
            "type": record.type,
            "size": record.size,
            "category": record.category,
            "content": record.content,
            "fileData": record.file_data,
            "uploadTime": dump_datetime(record.upload_time),
            "userId": record.user_id,
            "folderId": record.folder_id,
        }

    def _create(self, data: DocumentCreate, user_id: str, now: datetime) -> Document:
        return Document(
            name=data.name,
            type=data.type,
            size=data.size,
            category=data.category,
            content=data.content,
            file_data=data.file_data,
            folder_id=data.folder_id,
            upload_time=now,
            user_id=user_id,
        )

    def detach_from_folder(self, folder_id: str) -> int:
        documents = self.get_all()
        moved = 0
        for document in documents:
            if document.folder_id == folder_id:
                document.folder_id = None
                moved += 1
        self._save_all(documents)
        return moved
