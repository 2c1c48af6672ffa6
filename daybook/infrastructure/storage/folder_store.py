"""Folder collection backed by the key-value substrate."""

import logging
from datetime import datetime
from typing import Any

from daybook.application.interfaces import FolderRepository
from daybook.application.schemas import FolderCreate, FolderUpdate
from daybook.domain.entities import Folder
from daybook.infrastructure.storage.json_codec import dump_datetime, load_datetime
from daybook.infrastructure.storage.json_record_store import JsonRecordStore

logger = logging.getLogger(__name__)


class JsonFolderStore(
    JsonRecordStore[Folder, FolderCreate, FolderUpdate],
    FolderRepository[FolderCreate, FolderUpdate],
):
    collection = "folders"
    entity_name = "Folder"
    create_schema = FolderCreate
    update_schema = FolderUpdate

    def _to_entity(self, payload: dict[str, Any]) -> Folder:
        parent_id = payload.get("parentId")
        return Folder(
            id=str(payload["id"]),
            name=payload["name"],
            parent_id=str(parent_id) if parent_id is not None else None,
            created_at=load_datetime(payload["createdAt"]),
            user_id=payload["userId"],
        )

    def _to_payload(self, record: Folder) -> dict[str, Any]:
        return {
            "id": record.id,
            "name": record.name,
            "parentId": record.parent_id,
            "createdAt": dump_datetime(record.created_at),
            "userId": record.user_id,
        }

    def _create(self, data: FolderCreate, user_id: str, now: datetime) -> Folder:
        return Folder(
            name=data.name,
            parent_id=data.parent_id,
            created_at=now,
            user_id=user_id,
        )

    def delete_with_children(self, folder_id: str) -> list[Folder]:
        folders = self.get_all()
        if not any(f.id == folder_id for f in folders):
            return []

        removed = [f for f in folders if f.id == folder_id or f.parent_id == folder_id]
        remaining = [f for f in folders if f.id != folder_id and f.parent_id != folder_id]
        self._save_all(remaining)
        logger.debug("Removed folders %s", [f.id for f in removed])
        return removed
