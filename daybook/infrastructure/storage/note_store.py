"""Note collection backed by the key-value substrate."""

from datetime import datetime
from typing import Any

from daybook.application.schemas import NoteCreate, NoteUpdate
from daybook.domain.entities import Note
from daybook.infrastructure.storage.json_codec import dump_datetime, load_datetime
from daybook.infrastructure.storage.json_record_store import CategorizedRecordStore


class JsonNoteStore(CategorizedRecordStore[Note, NoteCreate, NoteUpdate]):
    collection = "notes"
    entity_name = "Note"
    create_schema = NoteCreate
    update_schema = NoteUpdate

    def _to_entity(self, payload: dict[str, Any]) -> Note:
        return Note(
            id=str(payload["id"]),
            title=payload["title"],
            content=payload.get("content", ""),
            category=payload.get("category", ""),
            tags=list(payload.get("tags") or []),
            created_at=load_datetime(payload["createdAt"]),
            updated_at=load_datetime(payload.get("updatedAt") or payload["createdAt"]),
            user_id=payload["userId"],
        )

    def _to_payload(self, record: Note) -> dict[str, Any]:
        return {
            "id": record.id,
            "title": record.title,
            "content": record.content,
            "category": record.category,
            "tags": list(record.tags),
            "createdAt": dump_datetime(record.created_at),
            "updatedAt": dump_datetime(record.updated_at),
            "userId": record.user_id,
        }

    def _create(self, data: NoteCreate, user_id: str, now: datetime) -> Note:
        return Note(
            title=data.title,
            content=data.content,
            category=data.category,
            tags=list(data.tags),
            created_at=now,
            updated_at=now,
            user_id=user_id,
        )

    def _after_update(self, record: Note, now: datetime) -> None:
        # updated_at is refreshed on every update, whatever the changes say
        record.touch(now)
