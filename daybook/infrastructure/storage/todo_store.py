"""Todo collection backed by the key-value substrate."""

from datetime import datetime
from typing import Any

from daybook.application.schemas import TodoCreate, TodoUpdate
from daybook.domain.entities import Todo
from daybook.infrastructure.storage.json_codec import dump_datetime, load_datetime
from daybook.infrastructure.storage.json_record_store import CategorizedRecordStore


class JsonTodoStore(CategorizedRecordStore[Todo, TodoCreate, TodoUpdate]):
    collection = "todos"
    entity_name = "Todo"
    create_schema = TodoCreate
    update_schema = TodoUpdate

    def _to_entity(self, payload: dict[str, Any]) -> Todo:
        return Todo(
            id=str(payload["id"]),
            title=payload["title"],
            description=payload.get("description"),
            category=payload.get("category", ""),
            completed=bool(payload.get("completed", False)),
            created_at=load_datetime(payload["createdAt"]),
            user_id=payload["userId"],
        )

    def _to_payload(self, record: Todo) -> dict[str, Any]:
        return {
            "id": record.id,
            "title": record.title,
            "description": record.description,
            "category": record.category,
            "completed": record.completed,
            "createdAt": dump_datetime(record.created_at),
            "userId": record.user_id,
        }

    def _create(self, data: TodoCreate, user_id: str, now: datetime) -> Todo:
        return Todo(
            title=data.title,
            description=data.description,
            category=data.category,
            completed=data.completed,
            created_at=now,
            user_id=user_id,
        )
