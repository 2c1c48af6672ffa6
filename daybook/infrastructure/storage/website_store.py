"""Website bookmarks backed by the key-value substrate."""

import logging
from datetime import datetime
from typing import Any

from daybook.application.schemas import WebsiteCreate, WebsiteUpdate
from daybook.domain.entities import Website
from daybook.infrastructure.storage.json_codec import dump_datetime, load_datetime
from daybook.infrastructure.storage.json_record_store import CategorizedRecordStore

logger = logging.getLogger(__name__)


class JsonWebsiteStore(CategorizedRecordStore[Website, WebsiteCreate, WebsiteUpdate]):
    """Bookmarks kept in a user-defined order.

    New bookmarks go to the end; ``delete`` and ``reorder`` keep positions
    dense at 0..n-1.
    """

    collection = "websites"
    entity_name = "Website"
    create_schema = WebsiteCreate
    update_schema = WebsiteUpdate

    def _to_entity(self, payload: dict[str, Any]) -> Website:
        return Website(
            id=str(payload["id"]),
            name=payload["name"],
            url=payload["url"],
            icon=payload.get("icon", ""),
            category=payload.get("category", ""),
            description=payload.get("description"),
            position=int(payload.get("position", 0)),
            created_at=load_datetime(payload["createdAt"]),
            user_id=payload["userId"],
        )

    def _to_payload(self, record: Website) -> dict[str, Any]:
        return {
            "id": record.id,
            "name": record.name,
            "url": record.url,
            "icon": record.icon,
            "category": record.category,
            "description": record.description,
            "position": record.position,
            "createdAt": dump_datetime(record.created_at),
            "userId": record.user_id,
        }

    def _create(self, data: WebsiteCreate, user_id: str, now: datetime) -> Website:
        return Website(
            name=data.name,
            url=data.url,
            icon=data.icon,
            category=data.category,
            description=data.description,
            position=len(self.get_all()),
            created_at=now,
            user_id=user_id,
        )

    def list_ordered(self) -> list[Website]:
        return sorted(self.get_all(), key=lambda w: w.position)

    def list_for_user(self, user_id: str) -> list[Website]:
        """Read another user's bookmarks directly, ordered by position."""
        return sorted(self._load(self.key_for(user_id)), key=lambda w: w.position)

    def save(self, website: Website) -> Website:
        """Insert or replace a full bookmark record by id."""
        websites = self.get_all()
        for index, existing in enumerate(websites):
            if existing.id == website.id:
                websites[index] = website
                break
        else:
            websites.append(website)
        self._save_all(websites)
        return website

    def reorder(self, website_id: str, new_index: int) -> bool:
        """Move one bookmark to new_index and renumber every position densely.

        Returns False if website_id is unknown.
        """
        ordered = self.list_ordered()
        old_index = next((i for i, w in enumerate(ordered) if w.id == website_id), None)
        if old_index is None:
            return False

        moved = ordered.pop(old_index)
        new_index = max(0, min(new_index, len(ordered)))
        ordered.insert(new_index, moved)
        for position, website in enumerate(ordered):
            website.position = position
        self._save_all(ordered)
        logger.debug("Moved website %s from %d to %d", website_id, old_index, new_index)
        return True

    def delete(self, website_id: str) -> bool:
        """Remove one bookmark and close the gap it leaves in the positions."""
        ordered = self.list_ordered()
        remaining = [w for w in ordered if w.id != website_id]
        if len(remaining) == len(ordered):
            return False
        for position, website in enumerate(remaining):
            website.position = position
        self._save_all(remaining)
        return True
