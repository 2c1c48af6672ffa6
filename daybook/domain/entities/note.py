"""Domain entity for a markdown note."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from daybook.domain.identifiers import new_id


@dataclass
class Note:
    """Markdown note with a category and an ordered list of tags."""

    title: str
    user_id: str
    content: str = ""
    category: str = ""
    tags: list[str] = field(default_factory=list)
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def touch(self, now: datetime) -> None:
        """Refresh updated_at, never moving it before created_at."""
        self.updated_at = max(now, self.created_at)
