"""Domain entity for a todo item."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from daybook.domain.identifiers import new_id


@dataclass
class Todo:
    """A single task on a user's list."""

    title: str
    user_id: str
    category: str = ""
    completed: bool = False
    description: str | None = None
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
