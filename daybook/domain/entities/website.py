"""Domain entity for a bookmarked website."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from daybook.domain.identifiers import new_id


@dataclass
class Website:
    """A bookmark; ``position`` is its rank in the user's ordering."""

    name: str
    url: str
    user_id: str
    icon: str = ""
    category: str = ""
    description: str | None = None
    position: int = 0
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
