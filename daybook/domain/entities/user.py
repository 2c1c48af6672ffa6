"""Domain entity for an account that owns records."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from daybook.domain.identifiers import new_id


@dataclass
class User:
    """A registered account.

    The password is kept and compared as plain text.
    """

    username: str
    email: str
    password: str
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def matches(self, username: str, password: str) -> bool:
        """Exact string comparison of both credentials."""
        return self.username == username and self.password == password
