"""SQLAlchemy ORM model for one entry of the key-value substrate."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from daybook.infrastructure.database.base import Base


class KeyValueEntryModel(Base):
    """ORM model — maps to the 'kv_entries' table."""

    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<KeyValueEntryModel(key='{self.key}', size={len(self.value)})>"
