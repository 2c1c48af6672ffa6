"""Helpers for the JSON layout of stored records (camelCase keys, ISO timestamps)."""

from datetime import datetime, timezone
from typing import Any


def dump_datetime(value: datetime) -> str:
    return value.isoformat()


def load_datetime(raw: Any) -> datetime:
    """Parse an ISO timestamp; naive values are taken as UTC."""
    if isinstance(raw, datetime):
        parsed = raw
    else:
        parsed = datetime.fromisoformat(str(raw))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
