"""Domain entity for an uploaded document."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import PurePath

from daybook.domain.identifiers import new_id

PREVIEW_LIMIT = 1000

_TYPE_BY_EXTENSION = {
    ".pdf": "PDF",
    ".doc": "Word",
    ".docx": "Word",
    ".xls": "Excel",
    ".xlsx": "Excel",
    ".txt": "Text",
}
OTHER_TYPE = "Other"


def file_type_for(filename: str) -> str:
    """Map a filename to its document type tag by extension."""
    return _TYPE_BY_EXTENSION.get(PurePath(filename).suffix.lower(), OTHER_TYPE)


@dataclass
class Document:
    """An uploaded file, optionally filed under a folder.

    ``file_data`` holds the payload as base64 text; ``content`` is a short
    text preview.
    """

    name: str
    type: str
    size: int
    category: str
    user_id: str
    content: str | None = None
    file_data: str | None = None
    folder_id: str | None = None
    id: str = field(default_factory=new_id)
    upload_time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
