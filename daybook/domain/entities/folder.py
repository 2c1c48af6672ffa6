"""Domain entities for the document folder hierarchy."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone

from daybook.domain.identifiers import new_id


@dataclass
class Folder:
    """A folder; parent_id None means the folder sits at the root."""

    name: str
    user_id: str
    parent_id: str | None = None
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class FolderNode:
    """A folder together with its direct children, as built for display."""

    folder: Folder
    children: list["FolderNode"] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.folder.id

    @property
    def name(self) -> str:
        return self.folder.name

    def walk(self) -> Iterator["FolderNode"]:
        """Yield this node and its descendants depth-first, pre-order.

        There is no visited set: the tree must be acyclic.
        """
        yield self
        for child in self.children:
            yield from child.walk()
