"""Builds the folder forest shown next to the document list."""

from collections.abc import Iterable

from daybook.domain.entities import Folder, FolderNode


def build_folder_tree(folders: Iterable[Folder]) -> list[FolderNode]:
    """Assemble a flat folder list into a forest of FolderNode.

    Roots are folders without a parent. Children keep the input order.
    A folder whose parent is missing is left out entirely: it is neither
    a root nor anybody's child. No cycle detection is done.
    """
    folders = list(folders)
    nodes: dict[str, FolderNode] = {f.id: FolderNode(folder=f) for f in folders}

    roots: list[FolderNode] = []
    for folder in folders:
        node = nodes[folder.id]
        if folder.parent_id is None:
            roots.append(node)
            continue
        parent = nodes.get(folder.parent_id)
        if parent is not None:
            parent.children.append(node)
    return roots
