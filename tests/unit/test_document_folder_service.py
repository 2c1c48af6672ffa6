"""Unit tests for filing, moving and deleting folders via DocumentFolderService."""

import pytest

from daybook.config import Settings
from daybook.infrastructure.dependencies import Workspace, build_workspace
from daybook.infrastructure.storage import InMemoryKeyValueStore


@pytest.fixture
def workspace() -> Workspace:
    ws = build_workspace(settings=Settings(storage_url="memory://"), store=InMemoryKeyValueStore())
    ws.session.register("alice", "", "pw")
    ws.session.login("alice", "pw")
    return ws


def _chain(ws: Workspace):
    """Folders root → child → grandchild plus an orphan."""
    root = ws.library.create_folder("root")
    child = ws.library.create_folder("child", root.id)
    grandchild = ws.library.create_folder("grandchild", child.id)
    orphan = ws.library.create_folder("orphan", "99")
    return root, child, grandchild, orphan


def test_folder_tree_from_store(workspace: Workspace):
    root, child, grandchild, orphan = _chain(workspace)
    [node] = workspace.library.folder_tree()
    assert node.id == root.id
    assert [n.id for n in node.walk()] == [root.id, child.id, grandchild.id]


def test_documents_in_root_and_folder(workspace: Workspace):
    folder = workspace.library.create_folder("Reports")
    loose = workspace.documents.add({"name": "readme.txt"})
    filed = workspace.documents.add({"name": "q3.pdf", "folder_id": folder.id})

    assert workspace.library.documents_in(None) == [loose]
    assert workspace.library.documents_in(folder.id) == [filed]


def test_move_to_nonexistent_folder_succeeds(workspace: Workspace):
    document = workspace.documents.add({"name": "notes.txt"})
    assert workspace.library.move_document(document.id, "does-not-exist") is True
    assert [d.id for d in workspace.library.documents_in("does-not-exist")] == [document.id]
    assert workspace.library.documents_in(None) == []


def test_move_back_to_root(workspace: Workspace):
    folder = workspace.library.create_folder("Inbox")
    document = workspace.documents.add({"name": "a.pdf", "folder_id": folder.id})
    assert workspace.library.move_document(document.id, None) is True
    assert workspace.documents.get(document.id).folder_id is None


def test_move_unknown_document(workspace: Workspace):
    assert workspace.library.move_document("missing", None) is False


def test_delete_folder_removes_direct_children_only(workspace: Workspace):
    root, child, grandchild, orphan = _chain(workspace)

    assert workspace.library.delete_folder(root.id) is True

    remaining = {f.id: f for f in workspace.folders.get_all()}
    assert root.id not in remaining
    assert child.id not in remaining
    # the grandchild is neither deleted nor reattached
    assert remaining[grandchild.id].parent_id == child.id
    assert orphan.id in remaining

    # dangling folders drop out of the tree
    assert workspace.library.folder_tree() == []


def test_delete_middle_folder_takes_its_children(workspace: Workspace):
    root, child, grandchild, _ = _chain(workspace)

    assert workspace.library.delete_folder(child.id) is True

    remaining = [f.id for f in workspace.folders.get_all()]
    assert child.id not in remaining
    assert grandchild.id not in remaining
    [node] = workspace.library.folder_tree()
    assert node.id == root.id
    assert node.children == []


def test_delete_folder_unfiles_its_documents_only(workspace: Workspace):
    root, child, _, _ = _chain(workspace)
    in_root = workspace.documents.add({"name": "a.txt", "folder_id": root.id})
    in_child = workspace.documents.add({"name": "b.txt", "folder_id": child.id})

    workspace.library.delete_folder(root.id)

    assert workspace.documents.get(in_root.id).folder_id is None
    # documents of the removed child folder keep their reference
    assert workspace.documents.get(in_child.id).folder_id == child.id


def test_delete_unknown_folder(workspace: Workspace):
    _chain(workspace)
    before = workspace.folders.get_all()
    assert workspace.library.delete_folder("99") is False
    assert workspace.folders.get_all() == before


def test_rename_folder(workspace: Workspace):
    folder = workspace.library.create_folder("Old")
    renamed = workspace.library.rename_folder(folder.id, "New")
    assert renamed.name == "New"
    assert renamed.parent_id is None
    assert workspace.library.rename_folder("missing", "x") is None
