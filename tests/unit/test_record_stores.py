"""Unit tests for the user-scoped record stores."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from daybook.application.interfaces import KeyNamespace, KeyValueStore, SessionContext
from daybook.application.schemas import NoteUpdate, TodoCreate, TodoUpdate
from daybook.config import Settings
from daybook.domain.exceptions import StorageWriteError, UnauthenticatedError
from daybook.infrastructure.dependencies import Workspace, build_workspace
from daybook.domain.entities import User
from daybook.infrastructure.storage import InMemoryKeyValueStore, JsonTodoStore


class TickingClock:
    """Clock that moves forward one second per call."""

    def __init__(self):
        self._now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self._now += timedelta(seconds=1)
        return self._now


class FailingKeyValueStore(InMemoryKeyValueStore):
    """Substrate whose writes fail once ``broken`` is set."""

    broken = False

    def set(self, key: str, value: str) -> None:
        if self.broken:
            raise OSError("quota exceeded")
        super().set(key, value)


class FixedSession(SessionContext):
    """Session context that is always signed in as one user."""

    def __init__(self, user: User):
        self._user = user

    def current_user(self) -> User | None:
        return self._user

    @property
    def user_id(self) -> str | None:
        return self._user.id


class DottedNamespace(KeyNamespace):
    def resolve(self, collection: str, user_id: str | None) -> str:
        return f"{collection}.{user_id}"


def _workspace(store: KeyValueStore | None = None) -> Workspace:
    return build_workspace(
        settings=Settings(storage_url="memory://"),
        store=store or InMemoryKeyValueStore(),
        clock=TickingClock(),
    )


@pytest.fixture
def workspace() -> Workspace:
    ws = _workspace()
    ws.session.register("alice", "alice@example.com", "secret")
    ws.session.login("alice", "secret")
    return ws


def test_add_then_get_all_contains_record(workspace: Workspace):
    todo = workspace.todos.add(TodoCreate(title="Buy milk", category="errands"))
    todos = workspace.todos.get_all()
    assert todos == [todo]
    assert todo.user_id == workspace.session.user_id


def test_add_accepts_plain_mapping(workspace: Workspace):
    todo = workspace.todos.add({"title": "Call mom"})
    assert todo.title == "Call mom"
    assert todo.completed is False


def test_add_requires_session():
    ws = _workspace()
    with pytest.raises(UnauthenticatedError):
        ws.todos.add(TodoCreate(title="Nope"))
    assert ws.store.get("guest_todos") is None


def test_ids_are_unique_and_increasing(workspace: Workspace):
    first = workspace.todos.add({"title": "one"})
    second = workspace.todos.add({"title": "two"})
    assert int(second.id) > int(first.id)


def test_update_merges_only_given_fields(workspace: Workspace):
    todo = workspace.todos.add(TodoCreate(title="Write report", description="Q3", category="work"))
    updated = workspace.todos.update(todo.id, TodoUpdate(completed=True))

    assert updated is not None
    assert updated.completed is True
    assert updated.title == "Write report"
    assert updated.description == "Q3"
    assert updated.category == "work"
    assert workspace.todos.get(todo.id) == updated


def test_update_cannot_change_owner(workspace: Workspace):
    todo = workspace.todos.add({"title": "Mine"})
    updated = workspace.todos.update(todo.id, {"user_id": "someone-else", "title": "Still mine"})
    assert updated.user_id == todo.user_id
    assert updated.title == "Still mine"


def test_update_unknown_id_returns_none(workspace: Workspace):
    assert workspace.todos.update("missing", {"title": "x"}) is None


def test_delete_twice(workspace: Workspace):
    todo = workspace.todos.add({"title": "Temporary"})
    assert workspace.todos.delete(todo.id) is True
    assert workspace.todos.delete(todo.id) is False
    assert workspace.todos.get_all() == []


def test_note_update_refreshes_updated_at(workspace: Workspace):
    note = workspace.notes.add({"title": "Ideas", "content": "# Draft", "tags": "a, b"})
    assert note.updated_at == note.created_at
    assert note.tags == ["a", "b"]

    updated = workspace.notes.update(note.id, NoteUpdate(content="# Final"))
    assert updated.updated_at > note.updated_at
    assert updated.created_at == note.created_at
    assert updated.title == "Ideas"

    # updated_at is refreshed even if the caller tries to set it
    again = workspace.notes.update(note.id, {"updated_at": "2000-01-01T00:00:00"})
    assert again.updated_at > updated.updated_at


def test_users_never_see_each_other(workspace: Workspace):
    workspace.todos.add({"title": "Same"})
    alice_id = workspace.session.user_id

    workspace.session.logout()
    workspace.session.register("bob", "bob@example.com", "pw")
    workspace.session.login("bob", "pw")
    bob_todo = workspace.todos.add({"title": "Same"})

    assert workspace.todos.get_all() == [bob_todo]
    assert bob_todo.user_id != alice_id
    assert workspace.store.get(f"{alice_id}_todos") is not None
    assert workspace.store.get(f"{bob_todo.user_id}_todos") is not None


def test_anonymous_reads_guest_scope(workspace: Workspace):
    workspace.todos.add({"title": "Private"})
    workspace.session.logout()
    assert workspace.todos.key == "guest_todos"
    assert workspace.todos.get_all() == []


def test_corrupt_collection_reads_as_empty(workspace: Workspace):
    workspace.store.set(workspace.todos.key, "{not json")
    assert workspace.todos.get_all() == []

    workspace.store.set(workspace.todos.key, json.dumps([{"unexpected": True}]))
    assert workspace.todos.get_all() == []

    workspace.store.set(workspace.todos.key, "[" * 100000 + "]" * 100000)
    assert workspace.todos.get_all() == []

    todo = workspace.todos.add({"title": "Fresh start"})
    assert workspace.todos.get_all() == [todo]


def test_reads_collections_written_with_camel_case_keys(workspace: Workspace):
    user_id = workspace.session.user_id
    workspace.store.set(
        f"{user_id}_todos",
        json.dumps([{
            "id": "1700000000000",
            "title": "Imported",
            "category": "misc",
            "completed": True,
            "createdAt": "2023-11-14T22:13:20.000Z",
            "userId": user_id,
        }]),
    )
    [todo] = workspace.todos.get_all()
    assert todo.id == "1700000000000"
    assert todo.completed is True
    assert todo.created_at.tzinfo is not None


def test_write_failure_raises_storage_error():
    store = FailingKeyValueStore()
    ws = _workspace(store)
    ws.session.register("carol", "", "pw")
    ws.session.login("carol", "pw")

    store.broken = True
    with pytest.raises(StorageWriteError) as info:
        ws.todos.add({"title": "Lost"})
    assert info.value.key == ws.todos.key

    store.broken = False
    assert ws.todos.get_all() == []


def test_categories_and_filtering(workspace: Workspace):
    workspace.todos.add({"title": "a", "category": "work"})
    workspace.todos.add({"title": "b", "category": "home"})
    workspace.todos.add({"title": "c", "category": "work"})

    assert workspace.todos.categories() == ["work", "home"]
    assert [t.title for t in workspace.todos.by_category("work")] == ["a", "c"]
    assert len(workspace.todos.by_category(None)) == 3


def test_document_defaults(workspace: Workspace):
    document = workspace.documents.add({
        "name": "Budget.XLSX",
        "size": 2048,
        "content": "x" * 1500,
        "file_data": "aGVsbG8=",
        "folder_id": "",
    })
    assert document.type == "Excel"
    assert document.category == "Excel"
    assert len(document.content) == 1000
    assert document.folder_id is None
    assert workspace.documents.get(document.id) == document


def test_website_positions_and_reorder(workspace: Workspace):
    sites = [workspace.websites.add({"name": n, "url": f"https://{n}.example.com"}) for n in "abcd"]
    assert [s.position for s in sites] == [0, 1, 2, 3]
    assert sites[0].icon == "https://a.example.com/favicon.ico"

    assert workspace.websites.reorder(sites[3].id, 0) is True
    ordered = workspace.websites.list_ordered()
    assert [w.name for w in ordered] == ["d", "a", "b", "c"]
    assert [w.position for w in ordered] == [0, 1, 2, 3]

    assert workspace.websites.reorder("missing", 1) is False


def test_website_reorder_after_delete_is_dense(workspace: Workspace):
    sites = [workspace.websites.add({"name": n, "url": f"{n}.org"}) for n in "abc"]
    workspace.websites.delete(sites[0].id)
    workspace.websites.reorder(sites[2].id, 0)
    assert [w.position for w in workspace.websites.list_ordered()] == [0, 1]


def test_website_delete_closes_position_gap(workspace: Workspace):
    sites = [workspace.websites.add({"name": n, "url": f"{n}.org"}) for n in "abc"]
    assert workspace.websites.delete(sites[0].id) is True
    workspace.websites.add({"name": "d", "url": "d.org"})

    ordered = workspace.websites.list_ordered()
    assert [(w.name, w.position) for w in ordered] == [("b", 0), ("c", 1), ("d", 2)]
    assert workspace.websites.delete(sites[0].id) is False


def test_website_save_upserts_and_list_for_user(workspace: Workspace):
    site = workspace.websites.add({"name": "Docs", "url": "https://docs.python.org"})
    site.name = "Python docs"
    workspace.websites.save(site)

    owner = workspace.session.user_id
    workspace.session.logout()
    assert [w.name for w in workspace.websites.list_for_user(owner)] == ["Python docs"]
    assert workspace.websites.get_all() == []


def test_clear_user_data(workspace: Workspace):
    workspace.todos.add({"title": "t"})
    workspace.notes.add({"title": "n"})
    workspace.clear_user_data()
    assert workspace.todos.get_all() == []
    assert workspace.notes.get_all() == []
    assert workspace.session.is_authenticated


def test_store_runs_on_any_session_context():
    store = InMemoryKeyValueStore()
    user = User(username="carol", email="", password="pw")
    todos = JsonTodoStore(store, FixedSession(user), DottedNamespace(), clock=TickingClock())

    todo = todos.add({"title": "Ported"})
    assert todos.key == f"todos.{user.id}"
    assert store.get(todos.key) is not None
    assert todos.get_all() == [todo]
    assert todo.user_id == user.id
