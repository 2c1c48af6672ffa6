"""Wires the infrastructure adapters to the application layer."""

import logging
from dataclasses import dataclass

from daybook.application.interfaces import KeyValueStore
from daybook.application.services import (
    DocumentFolderService,
    NamespaceResolver,
    SessionManager,
    StatisticsService,
)
from daybook.config import Settings, get_settings
from daybook.infrastructure.database import (
    SQLAlchemyKeyValueStore,
    create_session_factory,
    create_storage_engine,
)
from daybook.infrastructure.storage import (
    InMemoryKeyValueStore,
    JsonDocumentStore,
    JsonFolderStore,
    JsonNoteStore,
    JsonTodoStore,
    JsonUserStore,
    JsonWebsiteStore,
)
from daybook.infrastructure.storage.json_record_store import Clock, JsonRecordStore, utcnow

logger = logging.getLogger(__name__)


def build_key_value_store(settings: Settings) -> KeyValueStore:
    """Pick the substrate adapter named by ``settings.storage_url``."""
    if settings.uses_memory_storage:
        logger.info("Using in-memory storage; nothing will be persisted")
        return InMemoryKeyValueStore()
    engine = create_storage_engine(settings.storage_url, echo=settings.storage_echo_sql)
    return SQLAlchemyKeyValueStore(create_session_factory(engine))


@dataclass
class Workspace:
    """Everything one signed-in (or guest) session works with."""

    store: KeyValueStore
    session: SessionManager
    todos: JsonTodoStore
    notes: JsonNoteStore
    folders: JsonFolderStore
    documents: JsonDocumentStore
    websites: JsonWebsiteStore
    library: DocumentFolderService
    statistics: StatisticsService

    @property
    def record_stores(self) -> list[JsonRecordStore]:
        return [self.todos, self.documents, self.notes, self.folders, self.websites]

    def clear_user_data(self) -> None:
        """Remove every collection of the signed-in user. No-op for guests."""
        if not self.session.is_authenticated:
            return
        for records in self.record_stores:
            records.clear()
        logger.info("Cleared all data of user %s", self.session.user_id)


def build_workspace(
    settings: Settings | None = None,
    store: KeyValueStore | None = None,
    clock: Clock = utcnow,
) -> Workspace:
    """Build a fresh session and its stores on top of one substrate."""
    settings = settings or get_settings()
    store = store if store is not None else build_key_value_store(settings)

    session = SessionManager(JsonUserStore(store))
    resolver = NamespaceResolver(settings.guest_scope)

    todos = JsonTodoStore(store, session, resolver, clock)
    notes = JsonNoteStore(store, session, resolver, clock)
    folders = JsonFolderStore(store, session, resolver, clock)
    documents = JsonDocumentStore(store, session, resolver, clock)
    websites = JsonWebsiteStore(store, session, resolver, clock)

    return Workspace(
        store=store,
        session=session,
        todos=todos,
        notes=notes,
        folders=folders,
        documents=documents,
        websites=websites,
        library=DocumentFolderService(documents, folders),
        statistics=StatisticsService(todos, documents, notes, websites),
    )
