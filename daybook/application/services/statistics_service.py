"""Dashboard aggregates over the signed-in user's records."""

from collections import Counter
from typing import Any

from daybook.application.interfaces import RecordRepository
from daybook.domain.entities import DashboardStats, Document, Note, Todo, Website


class StatisticsService:
    def __init__(
        self,
        todos: RecordRepository[Todo, Any, Any],
        documents: RecordRepository[Document, Any, Any],
        notes: RecordRepository[Note, Any, Any],
        websites: RecordRepository[Website, Any, Any],
    ):
        self._todos = todos
        self._documents = documents
        self._notes = notes
        self._websites = websites

    def summary(self) -> DashboardStats:
        todos = self._todos.get_all()
        documents = self._documents.get_all()

        completed = sum(1 for t in todos if t.completed)
        rate = (completed / len(todos)) * 100 if todos else 0.0

        return DashboardStats(
            total_todos=len(todos),
            completed_todos=completed,
            pending_todos=len(todos) - completed,
            completion_rate=rate,
            todos_by_category=dict(Counter(t.category for t in todos)),
            total_documents=len(documents),
            documents_by_type=dict(Counter(d.type for d in documents)),
            total_notes=len(self._notes.get_all()),
            total_websites=len(self._websites.get_all()),
        )
