"""Read-only aggregates shown on the dashboard."""

from dataclasses import dataclass, field


@dataclass
class DashboardStats:
    total_todos: int = 0
    completed_todos: int = 0
    pending_todos: int = 0
    completion_rate: float = 0.0
    todos_by_category: dict[str, int] = field(default_factory=dict)
    total_documents: int = 0
    documents_by_type: dict[str, int] = field(default_factory=dict)
    total_notes: int = 0
    total_websites: int = 0
