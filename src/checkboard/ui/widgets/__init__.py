"""Widget components."""

from .column import EmptyColumnMessage, KanbanColumn
from .task_card import TaskCard

__all__ = [
    "EmptyColumnMessage",
    "KanbanColumn",
    "TaskCard",
]
