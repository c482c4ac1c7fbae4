"""Data models."""

from .board import Board
from .checkboard_config import (
    BacklogColumn,
    CheckboardConfig,
    ColumnConfig,
    DoneColumn,
    TagColumn,
    TodoColumn,
    TodoFilterMode,
    column_tag,
    default_columns,
)
from .task import Priority, SubTask, Task, TaskStatus

__all__ = [
    "BacklogColumn",
    "Board",
    "CheckboardConfig",
    "ColumnConfig",
    "DoneColumn",
    "Priority",
    "SubTask",
    "TagColumn",
    "Task",
    "TaskStatus",
    "TodoColumn",
    "TodoFilterMode",
    "column_tag",
    "default_columns",
]
