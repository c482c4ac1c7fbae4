"""Column assignment and within-column ordering."""

from __future__ import annotations

from datetime import date

from ..models.checkboard_config import (
    CheckboardConfig,
    ColumnConfig,
    DoneColumn,
    TagColumn,
    TodoFilterMode,
)
from ..models.task import Priority, Task
from ..utils.dates import is_due_or_overdue, parse_date

FALLBACK_TODO_ID = "todo"
FALLBACK_DONE_ID = "done"

PRIORITY_RANK: dict[Priority, int] = {
    Priority.HIGHEST: 0,
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
    Priority.NONE: 4,
}

# Todo sort groups
GROUP_OVERDUE = 0
GROUP_TODAY = 1
GROUP_OTHER = 2


def _first_id(columns: list[ColumnConfig], column_type: str, fallback: str) -> str:
    for col in columns:
        if col.type == column_type:
            return col.id
    return fallback


def assign_column(task: Task, columns: list[ColumnConfig]) -> str:
    """
    Pick exactly one column ID for a task.

    Rules, first match wins:
    1. done or cancelled -> done column
    2. first tag column (in configuration order) whose tag the task carries
    3. no due date and a backlog column exists -> backlog
    4. todo column
    """
    if task.is_closed:
        return _first_id(columns, "done", FALLBACK_DONE_ID)

    for col in columns:
        if isinstance(col, TagColumn) and col.tag in task.column_tags:
            return col.id

    if not task.due_date:
        for col in columns:
            if col.type == "backlog":
                return col.id

    return _first_id(columns, "todo", FALLBACK_TODO_ID)


def priority_rank(task: Task) -> int:
    return PRIORITY_RANK.get(task.priority, PRIORITY_RANK[Priority.NONE])


def todo_group(task: Task, today: date) -> int:
    """Overdue first, then due today, then everything else."""
    if not task.due_date:
        return GROUP_OTHER
    due = parse_date(task.due_date)
    if due is None:
        return GROUP_OTHER
    if due < today:
        return GROUP_OVERDUE
    if due == today:
        return GROUP_TODAY
    return GROUP_OTHER


def sort_by_priority(tasks: list[Task]) -> list[Task]:
    return sorted(tasks, key=priority_rank)


def sort_todo(tasks: list[Task], today: date) -> list[Task]:
    return sorted(tasks, key=lambda t: (todo_group(t, today), priority_rank(t)))


def sort_done(tasks: list[Task]) -> list[Task]:
    """Most recent done date first; tasks without one after."""
    # YYYY-MM-DD compares lexically; "" sorts last when reversed
    return sorted(tasks, key=lambda t: t.done_date or "", reverse=True)


def arrange_column(
    column: ColumnConfig,
    tasks: list[Task],
    todo_filter: TodoFilterMode,
    done_limit: int,
    today: date,
) -> list[Task]:
    """
    Apply a column's visibility filter, sort order and display limit.

    The input list is not modified.
    """
    if column.type == "todo":
        if todo_filter == "due-today":
            tasks = [
                t for t in tasks if t.due_date and is_due_or_overdue(t.due_date, today)
            ]
        return sort_todo(tasks, today)

    if isinstance(column, DoneColumn):
        limit = column.limit if column.limit is not None else done_limit
        return sort_done(tasks)[:limit]

    # Backlog and tag columns
    return sort_by_priority(tasks)


def build_assignments(tasks: list[Task], columns: list[ColumnConfig]) -> dict[str, str]:
    """Map task ID -> column ID."""
    return {task.id: assign_column(task, columns) for task in tasks}


def group_by_column(
    tasks: list[Task],
    assignments: dict[str, str],
    config: CheckboardConfig,
    today: date,
) -> dict[str, list[Task]]:
    """
    Bucket tasks into every configured column, filtered and sorted.

    Tasks without an assignment, or assigned to a column ID that is not
    configured, are left out.
    """
    buckets: dict[str, list[Task]] = {col.id: [] for col in config.columns}

    for task in tasks:
        column_id = assignments.get(task.id)
        if column_id is None or column_id not in buckets:
            continue
        buckets[column_id].append(task)

    return {
        col.id: arrange_column(
            col, buckets[col.id], config.todo_filter, config.done_limit, today
        )
        for col in config.columns
    }
