"""Print the board to stdout without starting the TUI."""

from datetime import date

from ..models import Board, Priority, Task
from ..utils.dates import format_date_short, is_overdue
from .output import DIM, RED, colorize, header

PRIORITY_SYMBOLS: dict[Priority, str] = {
    Priority.HIGHEST: "!!!",
    Priority.HIGH: "!!",
    Priority.MEDIUM: "!",
    Priority.LOW: "-",
    Priority.NONE: "",
}


def format_task(task: Task, today: date | None = None) -> str:
    """One line per task: checkbox, description, priority, due date, source."""
    parts = [f"[{task.status.value}]", task.description]

    symbol = PRIORITY_SYMBOLS[task.priority]
    if symbol:
        parts.append(symbol)

    if task.due_date:
        due = format_date_short(task.due_date)
        if not task.is_closed and is_overdue(task.due_date, today):
            due = colorize(due, RED)
        parts.append(due)

    if task.tags:
        parts.append(" ".join(task.tags))

    parts.append(colorize(f"({task.source_file_name})", DIM))
    return " ".join(parts)


def print_board(board: Board, today: date | None = None) -> None:
    """Print every column with its visible tasks and subtasks."""
    for column, tasks in board.get_visible_columns():
        header(f"{column.label} ({len(tasks)})")
        for task in tasks:
            print(f"  {format_task(task, today)}")
            for subtask in task.subtasks:
                print(f"      [{subtask.status.value}] {subtask.description}")
        print()
