"""Task card widget."""

from __future__ import annotations

from datetime import date

from rich.markup import escape
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from ...models import Priority, Task
from ...utils.dates import format_date_short, is_overdue, is_today

PRIORITY_COLORS: dict[Priority, str] = {
    Priority.HIGHEST: "#ef4444",
    Priority.HIGH: "#f97316",
    Priority.MEDIUM: "#3b82f6",
    Priority.LOW: "#06b6d4",
}


class TaskCard(Widget, can_focus=True):
    """A task card displayed in a column."""

    def __init__(
        self,
        task_data: Task,
        show_done_date: bool = False,
        today: date | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._task_data = task_data
        self._show_done_date = show_done_date
        self._today = today

    @property
    def task(self) -> Task:  # pyrefly: ignore[bad-override]
        """Get the task for this card."""
        return self._task_data

    def compose(self) -> ComposeResult:
        """Create card layout."""
        yield Static(self._format_description(), classes="task-description")

        date_line = self._format_date_line()
        if date_line:
            yield Static(date_line, classes="task-date")

        if self._task_data.tags:
            yield Static(self._format_tags(), classes="task-tags")

        if self._task_data.subtasks:
            done = sum(1 for s in self._task_data.subtasks if s.status.is_closed)
            yield Static(
                f"[dim]{done}/{len(self._task_data.subtasks)} subtasks[/]",
                classes="task-subtasks",
            )

    def _format_description(self) -> str:
        text = escape(self._truncate(self._task_data.description or "(untitled)", 60))
        color = PRIORITY_COLORS.get(self._task_data.priority)
        if color:
            return f"[{color}]▌[/] {text}"
        return text

    def _format_date_line(self) -> str:
        """Due date (highlighted when overdue or today), done date and source."""
        parts: list[str] = []
        due = self._task_data.due_date
        if due:
            formatted = format_date_short(due)
            if is_overdue(due, self._today):
                parts.append(f"[red]{formatted}[/]")
            elif is_today(due, self._today):
                parts.append(f"[yellow]{formatted}[/]")
            else:
                parts.append(formatted)

        if self._show_done_date and self._task_data.done_date:
            parts.append(f"[green]{format_date_short(self._task_data.done_date)}[/]")

        if self._task_data.source_file_name:
            parts.append(f"[dim]{escape(self._task_data.source_file_name)}[/]")

        return "  ".join(parts)

    def _format_tags(self) -> str:
        """Format tags for display as chips."""
        max_tags = 3
        tags = self._task_data.tags[:max_tags]
        formatted = " ".join(f"[dim]{escape(tag)}[/]" for tag in tags)

        if len(self._task_data.tags) > max_tags:
            extra = len(self._task_data.tags) - max_tags
            formatted += f" [dim]+{extra}[/]"

        return formatted

    def _truncate(self, text: str, max_len: int) -> str:
        """Truncate text with ellipsis."""
        if len(text) <= max_len:
            return text
        return text[: max_len - 1] + "…"
