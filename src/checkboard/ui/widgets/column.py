"""Kanban column widget."""

from __future__ import annotations

import re
from datetime import date

from rich.markup import escape
from textual.actions import SkipAction
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.css.query import NoMatches
from textual.widget import Widget
from textual.widgets import Static

from ...models import ColumnConfig, Task
from .task_card import TaskCard

_UNSAFE = re.compile(r"[^a-z0-9-]+")


def css_id(value: str) -> str:
    """Turn a task or column ID into a DOM-safe fragment.

    "projects/home.md::12" -> "projects-home-md-12"
    """
    return _UNSAFE.sub("-", value.lower()).strip("-") or "x"


class CardList(VerticalScroll):
    """Card container whose scroll keys fall through to the app's task navigation."""

    def _skip(self) -> None:
        raise SkipAction()

    action_scroll_up = _skip
    action_scroll_down = _skip
    action_scroll_home = _skip
    action_scroll_end = _skip


class EmptyColumnMessage(Static):
    """Placeholder shown in a column with no cards."""


class KanbanColumn(Widget):
    """One configured column: a header and a scrolling list of task cards."""

    def __init__(self, column: ColumnConfig, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.column = column
        self.collapsed = column.collapsed
        self._tasks: list[Task] = []
        self._today: date | None = None

    def compose(self) -> ComposeResult:
        yield Static(self._header_text(), classes="column-header")
        yield CardList(classes="column-content")

    def on_mount(self) -> None:
        self.set_class(self.collapsed, "collapsed")

    def _header_text(self) -> str:
        dot = f"[{self.column.color}]●[/]"
        count = f"[dim]({len(self._tasks)})[/]"
        if self.collapsed:
            return f"{dot} {count}"
        return f"{dot} [i]{escape(self.column.label)}[/] {count}"

    def _update_header(self) -> None:
        try:
            self.query_one(".column-header", Static).update(self._header_text())
        except NoMatches:
            pass

    def set_tasks(self, tasks: list[Task], today: date | None = None) -> None:
        """Replace the column's cards once the DOM is ready."""
        self._tasks = tasks
        self._today = today
        self.call_after_refresh(self._rebuild_cards)

    async def _rebuild_cards(self) -> None:
        try:
            content = self.query_one(CardList)
        except NoMatches:
            self.log.error(f"Column {self.column.id} has no card list")
            return

        await content.remove_children()
        if self._tasks:
            show_done_date = self.column.type == "done"
            await content.mount_all(
                TaskCard(
                    task,
                    show_done_date=show_done_date,
                    today=self._today,
                    id=f"task-{css_id(task.id)}",
                )
                for task in self._tasks
            )
        else:
            placeholder = "All caught up!" if self.column.type == "todo" else "No tasks"
            await content.mount(EmptyColumnMessage(placeholder))
        self._update_header()

    def toggle_collapsed(self) -> None:
        self.collapsed = not self.collapsed
        self.set_class(self.collapsed, "collapsed")
        self._update_header()

    @property
    def tasks(self) -> list[Task]:
        return self._tasks

    @property
    def task_count(self) -> int:
        return len(self._tasks)

    def get_task(self, index: int) -> Task | None:
        if 0 <= index < len(self._tasks):
            return self._tasks[index]
        return None

    def focus_task(self, index: int) -> bool:
        """Focus and scroll to the card at `index`. Returns False if there is none."""
        task = self.get_task(index)
        if task is None:
            return False
        try:
            card = self.query_one(f"#task-{css_id(task.id)}", TaskCard)
        except NoMatches:
            return False
        card.focus()
        card.scroll_visible()
        return True
