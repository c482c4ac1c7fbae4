"""Main kanban board screen."""

from datetime import date

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Footer, Header

from ...models import CheckboardConfig, Task
from ..widgets.column import KanbanColumn, css_id


def column_widget_id(column_id: str) -> str:
    return f"column-{css_id(column_id)}"


def _clamp(value: int, count: int) -> int:
    return max(0, min(value, count - 1)) if count else 0


class BoardScreen(Screen):
    """
    Columns side by side with a (column, task) cursor.

    The cursor survives refreshes: after the columns are rebuilt it moves
    to a requested task if that task is still visible, otherwise it is
    clamped to its previous position.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._column_index = 0
        self._task_index = 0
        self._focus_after_refresh: str | None = None
        self._composed_ids: list[str] = []

    @property
    def config(self) -> CheckboardConfig:
        return self.app.board_service.config  # pyrefly: ignore[missing-attribute]

    @property
    def layout_stale(self) -> bool:
        """Have the configured columns changed since this screen was built?"""
        return self._composed_ids != self.config.column_ids

    @property
    def column_count(self) -> int:
        return len(self.config.columns)

    def compose(self) -> ComposeResult:
        yield Header()
        self._composed_ids = self.config.column_ids
        with Horizontal(id="columns"):
            for col in self.config.columns:
                yield KanbanColumn(col, id=column_widget_id(col.id))
        yield Footer()

    def on_mount(self) -> None:
        self.load_tasks()
        self.call_after_refresh(self._update_focus)

    def load_tasks(self) -> None:
        """Push the board service's current snapshot into the column widgets."""
        board = self.app.board_service.load_board()  # pyrefly: ignore[missing-attribute]
        today = date.today()
        for col, tasks in board.get_visible_columns():
            try:
                widget = self.query_one(f"#{column_widget_id(col.id)}", KanbanColumn)
            except NoMatches:
                self.log.error(f"No widget for column {col.id}")
                continue
            widget.set_tasks(tasks, today=today)

    def refresh_board(self, focus_task_id: str | None = None) -> None:
        """Reload every column, then refocus `focus_task_id` or the previous position."""
        self._focus_after_refresh = focus_task_id
        self.load_tasks()
        # Cards are mounted one refresh later, so wait two
        self.call_after_refresh(self.call_after_refresh, self._restore_focus)

    def _restore_focus(self) -> None:
        target = self._focus_after_refresh
        self._focus_after_refresh = None
        position = self._find_task(target) if target else None
        if position is not None:
            self._column_index, self._task_index = position
        else:
            self._column_index = _clamp(self._column_index, self.column_count)
            self._task_index = _clamp(self._task_index, self._task_count(self._column_index))
        self._update_focus()

    def _find_task(self, task_id: str) -> tuple[int, int] | None:
        for col_idx in range(self.column_count):
            column = self._get_column(col_idx)
            if column is None:
                continue
            for task_idx, task in enumerate(column.tasks):
                if task.id == task_id:
                    return col_idx, task_idx
        return None

    def navigate_column(self, delta: int) -> None:
        new_column = _clamp(self._column_index + delta, self.column_count)
        if new_column == self._column_index:
            return
        self._column_index = new_column
        self._task_index = _clamp(self._task_index, self._task_count(new_column))
        self._update_focus()

    def navigate_task(self, delta: int) -> None:
        count = self._task_count(self._column_index)
        new_task = _clamp(self._task_index + delta, count)
        if count and new_task != self._task_index:
            self._task_index = new_task
            self._update_focus()

    def navigate_to_task(self, index: int) -> None:
        """Jump to a task in the current column; -1 means the last one."""
        count = self._task_count(self._column_index)
        if not count:
            return
        self._task_index = count - 1 if index < 0 else _clamp(index, count)
        self._update_focus()

    def toggle_current_column(self) -> None:
        column = self._get_column(self._column_index)
        if column is not None:
            column.toggle_collapsed()

    def get_current_task(self) -> Task | None:
        column = self._get_column(self._column_index)
        return column.get_task(self._task_index) if column else None

    @property
    def current_column_index(self) -> int:
        return self._column_index

    @property
    def current_task_index(self) -> int:
        return self._task_index

    def _task_count(self, column_index: int) -> int:
        column = self._get_column(column_index)
        return column.task_count if column else 0

    def _get_column(self, index: int) -> KanbanColumn | None:
        if not 0 <= index < self.column_count:
            return None
        try:
            return self.query_one(
                f"#{column_widget_id(self.config.columns[index].id)}", KanbanColumn
            )
        except NoMatches:
            return None

    def _update_focus(self) -> None:
        column = self._get_column(self._column_index)
        if column is not None:
            column.focus_task(self._task_index)
