"""checkboard TUI Application."""

import logging

from textual.app import App
from textual.binding import Binding

from .config import Settings
from .repositories import FilesystemDocumentStore
from .services import BoardService, ConfigService, TaskWriter, TransitionService
from .ui.screens.board import BoardScreen
from .ui.screens.help import HelpScreen
from .utils.observers import SubscriptionHandle

logger = logging.getLogger(__name__)

# Seconds between checks for debounced document changes
PENDING_POLL_INTERVAL = 0.1


class CheckboardApp(App):
    """checkboard - Kanban board over markdown checklist tasks."""

    TITLE = "checkboard"

    CSS_PATH = "ui/styles.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("?", "help", "Help", show=True),
        Binding("r", "refresh", "Rescan", show=True),
        Binding("space", "toggle_complete", "Done", show=True),
        Binding("c", "collapse_column", "Collapse", show=True),
        Binding("e,enter", "edit_task", "Edit", show=True),
        # Cursor: vim keys and arrows
        Binding("h,left", "nav_column(-1)", "← Column", show=False),
        Binding("l,right", "nav_column(1)", "→ Column", show=False),
        Binding("k,up", "nav_task(-1)", "↑ Task", show=False),
        Binding("j,down", "nav_task(1)", "↓ Task", show=False),
        Binding("g,home", "nav_jump(0)", "First", show=False),
        Binding("G,end", "nav_jump(-1)", "Last", show=False),
        # Transitions
        Binding("H,shift+left", "move_task(-1)", "Move ←", show=False),
        Binding("L,shift+right", "move_task(1)", "Move →", show=False),
    ]

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self._board_subscription: SubscriptionHandle | None = None
        self._init_services()

    def _init_services(self) -> None:
        """Wire the document store into the board, writer and transition services."""
        self.config_service = ConfigService(self.settings.vault_root)
        self.store = FilesystemDocumentStore(self.settings.vault_root)
        self.board_service = BoardService(self.store, self.config_service)
        self.task_writer = TaskWriter(self.store)
        self.transition_service = TransitionService(self.board_service, self.task_writer)

    def on_mount(self) -> None:
        self.store.ensure_directory()
        self.board_service.full_scan()
        logger.info("Board loaded from %s", self.settings.vault_root)
        self._warn_config_error()

        self._board_subscription = self.board_service.subscribe(self._on_board_changed)

        if self.settings.watch:
            self.board_service.start_listening()
            # Watcher events arrive on the observer thread
            self.store.watch(dispatch=self.call_from_thread)
            self.set_interval(PENDING_POLL_INTERVAL, self.board_service.run_pending)

        self.push_screen(BoardScreen())

    def on_unmount(self) -> None:
        self.store.stop()
        self.board_service.stop_listening()
        if self._board_subscription is not None:
            self.board_service.unsubscribe(self._board_subscription)
            self._board_subscription = None

    def _warn_config_error(self) -> None:
        if self.config_service.has_config_error:
            self.notify(
                f"Config error, using defaults: {self.config_service.config_error}",
                severity="warning",
                timeout=5,
            )

    def _board(self) -> BoardScreen | None:
        screen = self.screen
        return screen if isinstance(screen, BoardScreen) else None

    def _on_board_changed(self) -> None:
        board = self._board()
        if board is None:
            return
        if board.layout_stale:
            self.switch_screen(BoardScreen())
            return
        task = board.get_current_task()
        board.refresh_board(focus_task_id=task.id if task else None)

    def action_refresh(self) -> None:
        """Re-read checkboard.yml and rescan the vault."""
        self.board_service.reload()
        self._warn_config_error()

    def action_help(self) -> None:
        self.push_screen(HelpScreen())

    # Cursor actions
    def action_nav_column(self, delta: int) -> None:
        board = self._board()
        if board:
            board.navigate_column(delta)

    def action_nav_task(self, delta: int) -> None:
        board = self._board()
        if board:
            board.navigate_task(delta)

    def action_nav_jump(self, index: int) -> None:
        board = self._board()
        if board:
            board.navigate_to_task(index)

    def action_collapse_column(self) -> None:
        board = self._board()
        if board:
            board.toggle_current_column()

    # Task actions
    def action_move_task(self, delta: int) -> None:
        """Move the focused task to the previous (-1) or next (1) column."""
        board = self._board()
        task = board.get_current_task() if board else None
        if task is None:
            return

        if self.transition_service.move_adjacent(task.id, delta):
            target = self.board_service.get_assigned_column(task.id)
            column = self.board_service.config.get_column(target) if target else None
            if column is not None:
                self.notify(f"Moved to {column.label}", timeout=2)

    def action_toggle_complete(self) -> None:
        """Complete the focused task, or reopen it when already done."""
        board = self._board()
        task = board.get_current_task() if board else None
        if task is None:
            return

        if self.transition_service.toggle_complete(task.id):
            self.notify("Reopened" if task.is_closed else "Completed", timeout=2)

    def action_edit_task(self) -> None:
        """Open the focused task's note in $EDITOR at the task's line."""
        board = self._board()
        task = board.get_current_task() if board else None
        if task is None:
            return

        # Suspend TUI and open editor
        with self.suspend():
            opened = self.task_writer.open_in_editor(task, self.settings.vault_root)

        if not opened:
            self.notify("Could not open editor", severity="warning", timeout=3)
        self.board_service.reparse_file(task.file_path)


def run(settings: Settings | None = None) -> None:
    """Run the checkboard application."""
    app = CheckboardApp(settings)
    app.run()
