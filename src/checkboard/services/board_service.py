"""Service for board state: parsing documents, assigning columns, notifying."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from typing import TYPE_CHECKING

from ..models import Board, CheckboardConfig, Task
from ..parsing import parse_page_tags, parse_tasks
from ..repositories import DocumentStoreProtocol
from ..utils.observers import ObserverRegistry, SubscriptionHandle
from .column_policy import build_assignments, group_by_column
from .scheduler import ReparseScheduler

if TYPE_CHECKING:
    from .config_service import ConfigService

logger = logging.getLogger(__name__)


class BoardService:
    """
    Holds the parsed tasks of every document and their column assignments.

    All mutation happens on the caller's thread: document change
    notifications are only queued in the scheduler and applied by
    run_pending().
    """

    def __init__(
        self,
        store: DocumentStoreProtocol,
        config_service: ConfigService | None = None,
        today: Callable[[], date] = date.today,
        scheduler: ReparseScheduler | None = None,
    ) -> None:
        self.store = store
        self._config_service = config_service
        self._config: CheckboardConfig | None = None
        self._today = today
        self.scheduler = scheduler or ReparseScheduler()
        self._tasks: list[Task] = []
        self._assignments: dict[str, str] = {}
        self._observers = ObserverRegistry("board")
        self._store_handles: list[SubscriptionHandle] = []

    @property
    def config(self) -> CheckboardConfig:
        """Current configuration, using default if no config service."""
        if self._config is None:
            if self._config_service:
                self._config = self._config_service.get_config()
            else:
                self._config = CheckboardConfig.default()
        return self._config

    # --- Parsing ---

    def full_scan(self) -> None:
        """Parse every document that is not in an excluded folder."""
        tasks: list[Task] = []
        for path in self.store.list_documents():
            if self.config.is_excluded(path):
                continue
            tasks.extend(self._parse_document(path))

        self._tasks = tasks
        logger.info("Full scan: %d tasks", len(tasks))
        self._rebuild_assignments()
        self._notify()

    def reparse_file(self, path: str) -> None:
        """Replace the tasks of one document with a fresh parse."""
        self._tasks = [t for t in self._tasks if t.file_path != path]

        if (
            path.endswith(".md")
            and not self.config.is_excluded(path)
            and self.store.exists(path)
        ):
            self._tasks.extend(self._parse_document(path))

        self._rebuild_assignments()
        self._notify()

    def handle_deleted(self, path: str) -> None:
        """Forget every task of a deleted document."""
        self._tasks = [t for t in self._tasks if t.file_path != path]
        logger.debug("Document deleted: %s", path)
        self._rebuild_assignments()
        self._notify()

    def handle_renamed(self, old_path: str, new_path: str) -> None:
        """Re-home tasks of a renamed document to its new path."""
        self._tasks = [
            t.with_file_path(new_path) if t.file_path == old_path else t for t in self._tasks
        ]
        logger.debug("Document renamed: %s -> %s", old_path, new_path)
        self._rebuild_assignments()
        self._notify()

    def _parse_document(self, path: str) -> list[Task]:
        """Parse one document; unreadable documents contribute no tasks."""
        try:
            content = self.store.read_document(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Skipping unreadable document %s: %s", path, e)
            return []

        config = self.config
        tasks = parse_tasks(content, path, config.global_filter, config.columns)
        if not tasks:
            return tasks

        page_tags = parse_page_tags(content)
        if page_tags:
            tasks = [t.with_page_tags(page_tags) for t in tasks]
        return tasks

    # --- Queries ---

    def get_all_tasks(self) -> list[Task]:
        """Get all tasks (unfiltered)."""
        return list(self._tasks)

    def get_task(self, task_id: str) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def get_assigned_column(self, task_id: str) -> str | None:
        """Column ID a task was assigned to on the last rebuild."""
        return self._assignments.get(task_id)

    def get_tasks_by_column(self) -> dict[str, list[Task]]:
        """Visible, sorted tasks per configured column, computed on demand."""
        return group_by_column(self._tasks, self._assignments, self.config, self._today())

    def load_board(self) -> Board:
        """Snapshot of the board for rendering."""
        return Board(columns=self.get_tasks_by_column(), config=self.config)

    # --- Configuration ---

    def update_config(self, config: CheckboardConfig) -> None:
        """Swap configuration and reassign columns without re-parsing."""
        self._config = config
        self._rebuild_assignments()
        self._notify()

    def reload(self) -> None:
        """Re-read configuration and rescan every document."""
        if self._config_service:
            self._config_service.reload()
        self._config = None
        self.full_scan()

    # --- Observers ---

    def subscribe(self, callback: Callable[[], None]) -> SubscriptionHandle:
        """Register a callback run after every change to the task set."""
        return self._observers.subscribe(callback)

    def unsubscribe(self, handle: SubscriptionHandle) -> None:
        self._observers.unsubscribe(handle)

    # --- Change notifications ---

    def start_listening(self) -> None:
        """Subscribe to the store's change, delete and rename notifications."""
        if self._store_handles:
            return
        self._store_handles = [
            self.store.on_changed(self._on_document_changed),
            self.store.on_deleted(self.handle_deleted),
            self.store.on_renamed(self.handle_renamed),
        ]

    def stop_listening(self) -> None:
        for handle in self._store_handles:
            self.store.off(handle)
        self._store_handles = []
        self.scheduler.cancel()

    def run_pending(self) -> list[str]:
        """Re-parse documents whose debounce window has elapsed."""
        return self.scheduler.run_pending(self.reparse_file)

    def _on_document_changed(self, path: str) -> None:
        if path.endswith(".md"):
            self.scheduler.schedule(path)

    # --- Private ---

    def _rebuild_assignments(self) -> None:
        self._assignments = build_assignments(self._tasks, self.config.columns)

    def _notify(self) -> None:
        self._observers.notify()
