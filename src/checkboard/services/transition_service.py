"""Turn drag-and-drop transitions into task line rewrites."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .board_service import BoardService
from .task_writer import TaskWriter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransitionEvent:
    """A completed drag of one card from one column to another."""

    task_id: str
    source_column_id: str
    target_column_id: str


class TransitionService:
    """Service for moving tasks between columns."""

    def __init__(self, board_service: BoardService, writer: TaskWriter) -> None:
        self.board_service = board_service
        self.writer = writer

    def handle(self, event: TransitionEvent) -> bool:
        """
        Apply a drag-end event.

        Same-column drops, vanished tasks and unknown columns are ignored.
        Returns True if the task's document was rewritten.
        """
        if event.source_column_id == event.target_column_id:
            return False

        task = self.board_service.get_task(event.task_id)
        if task is None:
            logger.debug("handle: task not found: %s", event.task_id)
            return False

        config = self.board_service.config
        source = config.get_column(event.source_column_id)
        target = config.get_column(event.target_column_id)
        if source is None or target is None:
            logger.debug(
                "handle: unknown column: %s -> %s",
                event.source_column_id,
                event.target_column_id,
            )
            return False

        written = self.writer.move_to_column(task, target, config.column_tags)
        if written:
            logger.info("Task moved: %s (%s -> %s)", task.id, source.id, target.id)
            self.board_service.reparse_file(task.file_path)
        return written

    def move_adjacent(self, task_id: str, delta: int) -> bool:
        """Move a task to the previous (-1) or next (1) configured column."""
        source_id = self.board_service.get_assigned_column(task_id)
        column_ids = self.board_service.config.column_ids
        if source_id is None or source_id not in column_ids:
            return False

        index = column_ids.index(source_id) + delta
        if index < 0 or index >= len(column_ids):
            logger.debug("move_adjacent: at boundary, cannot move: %s", task_id)
            return False

        return self.handle(TransitionEvent(task_id, source_id, column_ids[index]))

    def toggle_complete(self, task_id: str) -> bool:
        """Complete an open task, or reopen a done one."""
        task = self.board_service.get_task(task_id)
        if task is None:
            return False

        if task.is_closed:
            written = self.writer.uncomplete_task(task)
        else:
            written = self.writer.complete_task(task, self.board_service.config.column_tags)

        if written:
            self.board_service.reparse_file(task.file_path)
        return written
