"""Apply line transitions to task documents."""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
from collections.abc import Callable
from datetime import date
from pathlib import Path

from ..models.checkboard_config import ColumnConfig
from ..models.task import Task
from ..repositories.protocol import DocumentStoreProtocol
from . import line_writer

logger = logging.getLogger(__name__)


class TaskWriter:
    """
    Modify a task's line in its source document.

    Every change goes through the store's atomic rewrite, so only the
    task's own line is replaced and no partial write is ever observed.
    """

    def __init__(
        self,
        store: DocumentStoreProtocol,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.store = store
        self._today = today

    def add_tag(self, task: Task, tag: str) -> bool:
        return self.modify_line(task, lambda line: line_writer.add_tag(line, tag))

    def remove_tag(self, task: Task, tag: str) -> bool:
        return self.modify_line(task, lambda line: line_writer.remove_tag(line, tag))

    def complete_task(self, task: Task, column_tags: list[str]) -> bool:
        done_date = self._today().isoformat()
        return self.modify_line(
            task, lambda line: line_writer.complete(line, column_tags, done_date)
        )

    def uncomplete_task(self, task: Task) -> bool:
        return self.modify_line(task, line_writer.uncomplete)

    def move_to_column(self, task: Task, target: ColumnConfig, column_tags: list[str]) -> bool:
        """Rewrite the task line for a move into `target`."""
        today = self._today()
        return self.modify_line(
            task,
            lambda line: line_writer.move_to_column(
                line, task.status, target, column_tags, today
            ),
        )

    def modify_line(self, task: Task, transform: Callable[[str], str]) -> bool:
        """
        Replace the task's line with transform(line).

        Returns False if the document no longer exists. The document is left
        unchanged when the line at the task's index no longer holds the
        parsed task text.
        """

        def rewrite(content: str) -> str:
            lines = content.split("\n")
            if not 0 <= task.line_number < len(lines):
                logger.debug("Line %d out of range, skipping: %s", task.line_number, task.id)
                return content
            line = lines[task.line_number]
            current = line.removesuffix("\r")
            if current != task.raw_line:
                logger.debug("Line changed since last parse, skipping: %s", task.id)
                return content
            ending = "\r" if line.endswith("\r") else ""
            lines[task.line_number] = transform(current) + ending
            return "\n".join(lines)

        written = self.store.atomic_rewrite(task.file_path, rewrite)
        if written:
            logger.info("Task line rewritten: %s", task.id)
        else:
            logger.debug("Document missing, transition dropped: %s", task.file_path)
        return written

    def open_in_editor(self, task: Task, vault_root: Path) -> bool:
        """
        Open the task's note in the user's editor, at the task's line.

        Returns True if the editor exited successfully.
        """
        filepath = vault_root / task.file_path
        if not filepath.is_file():
            logger.debug("Document missing, not opening editor: %s", task.file_path)
            return False

        editor = self._find_editor()
        if editor is None:
            logger.warning("No editor found; set $EDITOR")
            return False

        # Editors with arguments, e.g. "code --wait"
        command = [*shlex.split(editor), f"+{task.line_number + 1}", str(filepath.absolute())]
        logger.debug("Running editor: %s", command)
        try:
            result = subprocess.run(command, check=False)
        except FileNotFoundError:
            logger.warning("Editor not found: %s", editor)
            return False
        return result.returncode == 0

    def _find_editor(self) -> str | None:
        """$EDITOR, then $VISUAL, then the first common editor on PATH."""
        editor = os.environ.get("EDITOR") or os.environ.get("VISUAL")
        if editor:
            return editor
        for candidate in ("nvim", "vim", "vi", "nano"):
            if shutil.which(candidate) is not None:
                return candidate
        return None
