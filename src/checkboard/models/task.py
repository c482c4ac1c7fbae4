"""Task domain model."""

from __future__ import annotations

from enum import Enum
from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict, Field


class TaskStatus(str, Enum):
    """Checkbox characters recognized on a checklist line."""

    TODO = " "
    DONE = "x"
    IN_PROGRESS = "/"
    CANCELLED = "-"
    IMPORTANT = "!"

    @property
    def is_closed(self) -> bool:
        """Done and cancelled tasks both belong in the done column."""
        return self in (TaskStatus.DONE, TaskStatus.CANCELLED)


class Priority(str, Enum):
    """Priority levels, highest first."""

    HIGHEST = "highest"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"


class SubTask(BaseModel):
    """An indented checklist line captured below its parent task."""

    model_config = ConfigDict(frozen=True)

    raw_line: str
    description: str
    status: TaskStatus
    line_number: int


class Task(BaseModel):
    """
    One checklist line recognized as a task.

    Tasks are immutable snapshots rebuilt on every parse. Identity is
    derived from (file_path, line_number) and is only rewritten when the
    containing document is renamed.
    """

    model_config = ConfigDict(frozen=True)

    id: str  # "<file_path>::<line_number>"
    file_path: str
    line_number: int
    raw_line: str

    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    due_date: str | None = None  # YYYY-MM-DD
    done_date: str | None = None
    priority: Priority = Priority.NONE
    tags: list[str] = Field(default_factory=list)  # excludes filter and column tags
    column_tags: list[str] = Field(default_factory=list)
    source_file_name: str = ""
    subtasks: list[SubTask] = Field(default_factory=list)
    page_tags: list[str] = Field(default_factory=list)

    @staticmethod
    def make_id(file_path: str, line_number: int) -> str:
        """Compute the task identity for a document line."""
        return f"{file_path}::{line_number}"

    @staticmethod
    def source_name_for(file_path: str) -> str:
        """Display name of a document: its file name without .md."""
        return PurePosixPath(file_path).name.removesuffix(".md")

    @property
    def is_closed(self) -> bool:
        return self.status.is_closed

    def with_file_path(self, file_path: str) -> Task:
        """Return a copy of this task re-homed to a renamed document."""
        return self.model_copy(
            update={
                "file_path": file_path,
                "id": self.make_id(file_path, self.line_number),
                "source_file_name": self.source_name_for(file_path),
            }
        )

    def with_page_tags(self, page_tags: list[str]) -> Task:
        return self.model_copy(update={"page_tags": list(page_tags)})
