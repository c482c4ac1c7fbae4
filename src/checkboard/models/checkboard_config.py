"""Configuration models for checkboard.yml."""

from __future__ import annotations

import re
from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_GLOBAL_FILTER = "#task"
DEFAULT_DONE_LIMIT = 10
DEFAULT_EXCLUDED_FOLDERS = [".trash", ".stversions", ".claude", ".roo", "Templates"]

COLUMN_TAG_RE = re.compile(r"#[\w-]+")

TodoFilterMode = Literal["due-today", "all-undone"]


def _validate_color(v: str) -> str:
    """Validate color is a valid named color or hex code."""
    if v.startswith("#"):
        hex_part = v[1:]
        if len(hex_part) not in (3, 6):
            raise ValueError("Hex color must be 3 or 6 characters (e.g., #fff or #ffffff)")
        if not all(c in "0123456789abcdefABCDEF" for c in hex_part):
            raise ValueError("Invalid hex color code")
    return v


def normalize_tag(value: str) -> str:
    """Ensure a tag starts with '#' and is a single tag token."""
    value = value.strip()
    if not value:
        raise ValueError("Tag cannot be empty")
    tag = value if value.startswith("#") else f"#{value}"
    if not COLUMN_TAG_RE.fullmatch(tag):
        raise ValueError("Tag may contain only letters, digits, hyphens and underscores")
    return tag


class _BaseColumn(BaseModel):
    """Fields shared by every column variant."""

    id: str = Field(..., min_length=1)
    label: str = Field(..., min_length=1)
    color: str = "#6B7280"
    collapsed: bool = False

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        """Column IDs may contain letters, digits, hyphens and underscores."""
        if not all(c.isalnum() or c in "-_" for c in v):
            raise ValueError("Column ID must be alphanumeric with hyphens or underscores only")
        return v

    @field_validator("color")
    @classmethod
    def validate_color(cls, v: str) -> str:
        return _validate_color(v)


class TodoColumn(_BaseColumn):
    """Dated, open tasks."""

    type: Literal["todo"] = "todo"


class BacklogColumn(_BaseColumn):
    """Open tasks without a due date."""

    type: Literal["backlog"] = "backlog"


class TagColumn(_BaseColumn):
    """Open tasks carrying the column's tag."""

    type: Literal["tag"] = "tag"
    tag: str

    @field_validator("tag")
    @classmethod
    def validate_tag(cls, v: str) -> str:
        return normalize_tag(v)


class DoneColumn(_BaseColumn):
    """Done and cancelled tasks."""

    type: Literal["done"] = "done"
    limit: int | None = Field(default=None, ge=1)


ColumnConfig = Annotated[
    TodoColumn | BacklogColumn | TagColumn | DoneColumn,
    Field(discriminator="type"),
]


def column_tag(column: _BaseColumn) -> str | None:
    """The tag a column writes onto task lines, if it is a tag column."""
    if isinstance(column, TagColumn):
        return column.tag
    return None


def default_columns() -> list[ColumnConfig]:
    """Backlog, To Do, In Progress and Done."""
    return [
        BacklogColumn(id="backlog", label="Backlog", collapsed=True),
        TodoColumn(id="todo", label="To Do"),
        TagColumn(id="in-progress", label="In Progress", tag="#in-progress", color="#F59E0B"),
        DoneColumn(id="done", label="Done", color="#10B981", limit=DEFAULT_DONE_LIMIT),
    ]


class CheckboardConfig(BaseModel):
    """Root configuration from checkboard.yml."""

    version: int = 1
    columns: list[ColumnConfig] = Field(default_factory=default_columns)
    excluded_folders: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDED_FOLDERS))
    global_filter: str = DEFAULT_GLOBAL_FILTER
    todo_filter: TodoFilterMode = "due-today"
    done_limit: int = Field(default=DEFAULT_DONE_LIMIT, ge=1)

    @field_validator("columns")
    @classmethod
    def validate_columns(cls, v: list[ColumnConfig]) -> list[ColumnConfig]:
        """Empty column lists fall back to the defaults; IDs must be unique."""
        if not v:
            return default_columns()
        ids = [col.id for col in v]
        if len(ids) != len(set(ids)):
            raise ValueError("Column IDs must be unique")
        return v

    @field_validator("global_filter")
    @classmethod
    def validate_global_filter(cls, v: str) -> str:
        return v.strip() or DEFAULT_GLOBAL_FILTER

    @field_validator("excluded_folders")
    @classmethod
    def validate_excluded_folders(cls, v: list[str]) -> list[str]:
        """Strip whitespace and trailing slashes, drop blanks."""
        return [folder.strip().rstrip("/") for folder in v if folder.strip().rstrip("/")]

    @property
    def column_ids(self) -> list[str]:
        """List of column IDs in display order."""
        return [col.id for col in self.columns]

    @property
    def column_tags(self) -> list[str]:
        """Tags of all tag columns, in configuration order."""
        return [tag for tag in (column_tag(col) for col in self.columns) if tag is not None]

    def get_column(self, column_id: str) -> ColumnConfig | None:
        """Get column config by ID."""
        for col in self.columns:
            if col.id == column_id:
                return col
        return None

    def is_excluded(self, path: str) -> bool:
        """Is a document path inside one of the excluded folders?"""
        return any(
            path == folder or path.startswith(folder + "/") for folder in self.excluded_folders
        )

    @classmethod
    def default(cls) -> CheckboardConfig:
        """Return default configuration."""
        return cls()
