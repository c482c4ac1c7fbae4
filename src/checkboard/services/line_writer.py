"""Line mutation engine: text-in, text-out state transitions for one task line."""

from __future__ import annotations

import re
from datetime import date

from ..models.checkboard_config import ColumnConfig, TagColumn
from ..models.task import TaskStatus
from ..parsing.markers import (
    ALL_MARKERS,
    CHECKBOX_PATTERN,
    DONE,
    TAG_PATTERN,
    date_token_pattern,
    tag_token_pattern,
)
from ..utils.dates import today_str

_DONE_TOKEN = date_token_pattern(DONE)
_INDENT = re.compile(r"^\s*")
_WHITESPACE = re.compile(r"\s+")


def collapse_line(line: str) -> str:
    """Collapse whitespace runs to one space, keeping the line's indentation."""
    indent = _INDENT.match(line).group(0)
    rest = line[len(indent) :]
    return indent + _WHITESPACE.sub(" ", rest).rstrip()


def has_tag(line: str, tag: str) -> bool:
    """Does the line carry this exact tag token?"""
    return any(match.group(0) == tag for match in TAG_PATTERN.finditer(line))


def set_status(line: str, status: TaskStatus) -> str:
    """Rewrite the checkbox character of a checklist line."""
    return CHECKBOX_PATTERN.sub(lambda m: f"{m.group(1)}{status.value}{m.group(3)}", line, count=1)


def strip_tag_tokens(line: str, tag: str) -> str:
    """Delete every occurrence of a tag token and the whitespace before it."""
    return tag_token_pattern(tag).sub("", line)


def insert_tag(line: str, tag: str) -> str:
    """
    Insert a tag before the first metadata marker, or at the end of the line.

    Exactly one space separates the tag from its neighbours.
    """
    positions = [pos for pos in (line.find(marker) for marker in ALL_MARKERS) if pos != -1]
    if not positions:
        return f"{line.rstrip()} {tag}"
    insert_at = min(positions)
    before = line[:insert_at].rstrip()
    after = line[insert_at:]
    return f"{before} {tag} {after}"


def add_tag(line: str, tag: str) -> str:
    """Add a tag; no-op when the tag is already present."""
    if has_tag(line, tag):
        return line
    return insert_tag(line, tag)


def remove_tag(line: str, tag: str) -> str:
    """Remove all occurrences of a tag."""
    return collapse_line(strip_tag_tokens(line, tag))


def complete(line: str, column_tags: list[str], done_date: str | None = None) -> str:
    """
    Mark a line done.

    Sets the checkbox to [x], strips the given column tags and appends
    a done date unless one is already present.
    """
    result = set_status(line, TaskStatus.DONE)
    for tag in column_tags:
        result = strip_tag_tokens(result, tag)
    if DONE not in result:
        result = f"{result.rstrip()} {DONE} {done_date or today_str()}"
    return collapse_line(result)


def uncomplete(line: str) -> str:
    """Mark a line incomplete and drop its done date."""
    result = set_status(line, TaskStatus.TODO)
    result = _DONE_TOKEN.sub("", result)
    return collapse_line(result)


def move_to_column(
    line: str,
    status: TaskStatus,
    target: ColumnConfig,
    column_tags: list[str],
    today: date | None = None,
) -> str:
    """
    Rewrite a line for a move into another column.

    Moving to the done column completes the task. Any other move reopens
    a done task, strips every column tag and, for tag columns, adds the
    target's tag. Nothing else on the line changes.
    """
    tags = [tag for tag in column_tags if tag]

    if target.type == "done":
        return complete(line, tags, today_str(today))

    result = line
    if status == TaskStatus.DONE:
        result = set_status(result, TaskStatus.TODO)
        result = _DONE_TOKEN.sub("", result)

    for tag in tags:
        result = strip_tag_tokens(result, tag)

    if isinstance(target, TagColumn):
        result = insert_tag(result, target.tag)

    return collapse_line(result)
