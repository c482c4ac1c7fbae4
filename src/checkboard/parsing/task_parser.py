"""Parse checklist tasks out of a document's text."""

from __future__ import annotations

import logging
import re

from ..models.checkboard_config import ColumnConfig, column_tag
from ..models.task import SubTask, Task, TaskStatus
from .markers import TAG_PATTERN
from .metadata import clean_description, parse_metadata

logger = logging.getLogger(__name__)

TASK_LINE_PATTERN = re.compile(r"^(\s*)- \[([ x/\-!])\]\s+(.+)$")


def split_lines(content: str) -> list[str]:
    """
    Split a document into lines.

    Only '\\n' separates lines so indexes agree with the writer; a
    trailing '\\r' is dropped from each line.
    """
    return [line.removesuffix("\r") for line in content.split("\n")]


def match_task_line(line: str) -> re.Match[str] | None:
    """Match `<indent>- [<status>] <text>`."""
    return TASK_LINE_PATTERN.match(line)


def extract_tags(
    raw_text: str, global_filter: str, column_tags: list[str]
) -> tuple[list[str], list[str]]:
    """
    Split the tags on a line into (tags, column_tags).

    The global filter never appears in either list. Column tags are
    reported in configuration order, not in the order they appear.
    """
    tags: list[str] = []
    found_column_tags: set[str] = set()
    column_tag_set = set(column_tags)

    for match in TAG_PATTERN.finditer(raw_text):
        tag = match.group(0)
        if tag == global_filter:
            continue
        if tag in column_tag_set:
            found_column_tags.add(tag)
        else:
            tags.append(tag)

    ordered = [tag for tag in column_tags if tag in found_column_tags]
    return tags, ordered


def _collect_subtasks(
    lines: list[str], start: int, global_filter: str, column_tags: list[str]
) -> list[SubTask]:
    """Gather indented checklist lines following a task at `start - 1`."""
    subtasks: list[SubTask] = []
    for index in range(start, len(lines)):
        line = lines[index]
        match = match_task_line(line)
        if match is None:
            # Blank lines and indented notes do not end the block
            if not line.strip() or line[0].isspace():
                continue
            break
        indent, status, raw_text = match.groups()
        if not indent:
            break
        subtasks.append(
            SubTask(
                raw_line=line,
                description=clean_description(raw_text, global_filter, column_tags),
                status=TaskStatus(status),
                line_number=index,
            )
        )
    return subtasks


def parse_tasks(
    content: str,
    file_path: str,
    global_filter: str,
    columns: list[ColumnConfig],
) -> list[Task]:
    """
    Parse every task in a document, in line order.

    A top-level checklist line becomes a task only when it contains the
    global filter tag. Indented checklist lines are never tasks on their
    own; they are attached as subtasks of the preceding task. Page tags
    are left empty for the caller to fill in.
    """
    column_tags = [tag for tag in (column_tag(col) for col in columns) if tag is not None]
    source_file_name = Task.source_name_for(file_path)
    lines = split_lines(content)
    tasks: list[Task] = []

    for index, line in enumerate(lines):
        match = match_task_line(line)
        if match is None:
            continue

        indent, status, raw_text = match.groups()
        if indent:
            continue
        if global_filter not in line:
            continue

        metadata = parse_metadata(raw_text)
        tags, matched_column_tags = extract_tags(raw_text, global_filter, column_tags)

        tasks.append(
            Task(
                id=Task.make_id(file_path, index),
                file_path=file_path,
                line_number=index,
                raw_line=line,
                description=clean_description(raw_text, global_filter, column_tags),
                status=TaskStatus(status),
                due_date=metadata.due_date,
                done_date=metadata.done_date,
                priority=metadata.priority,
                tags=tags,
                column_tags=matched_column_tags,
                source_file_name=source_file_name,
                subtasks=_collect_subtasks(lines, index + 1, global_filter, column_tags),
            )
        )

    logger.debug("Parsed %d tasks from %s", len(tasks), file_path)
    return tasks
