"""Extract typed metadata embedded in task text and build clean descriptions."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from ..models.task import Priority
from .markers import (
    CONTEXT_TAG_PATTERN,
    DATE_MARKERS,
    PRIORITY_MARKERS,
    PRIORITY_PATTERN,
    RECURRENCE_PATTERN,
    date_pattern,
    date_token_pattern,
)

_DATE_PATTERNS = {field: date_pattern(marker) for field, marker in DATE_MARKERS.items()}
_DATE_TOKEN_PATTERNS = [date_token_pattern(marker) for marker in DATE_MARKERS.values()]
_WHITESPACE = re.compile(r"\s+")


class TaskMetadata(BaseModel):
    """Optional fields parsed from `<marker> <value>` pairs."""

    model_config = ConfigDict(frozen=True)

    due_date: str | None = None
    done_date: str | None = None
    created_date: str | None = None
    scheduled_date: str | None = None
    start_date: str | None = None
    cancelled_date: str | None = None
    priority: Priority = Priority.NONE
    recurrence: str | None = None


def parse_priority(text: str) -> Priority:
    """
    Find the priority of a line.

    The priority table is scanned in order and the first glyph present
    anywhere in the text wins, regardless of where it appears.
    """
    for glyph, priority in PRIORITY_MARKERS:
        if glyph in text:
            return priority
    return Priority.NONE


def parse_metadata(text: str) -> TaskMetadata:
    """Parse all metadata from the text of a task line."""
    fields: dict[str, object] = {}

    for field, pattern in _DATE_PATTERNS.items():
        match = pattern.search(text)
        if match:
            fields[field] = match.group(1)

    fields["priority"] = parse_priority(text)

    recurrence = RECURRENCE_PATTERN.search(text)
    if recurrence:
        fields["recurrence"] = recurrence.group(1).strip()

    return TaskMetadata(**fields)


def strip_tag(text: str, tag: str, replacement: str = " ") -> str:
    """Remove every occurrence of an exact tag token along with surrounding spaces."""
    if not tag:
        return text
    pattern = re.compile(r"\s*" + re.escape(tag) + r"(?![\w-])\s*")
    return pattern.sub(replacement, text)


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def clean_description(raw_text: str, global_filter: str, column_tags: list[str]) -> str:
    """
    Build the display description of a task.

    Removes the global filter tag, the configured column tags, every
    metadata marker with its value, priority glyphs and @context tags,
    then collapses whitespace. Everything else passes through unchanged.
    """
    text = strip_tag(raw_text, global_filter)

    for tag in column_tags:
        text = strip_tag(text, tag)

    for pattern in _DATE_TOKEN_PATTERNS:
        text = pattern.sub("", text)

    text = RECURRENCE_PATTERN.sub("", text)
    text = PRIORITY_PATTERN.sub("", text)
    text = CONTEXT_TAG_PATTERN.sub("", text)

    return collapse_whitespace(text)
