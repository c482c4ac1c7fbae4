"""Text to structured task parsing."""

from .metadata import TaskMetadata, clean_description, parse_metadata, parse_priority
from .page_tags import parse_page_tags
from .task_parser import extract_tags, parse_tasks, split_lines

__all__ = [
    "TaskMetadata",
    "clean_description",
    "extract_tags",
    "parse_metadata",
    "parse_page_tags",
    "parse_priority",
    "parse_tasks",
    "split_lines",
]
