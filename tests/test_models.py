"""Tests for task and configuration models."""

import pytest
from pydantic import ValidationError

from checkboard.models import (
    Board,
    CheckboardConfig,
    DoneColumn,
    TagColumn,
    Task,
    TaskStatus,
    column_tag,
)
from checkboard.services import line_writer


class TestTask:
    """Tests for the Task model."""

    def test_identity(self):
        assert Task.make_id("a/b.md", 4) == "a/b.md::4"
        assert Task.source_name_for("a/b.md") == "b"

    def test_with_file_path(self):
        task = Task(id="a.md::2", file_path="a.md", line_number=2, raw_line="- [ ] x #task")

        moved = task.with_file_path("dir/c.md")

        assert moved.id == "dir/c.md::2"
        assert moved.source_file_name == "c"
        assert task.file_path == "a.md"

    def test_tasks_are_immutable(self):
        task = Task(id="a.md::0", file_path="a.md", line_number=0, raw_line="")

        with pytest.raises(ValidationError):
            task.description = "changed"

    def test_closed_statuses(self):
        assert TaskStatus.DONE.is_closed
        assert TaskStatus.CANCELLED.is_closed
        assert not TaskStatus.IN_PROGRESS.is_closed
        assert not TaskStatus.IMPORTANT.is_closed


class TestColumnConfig:
    """Tests for column variants."""

    def test_discriminated_by_type(self):
        config = CheckboardConfig(
            columns=[
                {"id": "waiting", "label": "Waiting", "type": "tag", "tag": "waiting"},
                {"id": "done", "label": "Done", "type": "done"},
            ]
        )

        assert isinstance(config.columns[0], TagColumn)
        assert config.columns[0].tag == "#waiting"
        assert isinstance(config.columns[1], DoneColumn)
        assert config.columns[1].limit is None

    def test_tag_column_requires_tag(self):
        with pytest.raises(ValidationError):
            CheckboardConfig(columns=[{"id": "t", "label": "T", "type": "tag"}])

    @pytest.mark.parametrize("tag", ["waiting.on", "#two words", "#", "#a#b", "@waiting"])
    def test_tag_must_be_single_token(self, tag):
        """Tags the line parser cannot read back are rejected."""
        with pytest.raises(ValidationError):
            TagColumn(id="w", label="W", tag=tag)

    def test_configured_tag_is_added_once(self):
        tag = TagColumn(id="w", label="W", tag="waiting_on-2").tag

        once = line_writer.add_tag("- [ ] A #task", tag)

        assert line_writer.add_tag(once, tag) == once == "- [ ] A #task #waiting_on-2"

    def test_only_tag_columns_have_tags(self):
        config = CheckboardConfig()

        assert [column_tag(col) for col in config.columns] == [None, None, "#in-progress", None]
        assert config.column_tags == ["#in-progress"]

    def test_invalid_color(self):
        with pytest.raises(ValidationError):
            TagColumn(id="x", label="X", tag="#x", color="#12")

    def test_invalid_id(self):
        with pytest.raises(ValidationError):
            DoneColumn(id="has space", label="Done")

    def test_limit_must_be_positive(self):
        with pytest.raises(ValidationError):
            DoneColumn(id="done", label="Done", limit=0)


class TestCheckboardConfig:
    """Tests for root configuration validation."""

    def test_defaults(self):
        config = CheckboardConfig.default()

        assert config.column_ids == ["backlog", "todo", "in-progress", "done"]
        assert config.global_filter == "#task"
        assert config.todo_filter == "due-today"
        assert config.done_limit == 10

    def test_empty_columns_fall_back(self):
        assert CheckboardConfig(columns=[]).column_ids == CheckboardConfig().column_ids

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValidationError):
            CheckboardConfig(
                columns=[
                    {"id": "a", "label": "A", "type": "todo"},
                    {"id": "a", "label": "B", "type": "done"},
                ]
            )

    def test_blank_filter_falls_back(self):
        assert CheckboardConfig(global_filter="  ").global_filter == "#task"

    def test_invalid_todo_filter(self):
        with pytest.raises(ValidationError):
            CheckboardConfig(todo_filter="everything")

    def test_is_excluded(self):
        config = CheckboardConfig(excluded_folders=["Templates", "archive/old/"])

        assert config.is_excluded("Templates/daily.md")
        assert config.is_excluded("archive/old/x.md")
        assert not config.is_excluded("TemplatesExtra/a.md")
        assert not config.is_excluded("archive/new.md")

    def test_get_column(self):
        config = CheckboardConfig()

        assert config.get_column("done").label == "Done"
        assert config.get_column("nope") is None


class TestBoard:
    """Tests for the Board snapshot."""

    def test_visible_columns_in_config_order(self):
        board = Board(columns={"done": [], "todo": []})

        ids = [col.id for col, _ in board.get_visible_columns()]

        assert ids == ["backlog", "todo", "in-progress", "done"]
        assert board.get_column("missing") == []
