"""Tests for checklist task parsing."""

from checkboard.models import (
    BacklogColumn,
    DoneColumn,
    Priority,
    TagColumn,
    TaskStatus,
    TodoColumn,
    default_columns,
)
from checkboard.parsing import parse_tasks, split_lines
from checkboard.parsing.task_parser import extract_tags


def parse(content: str, columns=None, global_filter: str = "#task"):
    return parse_tasks(content, "notes/daily.md", global_filter, columns or default_columns())


class TestTaskLine:
    """Tests for recognizing a single task line."""

    def test_plain_task_with_due_date(self):
        """A filtered checklist line yields a task with its due date."""
        tasks = parse("- [ ] Buy groceries #task 📅 2026-02-13")

        assert len(tasks) == 1
        task = tasks[0]
        assert task.status == TaskStatus.TODO
        assert task.due_date == "2026-02-13"
        assert task.priority == Priority.NONE
        assert task.tags == []
        assert task.description == "Buy groceries"

    def test_context_tag_and_priority(self):
        """@context tags are reported as tags and kept out of the description."""
        tasks = parse("- [ ] Review PR #task @work ⏫ 📅 2026-02-14")

        task = tasks[0]
        assert task.tags == ["@work"]
        assert task.priority == Priority.HIGH
        assert task.due_date == "2026-02-14"
        assert task.description == "Review PR"

    def test_line_without_filter_is_ignored(self):
        assert parse("- [ ] Not a tracked task") == []

    def test_non_checklist_lines_are_ignored(self):
        content = "# Heading #task\nSome prose #task\n* [ ] star bullet #task\n-[ ] no space #task"
        assert parse(content) == []

    def test_custom_global_filter(self):
        content = "- [ ] One #todo\n- [ ] Two #task"
        tasks = parse(content, global_filter="#todo")

        assert [t.description for t in tasks] == ["One"]

    def test_filter_is_a_substring_gate(self):
        """A longer tag containing the filter still qualifies but is kept as a tag."""
        tasks = parse("- [ ] Read #tasks backlog")

        assert len(tasks) == 1
        assert tasks[0].tags == ["#tasks"]
        assert tasks[0].description == "Read #tasks backlog"

    def test_all_status_characters(self):
        content = "\n".join(
            f"- [{c}] Item {i} #task" for i, c in enumerate([" ", "x", "/", "-", "!"])
        )
        tasks = parse(content)

        assert [t.status for t in tasks] == [
            TaskStatus.TODO,
            TaskStatus.DONE,
            TaskStatus.IN_PROGRESS,
            TaskStatus.CANCELLED,
            TaskStatus.IMPORTANT,
        ]

    def test_unknown_status_character_is_not_a_task(self):
        assert parse("- [?] Weird #task") == []

    def test_identity_and_source_name(self):
        tasks = parse("intro\n\n- [ ] Third line #task")

        task = tasks[0]
        assert task.line_number == 2
        assert task.id == "notes/daily.md::2"
        assert task.file_path == "notes/daily.md"
        assert task.source_file_name == "daily"

    def test_done_date_is_parsed(self):
        tasks = parse("- [x] Shipped #task ✅ 2026-02-12")

        assert tasks[0].done_date == "2026-02-12"
        assert tasks[0].description == "Shipped"

    def test_recurrence_removed_from_description(self):
        tasks = parse("- [ ] Water plants #task 🔁 every week 📅 2026-02-13")

        assert tasks[0].description == "Water plants"
        assert tasks[0].due_date == "2026-02-13"

    def test_hash_tags_stay_in_description(self):
        tasks = parse("- [ ] Call #family about trip #task")

        assert tasks[0].tags == ["#family"]
        assert tasks[0].description == "Call #family about trip"

    def test_crlf_line_endings(self):
        content = "- [ ] First #task\r\n- [ ] Second #task\r\n"
        tasks = parse(content)

        assert [t.description for t in tasks] == ["First", "Second"]
        assert [t.line_number for t in tasks] == [0, 1]
        assert not tasks[0].raw_line.endswith("\r")


class TestColumnTags:
    """Tests for column tag extraction."""

    def test_column_tags_in_configuration_order(self):
        columns = [
            *default_columns(),
            TagColumn(id="waiting", label="Waiting", tag="#waiting"),
        ]
        tasks = parse("- [/] Write docs #task #waiting #in-progress", columns=columns)

        task = tasks[0]
        assert task.column_tags == ["#in-progress", "#waiting"]
        assert task.tags == []
        assert task.description == "Write docs"

    def test_non_column_tags_kept_separately(self):
        tags, column_tags = extract_tags("Fix #bug #in-progress #task", "#task", ["#in-progress"])

        assert tags == ["#bug"]
        assert column_tags == ["#in-progress"]

    def test_duplicate_column_tag_reported_once(self):
        _, column_tags = extract_tags("#in-progress x #in-progress", "#task", ["#in-progress"])

        assert column_tags == ["#in-progress"]


class TestSubtasks:
    """Tests for subtask collection below a task."""

    def test_indented_lines_become_subtasks(self):
        content = (
            "- [ ] Plan trip #task\n"
            "    - [x] Book flights\n"
            "    - [ ] Book hotel\n"
            "- [ ] Unrelated line\n"
            "    - [ ] Belongs to nobody\n"
        )
        tasks = parse(content)

        assert len(tasks) == 1
        subtasks = tasks[0].subtasks
        assert [s.description for s in subtasks] == ["Book flights", "Book hotel"]
        assert [s.status for s in subtasks] == [TaskStatus.DONE, TaskStatus.TODO]
        assert [s.line_number for s in subtasks] == [1, 2]

    def test_indented_line_with_filter_is_not_a_task(self):
        content = "- [ ] Parent #task\n\t- [ ] Child #task"
        tasks = parse(content)

        assert len(tasks) == 1
        assert tasks[0].subtasks[0].description == "Child"

    def test_heading_ends_subtasks(self):
        content = "- [ ] Parent #task\n## Next\n  - [ ] Orphan"
        tasks = parse(content)

        assert tasks[0].subtasks == []

    def test_indented_notes_do_not_end_subtasks(self):
        content = "- [ ] Parent #task\n  some note\n\n  - [ ] Child"
        tasks = parse(content)

        assert [s.description for s in tasks[0].subtasks] == ["Child"]


class TestSplitLines:
    """Tests for line splitting."""

    def test_only_newline_separates(self):
        assert split_lines("a\r\nb\nc") == ["a", "b", "c"]

    def test_trailing_newline_yields_empty_last_line(self):
        assert split_lines("a\n") == ["a", ""]


class TestColumnsArgument:
    """Column configuration only affects which tags count as column tags."""

    def test_without_tag_columns_all_tags_are_plain(self):
        columns = [
            BacklogColumn(id="backlog", label="Backlog"),
            TodoColumn(id="todo", label="Todo"),
            DoneColumn(id="done", label="Done"),
        ]
        tasks = parse("- [ ] Thing #task #in-progress", columns=columns)

        assert tasks[0].tags == ["#in-progress"]
        assert tasks[0].column_tags == []
        assert tasks[0].description == "Thing #in-progress"
