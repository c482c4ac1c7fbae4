"""Tests for printing the board without the TUI."""

from datetime import date
from pathlib import Path

from checkboard.cli.listing import format_task, print_board
from checkboard.models import Priority, SubTask, Task, TaskStatus
from checkboard.repositories import FilesystemDocumentStore
from checkboard.services import BoardService

TODAY = date(2026, 2, 13)


class TestFormatTask:
    """Tests for single-task output."""

    def test_includes_priority_due_and_source(self):
        task = Task(
            id="notes/home.md::0",
            file_path="notes/home.md",
            line_number=0,
            raw_line="",
            description="Fix tap",
            priority=Priority.HIGH,
            due_date="2026-02-20",
            tags=["@home"],
            source_file_name="home",
        )

        # capsys is not a TTY, so no color codes
        assert format_task(task, TODAY) == "[ ] Fix tap !! Feb 20 @home (home)"

    def test_closed_task(self):
        task = Task(
            id="a.md::0",
            file_path="a.md",
            line_number=0,
            raw_line="",
            description="Done thing",
            status=TaskStatus.DONE,
            source_file_name="a",
            subtasks=[SubTask(raw_line="", description="step", status=TaskStatus.DONE, line_number=1)],
        )

        assert format_task(task, TODAY) == "[x] Done thing (a)"


class TestPrintBoard:
    """Tests for whole-board output."""

    def test_prints_columns_and_subtasks(self, tmp_path: Path, capsys):
        (tmp_path / "a.md").write_text(
            "- [ ] Someday #task\n  - [x] First step\n- [x] Shipped #task ✅ 2026-02-12\n",
            encoding="utf-8",
        )
        service = BoardService(FilesystemDocumentStore(tmp_path), today=lambda: TODAY)
        service.full_scan()

        print_board(service.load_board(), TODAY)

        out = capsys.readouterr().out
        assert "Backlog (1)" in out
        assert "To Do (0)" in out
        assert "Done (1)" in out
        assert "[ ] Someday (a)" in out
        assert "[x] First step" in out
        assert "[x] Shipped (a)" in out
