"""Tests for app action handlers."""

from pathlib import Path
from unittest.mock import MagicMock, PropertyMock, patch

from checkboard.config import Settings
from checkboard.models import DoneColumn, Task, TaskStatus


def make_task(status: TaskStatus = TaskStatus.TODO) -> Task:
    return Task(
        id="a.md::0",
        file_path="a.md",
        line_number=0,
        raw_line="- [ ] A #task",
        description="A",
        status=status,
    )


def make_app(current_task: Task | None):
    from checkboard.app import CheckboardApp

    app = CheckboardApp.__new__(CheckboardApp)
    app.notify = MagicMock()
    app.board_service = MagicMock()
    app.transition_service = MagicMock()

    mock_screen = MagicMock()
    mock_screen.get_current_task.return_value = current_task
    return app, mock_screen


class TestMoveActions:
    """Tests for moving the focused task between columns."""

    def test_move_right_notifies_target_column(self):
        from checkboard.app import CheckboardApp

        app, screen = make_app(make_task())
        app.transition_service.move_adjacent.return_value = True
        app.board_service.get_assigned_column.return_value = "done"
        app.board_service.config.get_column.return_value = DoneColumn(id="done", label="Done")

        with (
            patch.object(CheckboardApp, "screen", new_callable=PropertyMock, return_value=screen),
            patch("checkboard.app.isinstance", return_value=True),
        ):
            app.action_move_task(1)

        app.transition_service.move_adjacent.assert_called_once_with("a.md::0", 1)
        app.notify.assert_called_once_with("Moved to Done", timeout=2)

    def test_move_at_boundary_is_silent(self):
        from checkboard.app import CheckboardApp

        app, screen = make_app(make_task())
        app.transition_service.move_adjacent.return_value = False

        with (
            patch.object(CheckboardApp, "screen", new_callable=PropertyMock, return_value=screen),
            patch("checkboard.app.isinstance", return_value=True),
        ):
            app.action_move_task(-1)

        app.transition_service.move_adjacent.assert_called_once_with("a.md::0", -1)
        app.notify.assert_not_called()

    def test_no_focused_task(self):
        from checkboard.app import CheckboardApp

        app, screen = make_app(None)

        with (
            patch.object(CheckboardApp, "screen", new_callable=PropertyMock, return_value=screen),
            patch("checkboard.app.isinstance", return_value=True),
        ):
            app.action_move_task(1)

        app.transition_service.move_adjacent.assert_not_called()


class TestToggleComplete:
    """Tests for completing and reopening the focused task."""

    def test_complete(self):
        from checkboard.app import CheckboardApp

        app, screen = make_app(make_task())
        app.transition_service.toggle_complete.return_value = True

        with (
            patch.object(CheckboardApp, "screen", new_callable=PropertyMock, return_value=screen),
            patch("checkboard.app.isinstance", return_value=True),
        ):
            app.action_toggle_complete()

        app.notify.assert_called_once_with("Completed", timeout=2)

    def test_reopen(self):
        from checkboard.app import CheckboardApp

        app, screen = make_app(make_task(TaskStatus.DONE))
        app.transition_service.toggle_complete.return_value = True

        with (
            patch.object(CheckboardApp, "screen", new_callable=PropertyMock, return_value=screen),
            patch("checkboard.app.isinstance", return_value=True),
        ):
            app.action_toggle_complete()

        app.notify.assert_called_once_with("Reopened", timeout=2)


class TestRefresh:
    """Tests for the refresh action."""

    def test_refresh_reloads_board(self):
        app, _ = make_app(None)
        app.config_service = MagicMock()
        app.config_service.has_config_error = False

        app.action_refresh()

        app.board_service.reload.assert_called_once()
        app.notify.assert_not_called()


class TestEditTask:
    """Tests for opening the focused task in an external editor."""

    def test_edit_opens_editor_and_reparses(self, tmp_path: Path):
        from checkboard.app import CheckboardApp

        app, screen = make_app(make_task())
        app.settings = Settings(vault_root=tmp_path)
        app.task_writer = MagicMock()
        app.task_writer.open_in_editor.return_value = True

        with (
            patch.object(CheckboardApp, "screen", new_callable=PropertyMock, return_value=screen),
            patch("checkboard.app.isinstance", return_value=True),
            patch.object(app, "suspend") as suspend,
        ):
            app.action_edit_task()

        suspend.assert_called_once()
        app.task_writer.open_in_editor.assert_called_once_with(make_task(), tmp_path)
        app.board_service.reparse_file.assert_called_once_with("a.md")
        app.notify.assert_not_called()

    def test_edit_warns_when_editor_fails(self, tmp_path: Path):
        from checkboard.app import CheckboardApp

        app, screen = make_app(make_task())
        app.settings = Settings(vault_root=tmp_path)
        app.task_writer = MagicMock()
        app.task_writer.open_in_editor.return_value = False

        with (
            patch.object(CheckboardApp, "screen", new_callable=PropertyMock, return_value=screen),
            patch("checkboard.app.isinstance", return_value=True),
            patch.object(app, "suspend"),
        ):
            app.action_edit_task()

        app.notify.assert_called_once_with("Could not open editor", severity="warning", timeout=3)
        app.board_service.reparse_file.assert_called_once_with("a.md")

    def test_edit_without_focused_task(self):
        from checkboard.app import CheckboardApp

        app, screen = make_app(None)
        app.task_writer = MagicMock()

        with (
            patch.object(CheckboardApp, "screen", new_callable=PropertyMock, return_value=screen),
            patch("checkboard.app.isinstance", return_value=True),
        ):
            app.action_edit_task()

        app.task_writer.open_in_editor.assert_not_called()
        app.board_service.reparse_file.assert_not_called()
