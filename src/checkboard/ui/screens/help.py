"""Keyboard shortcut overlay."""

from rich.table import Table
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Static

SHORTCUTS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "Navigation",
        (
            ("h l / ← →", "Previous / next column"),
            ("k j / ↑ ↓", "Previous / next task"),
            ("g G / Home End", "First / last task in column"),
        ),
    ),
    (
        "Tasks",
        (
            ("H / Shift+←", "Move to previous column"),
            ("L / Shift+→", "Move to next column"),
            ("Space", "Complete or reopen"),
            ("e / Enter", "Open note at task line"),
            ("c", "Collapse column"),
        ),
    ),
    (
        "Board",
        (
            ("r", "Rescan vault"),
            ("?", "Show this help"),
            ("q", "Quit"),
        ),
    ),
)


def shortcut_table(title: str, rows: tuple[tuple[str, str], ...]) -> Table:
    table = Table(title=title, title_justify="left", show_header=False, box=None, expand=True)
    table.add_column(style="bold", width=16, no_wrap=True)
    table.add_column(style="dim")
    for keys, description in rows:
        table.add_row(keys, description)
    return table


class HelpScreen(ModalScreen):
    """Lists every key binding; any key closes it."""

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    #help-panel {
        width: 56;
        height: auto;
        padding: 1 2;
        border: round $accent;
        background: $panel;
    }

    #help-panel Static {
        margin-bottom: 1;
    }

    #help-hint {
        color: $text-muted;
        text-align: right;
    }
    """

    BINDINGS = [Binding("escape", "dismiss", "Close", show=False)]

    def compose(self) -> ComposeResult:
        with Vertical(id="help-panel"):
            for title, rows in SHORTCUTS:
                yield Static(shortcut_table(title, rows))
            yield Static("any key to close", id="help-hint")

    def on_key(self, event) -> None:
        event.stop()
        self.dismiss()
