"""Screen scaffolding shared by every section.

This module hides the design decisions about:
- The common frame (header, body, trace panel, footer)
- Back navigation with Escape
- How a screen reaches the app's service and trace log
- How user confirmations are presented
"""

from typing import TYPE_CHECKING, cast

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen, Screen
from textual.widgets import Button, Footer, Header, Static

from .widgets import DebugPanel

if TYPE_CHECKING:
    from .app import TaxAssistApp


class BaseScreen(Screen):
    """Full-page section with a trace panel and Escape to go back."""

    BINDINGS = [Binding("escape", "back", "Back")]

    SECTION_TITLE = ""

    @property
    def taxassist(self) -> "TaxAssistApp":
        return cast("TaxAssistApp", self.app)

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(classes="screen-body"):
            if self.SECTION_TITLE:
                yield Static(self.SECTION_TITLE, classes="section-title")
            yield from self.compose_body()
        yield DebugPanel(id="debug-panel")
        yield Footer()

    def compose_body(self) -> ComposeResult:
        yield from ()

    def on_mount(self) -> None:
        if self.SECTION_TITLE:
            self.sub_title = self.SECTION_TITLE
        self.taxassist.attach_debug_panel(self.query_one("#debug-panel", DebugPanel))

    def trace(self, level: str, component: str, message: str) -> None:
        self.taxassist.trace(level, component, message)

    def action_back(self) -> None:
        self.app.pop_screen()


class ConfirmationScreen(ModalScreen[bool]):
    """Yes/No dialog. Dismisses with True for yes."""

    CSS = """
    ConfirmationScreen {
        align: center middle;
        background: $background 70%;
    }

    #confirmation-dialog {
        width: 60;
        height: auto;
        border: tall $accent;
        background: $surface;
        padding: 1 2;
    }

    #confirmation-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $accent;
        padding: 0 0 1 0;
        border-bottom: solid $border;
        margin-bottom: 1;
    }

    #confirmation-prompt {
        width: 100%;
        text-align: center;
        padding: 1 2;
        margin-bottom: 1;
    }

    #confirmation-buttons {
        width: 100%;
        height: 3;
        align: center middle;
    }

    #confirmation-buttons Button {
        margin: 0 1;
        min-width: 10;
    }
    """

    BINDINGS = [
        Binding("y", "answer(True)", "Yes", show=False),
        Binding("n", "answer(False)", "No", show=False),
        Binding("escape", "answer(False)", "Cancel", show=False),
    ]

    def __init__(self, prompt: str, title: str = "Please Confirm") -> None:
        super().__init__()
        self._prompt = prompt
        self._title = title

    def compose(self) -> ComposeResult:
        with Vertical(id="confirmation-dialog"):
            yield Static(self._title, id="confirmation-title")
            yield Static(self._prompt, id="confirmation-prompt")
            with Horizontal(id="confirmation-buttons"):
                yield Button("Yes", id="btn-yes", variant="error")
                yield Button("No", id="btn-no", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "btn-yes")

    def action_answer(self, confirmed: bool) -> None:
        self.dismiss(confirmed)
