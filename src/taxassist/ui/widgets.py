"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Chat message rendering and in-place streaming updates
- Input bar submission
- Trace panel formatting and level filtering
- Dashboard cards
"""

from datetime import datetime

from rich.console import RenderableType
from rich.style import Style
from rich.text import Text as RichText
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.widgets import Button, RichLog, Static, TextArea

from ..chat.models import ChatMessage
from ..features.models import Feature, FeatureInfo
from ..llm.models import Reference
from ..markup import render_console
from .config import (
    AI_LABEL,
    CODE_THEME_DARK,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    THINKING_PLACEHOLDER,
    USER_LABEL,
    LogLevel,
)


def format_references(references: list[Reference]) -> RichText:
    """Numbered source list with clickable links."""
    text = RichText("Sources:", style="bold")
    for index, reference in enumerate(references, start=1):
        text.append(f"\n{index}. ")
        text.append(reference.title, style=Style(link=reference.uri))
    return text


class MarkupView(Static):
    """Static view of message text rendered through the markup renderer."""

    def __init__(self, *args, code_theme: str = CODE_THEME_DARK, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._source = ""
        self.code_theme = code_theme

    @property
    def source(self) -> str:
        return self._source

    def set_source(self, text: str) -> None:
        self._source = text
        self.update(render_console(text, code_theme=self.code_theme))


class MessageView(Vertical):
    """One turn in the chat history."""

    def __init__(self, message: ChatMessage, content: RenderableType, **kwargs) -> None:
        css_class = "user-message" if message.is_user else "ai-message"
        super().__init__(classes=f"chat-message {css_class}", **kwargs)
        label = USER_LABEL if message.is_user else AI_LABEL
        self.heading = Static(
            f"{label} [{message.timestamp.strftime('%H:%M')}]",
            classes="message-header",
            markup=False,
        )
        self.body = Static(content, classes="message-content")
        self.sources = Static("", classes="message-references")
        self.sources.display = False

    def compose(self):
        yield self.heading
        yield self.body
        yield self.sources

    def show_references(self, references: list[Reference] | None) -> None:
        if references:
            self.sources.update(format_references(references))
            self.sources.display = True


class ChatHistoryWidget(VerticalScroll):
    """Scrollable chat history, one view per turn.

    Turns are keyed by message id, so a streaming answer is re-rendered in
    place and a discarded turn can be removed.
    """

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "No messages yet"
    ALLOW_SELECT = True

    def __init__(self, *args, code_theme: str = CODE_THEME_DARK, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.code_theme = code_theme
        self._views: dict[str, MessageView] = {}

    @property
    def message_ids(self) -> list[str]:
        return list(self._views)

    def upsert_message(self, message: ChatMessage, streaming: bool = False) -> None:
        """Show a new turn or refresh an existing one."""
        view = self._views.get(message.id)
        if view is None:
            view = MessageView(message, self._content(message, streaming))
            self._views[message.id] = view
            self.mount(view)
            self._update_subtitle()
        else:
            view.body.update(self._content(message, streaming))
        view.show_references(message.references)
        self.scroll_end(animate=False)

    def sync(self, messages: list[ChatMessage], open_id: str | None = None) -> None:
        """Make the view match a conversation snapshot."""
        wanted = {message.id for message in messages}
        for message_id in [mid for mid in self._views if mid not in wanted]:
            self._views.pop(message_id).remove()
        for message in messages:
            self.upsert_message(message, streaming=message.id == open_id)
        self._update_subtitle()

    def clear_history(self) -> None:
        self._views.clear()
        self.remove_children()
        self._update_subtitle()

    def _content(self, message: ChatMessage, streaming: bool) -> RenderableType:
        if message.is_user:
            return RichText(message.text)
        if not message.text and streaming:
            return RichText(THINKING_PLACEHOLDER, style="dim italic")
        return render_console(message.text, code_theme=self.code_theme)

    def _update_subtitle(self) -> None:
        count = len(self._views)
        self.border_subtitle = f"{count} messages" if count else "No messages yet"


class ChatInputBar(Horizontal):
    """Multi-line prompt editor with a Send button.

    Ctrl+J submits (terminals do not report modifiers on Enter).
    """

    class Submitted(Message):
        """Posted when the user submits a non-blank prompt."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, placeholder: str = "", **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._placeholder = placeholder

    def compose(self):
        text_area = TextArea(id="chat-input", show_line_numbers=False)
        text_area.cursor_blink = False
        text_area.placeholder = self._placeholder
        yield text_area
        yield Button("Send", id="send-btn", variant="success").with_tooltip(
            "Submit message (Ctrl+J)"
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def on_key(self, event) -> None:
        if event.key == "ctrl+j":
            self._submit()
            event.prevent_default()
            event.stop()

    def _submit(self) -> None:
        if self.disabled:
            return
        text_area = self.query_one("#chat-input", TextArea)
        value = text_area.text.strip()
        if value:
            text_area.text = ""
            self.post_message(self.Submitted(value))

    def set_enabled(self, enabled: bool) -> None:
        self.disabled = not enabled

    def focus_input(self) -> None:
        self.query_one("#chat-input", TextArea).focus()


class DebugPanel(RichLog):
    """Trace panel with level filtering.

    Shows timestamped entries from all components.
    Hidden by default, shown with --log-level or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Hidden"

    LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    COMPONENT_COLORS = {
        "TUI": "cyan",
        "LLM": "magenta",
        "Chat": "green",
        "Theme": "yellow",
        "Features": "blue",
    }

    def __init__(self, *args, log_level: LogLevel = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=False,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level
        self.display = False

    @property
    def log_level(self) -> LogLevel:
        return self._log_level

    @log_level.setter
    def log_level(self, level: LogLevel) -> None:
        self._log_level = level
        self._update_subtitle()

    def trace(
        self,
        component: str,
        message: str,
        level: LogLevel = LogLevel.DEBUG,
        timestamp: datetime | None = None
    ) -> None:
        """Add an entry if it meets the current level threshold."""
        if level < self._log_level:
            return

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        stamp = (timestamp or datetime.now()).strftime(LOG_TIMESTAMP_FORMAT)
        line = RichText.assemble(
            (f"{stamp} ", "dim"),
            (f"{level.name:<7} ", self.LEVEL_COLORS.get(level, "white")),
            (f"[{component}] ", self.COMPONENT_COLORS.get(component, "white")),
            message,
        )
        self.write(line)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self._update_subtitle()

    def set_visible(self, visible: bool) -> None:
        if visible:
            self.show()
        else:
            self.hide()

    def _update_subtitle(self) -> None:
        self.border_subtitle = f"Level: {self._log_level.name}" if self.display else "Hidden"


class FeatureCard(Static):
    """Focusable dashboard card; Enter or a click opens the feature."""

    can_focus = True

    BINDINGS = [Binding("enter", "select", "Open", show=False)]

    class Selected(Message):
        def __init__(self, feature: Feature) -> None:
            super().__init__()
            self.feature = feature

    def __init__(self, info: FeatureInfo, enabled: bool = True, **kwargs) -> None:
        body = RichText.assemble((info.title, "bold"), "\n", (info.description, "dim"))
        if not enabled:
            body.append("\nRequires an API key", style="italic")
        super().__init__(body, id=f"card-{info.feature.value}", **kwargs)
        self.feature_info = info
        self.set_class(not enabled, "-disabled")

    def on_click(self, event: Click) -> None:
        event.stop()
        self.action_select()

    def action_select(self) -> None:
        self.post_message(self.Selected(self.feature_info.feature))
