"""Bridges between the chat core and the widgets.

Hides how conversation updates reach the screen: every streamed
fragment re-renders its turn, a failed turn is removed from the view, and trace
entries are routed by level name.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING

from ..chat.conversation import Conversation
from ..chat.models import ChatMessage

if TYPE_CHECKING:
    from textual.widgets import Static

    from .widgets import ChatHistoryWidget

TraceCallback = Callable[[str, str, str], None]


class ChatViewCallback:
    """Keeps a ChatHistoryWidget in step with the conversation it owns.

    The conversation calls on_update for every added turn and every applied
    fragment, and each call re-renders that turn once.
    """

    def __init__(
        self,
        history: "ChatHistoryWidget",
        status: "Static",
        trace: TraceCallback | None = None,
        notify: Callable[[str], None] | None = None,
    ) -> None:
        self.history = history
        self.status = status
        self._trace = trace
        self._notify = notify
        self.conversation = Conversation(on_update=self.on_update)

    def on_update(self, message: ChatMessage) -> None:
        streaming = self.conversation.open_turn is message
        self.history.upsert_message(message, streaming=streaming)

        if not streaming and not message.is_user:
            sources = len(message.references or [])
            self._debug("info", "Chat", f"Answer complete ({len(message.text)} chars, {sources} sources)")

    def on_error(self, message: str) -> None:
        """Drop the discarded turn from the view and surface the error."""
        open_turn = self.conversation.open_turn
        self.history.sync(
            self.conversation.messages,
            open_id=open_turn.id if open_turn is not None else None,
        )
        self.show_error(message)
        self._debug("error", "Chat", message)
        if self._notify is not None:
            self._notify(message)

    def show_error(self, message: str) -> None:
        self.status.update(message)
        self.status.set_class(True, "-error")

    def clear_status(self) -> None:
        self.status.update("")
        self.status.set_class(False, "-error")

    def clear(self) -> None:
        self.conversation.clear()
        self.history.clear_history()
        self.clear_status()

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._trace is not None:
            self._trace(level, component, message)
