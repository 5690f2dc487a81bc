"""Message buffer for one chat view.

Folds streamed fragments into the open AI turn. Callbacks from the stream
arrive one at a time on the event loop, so no locking is needed; a closed
conversation (the view went away) silently ignores late callbacks.
"""

from collections.abc import Callable

from ..llm.errors import TaxAssistError
from ..llm.models import HistoryTurn, Reference
from .models import ChatMessage, Sender

UpdateCallback = Callable[[ChatMessage], None]


class TurnInProgressError(TaxAssistError):
    """A new turn was started while an AI turn is still streaming."""

    def __init__(self) -> None:
        super().__init__("Wait for the current response to finish before sending another message.")


class Conversation:
    """Ordered turns of one conversation, with at most one open AI turn.

    Example:
        conversation = Conversation(on_update=view.refresh_message)
        conversation.add_user_turn("When is Form 1065 due?")
        conversation.begin_ai_turn()
        conversation.consume("March ", False)
        conversation.consume("15.", False)
        conversation.consume("", True)
    """

    def __init__(self, on_update: UpdateCallback | None = None) -> None:
        self._messages: list[ChatMessage] = []
        self._open: ChatMessage | None = None
        self._pending_references: list[Reference] | None = None
        self._alive = True
        self._on_update = on_update

    @property
    def messages(self) -> list[ChatMessage]:
        """Snapshot of the turns, oldest first."""
        return list(self._messages)

    @property
    def open_turn(self) -> ChatMessage | None:
        return self._open

    @property
    def is_streaming(self) -> bool:
        return self._open is not None

    @property
    def is_alive(self) -> bool:
        return self._alive

    def add_user_turn(self, text: str) -> ChatMessage:
        """Append a user turn."""
        message = ChatMessage(sender=Sender.USER, text=text)
        self._messages.append(message)
        self._notify(message)
        return message

    def begin_ai_turn(self) -> ChatMessage:
        """Open an empty AI turn to receive fragments.

        Raises:
            TurnInProgressError: Another AI turn is still open
        """
        if self._open is not None:
            raise TurnInProgressError()
        message = ChatMessage(sender=Sender.AI)
        self._messages.append(message)
        self._open = message
        self._pending_references = None
        self._notify(message)
        return message

    def consume(
        self,
        fragment: str,
        is_final: bool,
        references: list[Reference] | None = None
    ) -> bool:
        """Apply one fragment to the open AI turn.

        References are cumulative upstream, so the latest non-empty list
        replaces any earlier one. They are attached to the message when
        the final fragment arrives.

        Returns:
            True if the fragment was applied, False if there was no open
            turn or the conversation was closed
        """
        if not self._alive or self._open is None:
            return False

        message = self._open
        message.text += fragment
        if references:
            self._pending_references = list(references)

        if is_final:
            if self._pending_references:
                message.references = self._pending_references
            self._open = None
            self._pending_references = None

        self._notify(message)
        return True

    def _notify(self, message: ChatMessage) -> None:
        if self._on_update is not None:
            self._on_update(message)

    def fail(self) -> ChatMessage | None:
        """Discard the open AI turn after a stream error.

        Returns:
            The removed message, or None if nothing was open
        """
        if not self._alive or self._open is None:
            return None
        message = self._open
        self._messages.remove(message)
        self._open = None
        self._pending_references = None
        return message

    def history(self) -> list[HistoryTurn]:
        """Completed turns in the format sent back to the model."""
        turns = []
        for message in self._messages:
            if message is self._open or not message.text:
                continue
            role = "user" if message.is_user else "model"
            turns.append(HistoryTurn(role=role, text=message.text))
        return turns

    def clear(self) -> None:
        """Drop all turns, including an open one."""
        self._messages.clear()
        self._open = None
        self._pending_references = None

    def close(self) -> None:
        """Mark the owning view as gone; later callbacks become no-ops."""
        self._alive = False
        self._open = None
        self._pending_references = None
