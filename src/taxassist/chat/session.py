"""Chat session wiring a conversation to the assistant service.

Hides how a submitted prompt becomes a user turn, an open AI turn and a
streaming request, and how a failed stream is unwound.
"""

from collections.abc import Callable

from ..llm.errors import ConfigurationError
from ..llm.service import AssistantService
from .conversation import Conversation, TurnInProgressError
from .models import ChatMessage

ErrorHandler = Callable[[str], None]


class ChatSession:
    """Runs chat turns for one view.

    Only one AI turn may stream at a time; submit() refuses a new prompt
    while one is open.
    """

    def __init__(
        self,
        service: AssistantService,
        conversation: Conversation | None = None,
        use_default_instruction: bool = True,
        custom_instruction: str | None = None,
        use_search_grounding: bool = False,
        on_error: ErrorHandler | None = None,
    ) -> None:
        self._service = service
        self.conversation = conversation or Conversation()
        self._use_default_instruction = use_default_instruction
        self._custom_instruction = custom_instruction
        self.use_search_grounding = use_search_grounding
        self._on_error = on_error
        self.last_error: str | None = None

    @property
    def available(self) -> bool:
        return self._service.available

    @property
    def busy(self) -> bool:
        return self.conversation.is_streaming

    async def submit(self, prompt: str) -> ChatMessage | None:
        """Send a prompt and stream the answer into the conversation.

        Returns:
            The AI message if the turn completed, None if the prompt was
            blank or the stream failed (the error is in last_error)

        Raises:
            ConfigurationError: No credential configured
            TurnInProgressError: A previous answer is still streaming
        """
        text = prompt.strip()
        if not text:
            return None
        if not self._service.available:
            raise ConfigurationError()
        if self.conversation.is_streaming:
            raise TurnInProgressError()

        prior_turns = self.conversation.history()
        self.conversation.add_user_turn(text)
        message = self.conversation.begin_ai_turn()
        self.last_error = None

        await self._service.request_stream(
            text,
            prior_turns,
            self.conversation.consume,
            self._handle_error,
            use_default_instruction=self._use_default_instruction,
            use_search_grounding=self.use_search_grounding,
            custom_instruction=self._custom_instruction,
        )

        if self.last_error is not None:
            return None
        return message

    def _handle_error(self, message: str) -> None:
        if not self.conversation.is_alive:
            return
        self.conversation.fail()
        self.last_error = message
        if self._on_error is not None:
            self._on_error(message)

    def close(self) -> None:
        """Detach from the view; late stream callbacks are ignored."""
        self.conversation.close()
