"""Chat conversations and the stream consumer.

- models.py: ChatMessage and Sender
- conversation.py: Turn buffer that folds streamed fragments
- session.py: Wiring between a conversation and the assistant service
"""

from .conversation import Conversation, TurnInProgressError
from .models import ChatMessage, Sender
from .session import ChatSession

__all__ = [
    "ChatMessage",
    "ChatSession",
    "Conversation",
    "Sender",
    "TurnInProgressError",
]
