"""Data models for chat conversations.

Hides the internal representation of chat turns.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import uuid4

from ..llm.models import Reference


class Sender(str, Enum):
    """Author of a turn."""

    USER = "user"
    AI = "ai"


@dataclass
class ChatMessage:
    """One turn of a conversation.

    Only the text of an AI turn changes after creation, and only by
    appending fragments while the turn is open.
    """

    sender: Sender
    text: str = ""
    id: str = field(default_factory=lambda: uuid4().hex)
    timestamp: datetime = field(default_factory=datetime.now)
    references: list[Reference] | None = None

    @property
    def is_user(self) -> bool:
        return self.sender is Sender.USER
