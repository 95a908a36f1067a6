"""Data models for interview conversations.

Hides the in-memory representation of chat messages and their
streaming lifecycle.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Literal
from uuid import uuid4

from ..llm import ChatTurn, Source


class MessageState(str, Enum):
    """Lifecycle of a chat message."""

    PENDING = "pending"  # created, no text yet
    STREAMING = "streaming"  # first text fragment received
    COMPLETE = "complete"
    FAILED = "failed"  # stream raised; partial text kept


@dataclass
class ChatMessage:
    """A chat message in the conversation.

    Model messages are created empty and mutated in place while their
    stream is consumed. User messages are complete on creation.
    """

    role: Literal["user", "model"]
    text: str = ""
    id: str = field(default_factory=lambda: uuid4().hex)
    sources: list[Source] | None = None
    is_thinking: bool = False
    state: MessageState = MessageState.COMPLETE
    timestamp: datetime = field(default_factory=datetime.now)

    def snapshot(self) -> "ChatMessage":
        """Copy of the current state, safe to hand to the rendering layer."""
        return replace(self, sources=list(self.sources) if self.sources else None)

    def to_turn(self) -> ChatTurn:
        """Reduce to the wire representation (role and text only)."""
        return ChatTurn(role=self.role, text=self.text)
