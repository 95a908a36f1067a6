"""Interview chat module for prepmate.

Module structure (each module hides a design decision):
- models.py: Message representation and lifecycle states
- context.py: System instruction and wire history assembly
- aggregator.py: Folding streamed increments into a message
- session.py: Conversation orchestration and error policy
"""

from .aggregator import StreamAggregator, merge_sources
from .context import DEFAULT_CONTEXT_ROLE, build_chat_instruction, format_chat_notes, to_history
from .models import ChatMessage, MessageState
from .session import ERROR_NOTICE, InterviewConversation, welcome_text

__all__ = [
    "DEFAULT_CONTEXT_ROLE",
    "ERROR_NOTICE",
    "ChatMessage",
    "InterviewConversation",
    "MessageState",
    "StreamAggregator",
    "build_chat_instruction",
    "format_chat_notes",
    "merge_sources",
    "to_history",
    "welcome_text",
]
