"""
PrepMate: an interview preparation assistant.

Keeps study notes in a session knowledge base, turns them into a study
plan for a target job, and runs mock interviews grounded in the notes and
live web search.

Each module hides a specific design decision:
- knowledge: how notes are stored
- planner: how study plans are prompted and generated
- chat: how conversations are streamed and aggregated
- llm: which model provider is used and how
"""

__version__ = "0.1.0"

from .chat import ChatMessage, InterviewConversation, MessageState, StreamAggregator
from .controller import AgentMode, PrepController
from .knowledge import KnowledgeSnippet, KnowledgeStore, create_snippet
from .planner import StudyPlan, StudyPlanGenerator

__all__ = [
    "AgentMode",
    "ChatMessage",
    "InterviewConversation",
    "KnowledgeSnippet",
    "KnowledgeStore",
    "MessageState",
    "PrepController",
    "StreamAggregator",
    "StudyPlan",
    "StudyPlanGenerator",
    "create_snippet",
]
