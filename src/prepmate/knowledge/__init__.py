"""Knowledge base module for prepmate.

Holds the user's study notes for the current session.
"""

from .models import KnowledgeSnippet
from .store import KnowledgeStore, create_snippet

__all__ = [
    "KnowledgeSnippet",
    "KnowledgeStore",
    "create_snippet",
]
