"""Data models for the knowledge base."""

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class KnowledgeSnippet(BaseModel):
    """A single study note supplied by the user.

    Snippets are immutable once created; the only way to change the
    knowledge base is to add or remove whole snippets.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex, description="Opaque unique token")
    title: str = Field(min_length=1, description="Short label for the note")
    content: str = Field(min_length=1, description="Free-text body of the note")
    date_added: datetime = Field(default_factory=datetime.now)
