"""Pytest configuration and shared fixtures."""
from collections.abc import AsyncIterator
from typing import Any

import pytest

from prepmate.knowledge import KnowledgeSnippet
from prepmate.llm import (
    ChatSession,
    ChatTurn,
    LLMProvider,
    LLMResponse,
    Source,
    StreamIncrement,
    StreamingResponse,
)


class FakeChatSession(ChatSession):
    """Chat session that replays scripted increments.

    If ``fail_after`` is set, the stream raises after yielding that many
    increments (0 means it fails before the first one).
    """

    def __init__(
        self,
        increments: list[StreamIncrement],
        fail_after: int | None = None,
        usage: dict[str, int] | None = None,
    ):
        self.increments = increments
        self.fail_after = fail_after
        self.usage = usage
        self.sent: list[str] = []

    async def send_message_stream(self, message: str) -> StreamingResponse:
        self.sent.append(message)
        response = StreamingResponse(self._generate())
        self._response = response
        return response

    async def _generate(self) -> AsyncIterator[StreamIncrement]:
        for index, increment in enumerate(self.increments):
            if self.fail_after is not None and index >= self.fail_after:
                raise ConnectionError("stream dropped")
            yield increment
        if self.fail_after is not None and self.fail_after >= len(self.increments):
            raise ConnectionError("stream dropped")
        if self.usage:
            self._response.set_usage(self.usage)


class FakeLLMProvider(LLMProvider):
    """In-memory provider recording every call it receives."""

    def __init__(
        self,
        plan_text: str = "# Plan",
        increments: list[StreamIncrement] | None = None,
        fail_after: int | None = None,
        generate_error: Exception | None = None,
        start_chat_error: Exception | None = None,
        usage: dict[str, int] | None = None,
    ):
        self.plan_text = plan_text
        self.increments = increments or []
        self.fail_after = fail_after
        self.generate_error = generate_error
        self.start_chat_error = start_chat_error
        self.usage = usage
        self.generate_calls: list[dict[str, Any]] = []
        self.chat_calls: list[dict[str, Any]] = []
        self.sessions: list[FakeChatSession] = []
        self.closed = False

    @property
    def model(self) -> str:
        return "fake-model"

    async def generate(
        self,
        prompt: str,
        system_instruction: str | None = None,
        model: str | None = None,
        thinking_budget: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        self.generate_calls.append({
            "prompt": prompt,
            "system_instruction": system_instruction,
            "model": model,
            "thinking_budget": thinking_budget,
        })
        if self.generate_error is not None:
            raise self.generate_error
        return LLMResponse(content=self.plan_text, model=model or self.model, usage=self.usage)

    async def start_chat(
        self,
        system_instruction: str,
        history: list[ChatTurn],
        web_search: bool = True,
        model: str | None = None,
        **kwargs: Any
    ) -> FakeChatSession:
        self.chat_calls.append({
            "system_instruction": system_instruction,
            "history": list(history),
            "web_search": web_search,
            "model": model,
        })
        if self.start_chat_error is not None:
            raise self.start_chat_error
        session = FakeChatSession(self.increments, self.fail_after, self.usage)
        self.sessions.append(session)
        return session

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_llm():
    """Return a fake provider with a simple three-chunk reply."""
    return FakeLLMProvider(increments=[
        StreamIncrement(text="Hel"),
        StreamIncrement(text="lo", citations=(Source(uri="a.com", title="A"),)),
        StreamIncrement(citations=(Source(uri="a.com", title="A2"),)),
    ])


@pytest.fixture
def notes_snippet():
    """Return the single-note knowledge base used across planner tests."""
    return KnowledgeSnippet(title="Notes", content="X")


@pytest.fixture
def sample_knowledge_base():
    """Return a small knowledge base, newest first."""
    return [
        KnowledgeSnippet(title="System Design", content="Consistent hashing spreads keys across nodes."),
        KnowledgeSnippet(title="Python", content="The GIL serializes bytecode execution."),
    ]


@pytest.fixture
def make_llm():
    """Return a factory for fake providers with custom behaviour."""
    def _make(**kwargs: Any) -> FakeLLMProvider:
        return FakeLLMProvider(**kwargs)
    return _make
