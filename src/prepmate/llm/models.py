from collections.abc import AsyncIterator
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SOURCE_TITLE = "Web Source"


class Source(BaseModel):
    """A grounding citation backing part of a model response."""

    model_config = ConfigDict(frozen=True)

    uri: str = Field(description="Source URI")
    title: str = Field(default=DEFAULT_SOURCE_TITLE, description="Human-readable title")


class StreamIncrement(BaseModel):
    """One increment of a streamed chat response.

    Either field may be empty: a chunk can carry only text, only
    citations, both, or neither.
    """

    model_config = ConfigDict(frozen=True)

    text: str | None = Field(default=None, description="Incremental text fragment")
    citations: tuple[Source, ...] = Field(default=(), description="Grounding citations in this chunk")


class ChatTurn(BaseModel):
    """Wire representation of a prior conversation turn."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "model"] = Field(description="Who produced the turn")
    text: str = Field(description="Turn text")


class LLMResponse(BaseModel):
    """Response from a one-shot generation request."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Generated text content")
    model: str = Field(description="Model that generated the response")
    usage: dict[str, int] | None = Field(
        default=None,
        description="Token usage information"
    )


class StreamingResponse:
    """Wrapper for streaming chat responses that captures usage info.

    Acts as an async iterator of StreamIncrement objects while storing token
    usage that becomes available at the end of the stream. Iterating it a
    second time yields nothing; the stream cannot be restarted.

    Usage:
        stream = await session.send_message_stream("Tell me about CAP")
        async for increment in stream:
            print(increment.text or "", end="")
        print(stream.usage)
    """

    def __init__(self, async_iter: AsyncIterator[StreamIncrement]):
        """Initialize with an async iterator of increments.

        Args:
            async_iter: Async iterator yielding StreamIncrement objects
        """
        self._iter = async_iter
        self._usage: dict[str, Any] | None = None

    @property
    def usage(self) -> dict[str, Any] | None:
        """Get token usage info (available after iteration completes)."""
        return self._usage

    def set_usage(self, usage: dict[str, Any]) -> None:
        """Set token usage info (called by provider at end of stream)."""
        self._usage = usage

    def __aiter__(self) -> "StreamingResponse":
        return self

    async def __anext__(self) -> StreamIncrement:
        return await self._iter.__anext__()
