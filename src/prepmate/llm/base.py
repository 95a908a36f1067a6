from abc import ABC, abstractmethod
from typing import Any

from .models import ChatTurn, LLMResponse, StreamingResponse


class ChatSession(ABC):
    """A model chat session bound to one system instruction.

    The session remembers the turns it was seeded with and keeps the
    provider-side conversation state for follow-up messages.
    """

    @abstractmethod
    async def send_message_stream(self, message: str) -> StreamingResponse:
        """Send a user message and stream the model's reply.

        Args:
            message: The new user message text

        Returns:
            StreamingResponse yielding StreamIncrement objects

        Raises:
            Exception: Provider-specific errors when the request cannot start
        """
        pass


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    This module hides the design decision of which LLM provider to use.
    Implementations must handle provider-specific details like:
    - API client setup and authentication
    - Request/response format conversion
    - Grounding metadata extraction

    Supports async context manager protocol for proper resource cleanup:
        async with provider:
            response = await provider.generate(prompt)
        # Automatically cleaned up
    """

    @property
    @abstractmethod
    def model(self) -> str:
        """Get the default chat model name."""
        pass

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        system_instruction: str | None = None,
        model: str | None = None,
        thinking_budget: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a single non-streaming response.

        Args:
            prompt: The full prompt text
            system_instruction: Optional system instruction
            model: Model to use (None uses provider's default)
            thinking_budget: Reasoning-depth hint in tokens (None disables)
            **kwargs: Provider-specific parameters

        Returns:
            LLMResponse containing generated content and metadata

        Raises:
            Exception: Provider-specific errors during generation
        """
        pass

    @abstractmethod
    async def start_chat(
        self,
        system_instruction: str,
        history: list[ChatTurn],
        web_search: bool = True,
        model: str | None = None,
        **kwargs: Any
    ) -> ChatSession:
        """Create a chat session seeded with prior turns.

        Args:
            system_instruction: Instruction governing the whole session
            history: Prior turns, oldest first
            web_search: Enable the web search grounding capability
            model: Model to use (None uses provider's default)
            **kwargs: Provider-specific parameters

        Returns:
            A ChatSession ready to stream replies

        Raises:
            Exception: Provider-specific errors during session setup
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "LLMProvider":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
