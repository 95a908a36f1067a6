"""Google Gemini LLM provider implementation.

Uses the official Google GenAI SDK for async generation and chat streaming.
Reference: https://github.com/googleapis/python-genai

Web search grounding is provided by the Google Search tool; citations come
back on each streamed chunk as grounding metadata.
"""

from collections.abc import AsyncIterator
from typing import Any

from google import genai
from google.genai import types

from ..base import ChatSession, LLMProvider
from ..models import (
    DEFAULT_SOURCE_TITLE,
    ChatTurn,
    LLMResponse,
    Source,
    StreamIncrement,
    StreamingResponse,
)


def to_contents(history: list[ChatTurn]) -> list[types.Content]:
    """Convert wire turns to Gemini Content objects."""
    return [
        types.Content(role=turn.role, parts=[types.Part(text=turn.text)])
        for turn in history
    ]


def extract_text(response: types.GenerateContentResponse) -> str:
    """Extract text from a Gemini response or chunk, skipping thought parts.

    Args:
        response: Gemini GenerateContentResponse

    Returns:
        Text content or empty string
    """
    if response.candidates:
        candidate = response.candidates[0]
        if candidate.content and candidate.content.parts:
            texts = [
                part.text for part in candidate.content.parts
                if part.text and not part.thought
            ]
            return "".join(texts)
    return ""


def extract_citations(response: types.GenerateContentResponse) -> tuple[Source, ...]:
    """Extract web grounding citations from a response chunk.

    Chunks without a web URI are skipped; a missing title falls back
    to "Web Source".
    """
    if not response.candidates:
        return ()
    metadata = response.candidates[0].grounding_metadata
    if metadata is None or not metadata.grounding_chunks:
        return ()

    citations = []
    for chunk in metadata.grounding_chunks:
        if chunk.web is not None and chunk.web.uri:
            citations.append(Source(uri=chunk.web.uri, title=chunk.web.title or DEFAULT_SOURCE_TITLE))
    return tuple(citations)


def extract_usage(response: types.GenerateContentResponse) -> dict[str, int] | None:
    if not response.usage_metadata:
        return None
    return {
        "prompt_tokens": response.usage_metadata.prompt_token_count or 0,
        "completion_tokens": response.usage_metadata.candidates_token_count or 0,
        "total_tokens": response.usage_metadata.total_token_count or 0,
    }


class GeminiChatSession(ChatSession):
    """Chat session backed by a google-genai AsyncChat.

    The SDK chat records each completed exchange in its own history,
    so follow-up messages see the whole conversation.
    """

    def __init__(self, chat: Any):
        self._chat = chat

    async def send_message_stream(self, message: str) -> StreamingResponse:
        stream = await self._chat.send_message_stream(message)
        response = StreamingResponse(self._stream_generator(stream))
        self._current_stream_response = response
        return response

    async def _stream_generator(self, stream: AsyncIterator[Any]) -> AsyncIterator[StreamIncrement]:
        """Internal generator that converts chunks and captures usage."""
        usage = None
        async for chunk in stream:
            usage = extract_usage(chunk) or usage
            text = extract_text(chunk)
            yield StreamIncrement(text=text or None, citations=extract_citations(chunk))

        if usage:
            self._current_stream_response.set_usage(usage)


class GeminiProvider(LLMProvider):
    """Google Gemini LLM provider implementation.

    Hidden design decisions:
    - Google GenAI client initialization
    - History format conversion
    - Thinking budget and Google Search tool configuration
    - Grounding metadata extraction
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        **client_kwargs: Any
    ):
        """Initialize Gemini provider.

        Args:
            api_key: Google AI API key
            model: Default chat model (gemini-2.5-flash, gemini-2.5-pro, ...)
            **client_kwargs: Additional kwargs for Client
        """
        self._model = model
        self._client = genai.Client(api_key=api_key, **client_kwargs)

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    async def generate(
        self,
        prompt: str,
        system_instruction: str | None = None,
        model: str | None = None,
        thinking_budget: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a one-shot response with Google Gemini.

        Args:
            prompt: The full prompt text
            system_instruction: Optional system instruction
            model: Model to use (overrides default)
            thinking_budget: Thinking token budget for deeper reasoning
            **kwargs: Additional GenerateContentConfig fields

        Returns:
            LLMResponse with generated content
        """
        model_to_use = model or self._model
        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            **kwargs
        )
        if thinking_budget is not None:
            config.thinking_config = types.ThinkingConfig(thinking_budget=thinking_budget)

        response = await self._client.aio.models.generate_content(
            model=model_to_use,
            contents=prompt,
            config=config
        )

        return LLMResponse(
            content=extract_text(response),
            model=model_to_use,
            usage=extract_usage(response)
        )

    async def start_chat(
        self,
        system_instruction: str,
        history: list[ChatTurn],
        web_search: bool = True,
        model: str | None = None,
        **kwargs: Any
    ) -> GeminiChatSession:
        """Create a Gemini chat seeded with prior turns.

        Args:
            system_instruction: Instruction for the whole session
            history: Prior turns, oldest first
            web_search: Attach the Google Search grounding tool
            model: Model to use (overrides default)
            **kwargs: Additional GenerateContentConfig fields

        Returns:
            GeminiChatSession wrapping the SDK chat
        """
        tools = [types.Tool(google_search=types.GoogleSearch())] if web_search else None
        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            tools=tools,
            **kwargs
        )
        chat = self._client.aio.chats.create(
            model=model or self._model,
            config=config,
            history=to_contents(history)
        )
        return GeminiChatSession(chat)

    async def close(self) -> None:
        """Close the Gemini client.

        Note: The Google GenAI client doesn't require explicit closing,
        but we implement this for interface consistency.
        """
        pass
