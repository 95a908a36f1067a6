from .base import ChatSession, LLMProvider
from .factory import create_llm_provider
from .models import ChatTurn, LLMResponse, Source, StreamIncrement, StreamingResponse
from .providers import GeminiProvider

__all__ = [
    "ChatSession",
    "ChatTurn",
    "GeminiProvider",
    "LLMProvider",
    "LLMResponse",
    "Source",
    "StreamIncrement",
    "StreamingResponse",
    "create_llm_provider",
]
