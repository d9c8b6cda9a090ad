from .base import LLMProvider, UpstreamStatusError
from .factory import create_llm_provider
from .models import ChatMessage, LLMResponse
from .providers import OpenAIProvider, OpenRouterProvider

__all__ = [
    "LLMProvider",
    "UpstreamStatusError",
    "create_llm_provider",
    "ChatMessage",
    "LLMResponse",
    "OpenAIProvider",
    "OpenRouterProvider",
]
