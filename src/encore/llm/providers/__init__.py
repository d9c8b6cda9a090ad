from .openai import OpenAIProvider
from .openrouter import OPENROUTER_BASE_URL, OpenRouterProvider

__all__ = ["OPENROUTER_BASE_URL", "OpenAIProvider", "OpenRouterProvider"]
