"""
Encore: a theatrical chat client backed by a stateless LLM proxy.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .llm import ChatMessage, LLMProvider, create_llm_provider
from .session import ChatSession, Message, ProxyClient

__all__ = [
    "ChatMessage",
    "ChatSession",
    "LLMProvider",
    "Message",
    "ProxyClient",
    "create_llm_provider",
]
