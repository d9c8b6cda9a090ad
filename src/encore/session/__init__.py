"""Client-side chat session.

Module structure:
- models.py: Message representation
- config.py: Proxy address, publishable key and fixed session strings
- client.py: Transport to the proxy endpoint
- controller.py: Conversation and busy-state management
"""

from .client import ChatTransport, ProxyClient, ProxyClientError
from .config import (
    FAILURE_DESCRIPTION,
    FAILURE_TITLE,
    GREETING,
    PENDING_PHRASE_INTERVAL,
    PENDING_PHRASES,
    ClientSettings,
)
from .controller import ChatSession
from .models import Message

__all__ = [
    "FAILURE_DESCRIPTION",
    "FAILURE_TITLE",
    "GREETING",
    "PENDING_PHRASE_INTERVAL",
    "PENDING_PHRASES",
    "ChatSession",
    "ChatTransport",
    "ClientSettings",
    "Message",
    "ProxyClient",
    "ProxyClientError",
]
