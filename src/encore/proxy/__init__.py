"""Stateless chat proxy.

Module structure:
- persona.py: Fixed persona text, default model and temperature
- models.py: Request/reply wire models
- config.py: Server-side settings (upstream secret)
- app.py: FastAPI application and the chat endpoint
"""

from .app import CHAT_PATH, CORS_HEADERS, create_app
from .config import ProxySettings
from .models import ProxyError, ProxyReply, ProxyRequest
from .persona import DEFAULT_MODEL, PERSONA_MESSAGE, PERSONA_PROMPT, TEMPERATURE

__all__ = [
    "CHAT_PATH",
    "CORS_HEADERS",
    "DEFAULT_MODEL",
    "PERSONA_MESSAGE",
    "PERSONA_PROMPT",
    "ProxyError",
    "ProxyReply",
    "ProxyRequest",
    "ProxySettings",
    "TEMPERATURE",
    "create_app",
]
