"""Client-side configuration and session constants.

Centralizes the proxy address, the publishable token and the fixed
strings and timings the session shows while chatting.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_PROXY_URL = "http://127.0.0.1:8000"
CHAT_PATH = "/chat"

GREETING = (
    "Hi! I'm your starry-eyed study buddy with a Broadway heart. "
    "What should we rehearse today: ideas, plans, or a big dream?"
)

# Shown one at a time while a reply is pending
PENDING_PHRASES = (
    "Warming up the vocal cords...",
    "Finding my light...",
    "Running lines one more time...",
    "Cue the orchestra...",
)
PENDING_PHRASE_INTERVAL = 1.8  # Seconds between pending phrase changes

FAILURE_TITLE = "Couldn't reach the star"
FAILURE_DESCRIPTION = (
    "I couldn't connect to the chat service. "
    "Make sure the OpenRouter API key is set and try again."
)


class ClientSettings(BaseModel):
    """Client settings loaded from environment variables."""

    proxy_url: str = Field(default=DEFAULT_PROXY_URL, description="Proxy base address")
    anon_key: str = Field(default="", description="Publishable token sent as Bearer")

    @property
    def chat_url(self) -> str:
        """Full URL of the chat endpoint."""
        return f"{self.proxy_url.rstrip('/')}{CHAT_PATH}"

    @classmethod
    def from_env(cls, proxy_url: str | None = None) -> "ClientSettings":
        """Build settings from the environment (and a .env file if present).

        Args:
            proxy_url: Overrides ENCORE_PROXY_URL when given

        Environment variables:
            ENCORE_PROXY_URL: Proxy base address (default: http://127.0.0.1:8000)
            ENCORE_ANON_KEY: Publishable access token (default: empty)
        """
        load_dotenv()
        return cls(
            proxy_url=proxy_url or os.getenv("ENCORE_PROXY_URL", DEFAULT_PROXY_URL),
            anon_key=os.getenv("ENCORE_ANON_KEY", ""),
        )
