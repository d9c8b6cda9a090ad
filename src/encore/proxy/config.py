"""Server-side configuration for the proxy.

Centralizes how the upstream secret and base URL are resolved from the
environment so the handler never reads os.environ directly.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ..llm.providers import OPENROUTER_BASE_URL


class ProxySettings(BaseModel):
    """Proxy settings loaded from environment variables."""

    openrouter_api_key: str | None = Field(default=None, description="Upstream secret")
    openrouter_base_url: str = Field(default=OPENROUTER_BASE_URL)
    default_referer: str = Field(
        default="https://encore.local",
        description="HTTP-Referer sent upstream when the caller has no Origin"
    )

    @classmethod
    def from_env(cls) -> "ProxySettings":
        """Build settings from the environment (and a .env file if present).

        Environment variables:
            OPENROUTER_API_KEY: OpenRouter API key (required to serve chats)
            OPENROUTER_BASE_URL: Upstream base URL (default: https://openrouter.ai/api/v1)
            ENCORE_DEFAULT_REFERER: Fallback HTTP-Referer (default: https://encore.local)
        """
        load_dotenv()
        return cls(
            openrouter_api_key=os.getenv("OPENROUTER_API_KEY") or None,
            openrouter_base_url=os.getenv("OPENROUTER_BASE_URL", OPENROUTER_BASE_URL),
            default_referer=os.getenv("ENCORE_DEFAULT_REFERER", "https://encore.local"),
        )
