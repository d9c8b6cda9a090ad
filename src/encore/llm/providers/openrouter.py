from typing import Any

from .openai import OpenAIProvider

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


class OpenRouterProvider(OpenAIProvider):
    """OpenRouter LLM provider implementation using the OpenAI-compatible API.

    Hidden design decisions:
    - OpenRouter base URL and model naming ("vendor/model")
    - Attribution headers (HTTP-Referer, X-Title) sent with every request
    """

    def __init__(
        self,
        api_key: str,
        model: str = "anthropic/claude-3.5-sonnet",
        base_url: str = OPENROUTER_BASE_URL,
        app_title: str | None = None,
        **client_kwargs: Any
    ):
        """Initialize OpenRouter provider.

        Args:
            api_key: OpenRouter API key
            model: Default model to use
            base_url: OpenRouter API base URL
            app_title: Optional X-Title attribution header
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        if app_title:
            headers = dict(client_kwargs.pop("default_headers", None) or {})
            headers.setdefault("X-Title", app_title)
            client_kwargs["default_headers"] = headers
        super().__init__(api_key=api_key, model=model, base_url=base_url, **client_kwargs)
