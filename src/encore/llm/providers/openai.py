from typing import Any

from openai import APIStatusError, AsyncOpenAI
from openai.types.chat import ChatCompletion

from ..base import LLMProvider, UpstreamStatusError
from ..models import ChatMessage, LLMResponse


def _first_choice_content(completion: Any) -> str:
    """Extract the first choice's text, or "" when the completion has none.

    Upstreams that answer 200 without ``choices`` still decode; the SDK leaves
    the missing fields unset, so every step is read defensively.
    """
    choices = getattr(completion, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None) or ""


class OpenAIProvider(LLMProvider):
    """OpenAI-compatible LLM provider implementation.

    Hidden design decisions:
    - OpenAI API client initialization
    - Message format conversion
    - Error translation (SDK status errors become UpstreamStatusError)
    - Authentication mechanism

    SDK-level retries are disabled; every chat_completion is exactly one
    upstream request.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        base_url: str | None = None,
        organization: str | None = None,
        **client_kwargs: Any
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Default model to use
            base_url: Optional custom API base URL
            organization: Optional organization ID
            **client_kwargs: Additional kwargs for AsyncOpenAI client
                (e.g. ``http_client``, ``default_headers``)
        """
        client_kwargs.setdefault("max_retries", 0)
        self._model = model
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            organization=organization,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        """Get the default model name."""
        return self._model

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        **kwargs: Any
    ) -> LLMResponse:
        """Generate a chat completion.

        Args:
            messages: Conversation history
            model: Model to use (None uses the default)
            temperature: Sampling temperature
            **kwargs: Additional request parameters (e.g. ``extra_headers``)

        Returns:
            LLMResponse with generated content ("" if the upstream sent none)

        Raises:
            UpstreamStatusError: If the upstream answered with a non-2xx status
            ValueError: If a 2xx reply was not a JSON completion object
        """
        model_to_use = model if model is not None else self._model

        request_params: dict[str, Any] = {
            "model": model_to_use,
            "messages": [msg.to_wire() for msg in messages],
            "temperature": temperature,
            **kwargs
        }

        try:
            completion = await self._client.chat.completions.create(**request_params)
        except APIStatusError as e:
            raise UpstreamStatusError(e.status_code, e.response.text) from e

        # Non-JSON bodies (gateway pages and the like) come back as raw text
        if not isinstance(completion, ChatCompletion):
            raise ValueError(f"Malformed upstream reply: {str(completion)[:200]!r}")

        usage = None
        completion_usage = getattr(completion, "usage", None)
        if completion_usage:
            usage = {
                "prompt_tokens": getattr(completion_usage, "prompt_tokens", 0) or 0,
                "completion_tokens": getattr(completion_usage, "completion_tokens", 0) or 0,
                "total_tokens": getattr(completion_usage, "total_tokens", 0) or 0
            }

        return LLMResponse(
            content=_first_choice_content(completion),
            model=getattr(completion, "model", None) or model_to_use,
            usage=usage
        )

    async def close(self) -> None:
        """Close the OpenAI client.

        Note: Uses the OpenAI SDK's async context manager for proper cleanup.
        See: https://github.com/openai/openai-python#async-usage
        """
        await self._client.close()
