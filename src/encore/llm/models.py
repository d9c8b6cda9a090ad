from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """Represents a chat message in a conversation.

    Fields the caller did not send stay unset and are not forwarded, and
    unknown keys are kept, so a message reaches the provider as it was given.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    role: str | None = Field(
        default=None,
        description="Role of the message sender: 'user', 'assistant', or 'system'"
    )
    content: str | list[Any] | None = Field(default=None, description="Content of the message")

    def to_wire(self) -> dict[str, Any]:
        """Request payload for this message, limited to the keys that were set."""
        return self.model_dump(exclude_unset=True)


class LLMResponse(BaseModel):
    """Response from an LLM provider."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Generated text content")
    model: str = Field(description="Model that generated the response")
    usage: dict[str, int] | None = Field(
        default=None,
        description="Token usage information"
    )
