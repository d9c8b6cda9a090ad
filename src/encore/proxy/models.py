"""Wire models for the proxy endpoint."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..llm import ChatMessage
from .persona import DEFAULT_MODEL


class ProxyRequest(BaseModel):
    """Inbound body: the conversation to forward and an optional model id."""

    messages: list[ChatMessage] = Field(
        default_factory=list,
        description="Ordered conversation, oldest first; roles are forwarded as-is"
    )
    model: str | None = Field(default=None, description="Upstream model identifier")

    @field_validator("messages", mode="before")
    @classmethod
    def _null_messages(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def resolved_model(self) -> str:
        """The requested model, or the fixed default when none was sent."""
        return self.model if self.model is not None else DEFAULT_MODEL


class ProxyReply(BaseModel):
    """Successful reply body."""

    content: str = Field(description="First completion's text, or empty string")


class ProxyError(BaseModel):
    """Failure body."""

    error: str = Field(description="Short error category")
    details: str | None = Field(default=None, description="Upstream body or exception text")
