"""Data models for the chat session.

Hides the internal representation of conversation messages.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

Role = Literal["user", "assistant"]


@dataclass(frozen=True)
class Message:
    """A chat message in the conversation."""

    role: Role
    content: str
    timestamp: datetime = field(default_factory=datetime.now, compare=False)

    def to_wire(self) -> dict[str, str]:
        """Role/content pair as sent to the proxy."""
        return {"role": self.role, "content": self.content}
