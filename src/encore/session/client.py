"""Transport between the chat session and the proxy endpoint.

Hides how a conversation travels to the proxy and how its reply is read.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

import httpx

from .config import ClientSettings
from .models import Message


class ProxyClientError(Exception):
    """Raised when the proxy answers with a failure or an unreadable body."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Proxy returned {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class ChatTransport(ABC):
    """Sends a whole conversation and returns the single reply text."""

    @abstractmethod
    async def send(self, messages: Sequence[Message]) -> str:
        """Send the conversation, oldest first.

        Returns:
            Reply text ("" if the proxy sent none)

        Raises:
            Exception: Any transport, status or decoding failure
        """
        pass

    async def close(self) -> None:
        """Close any open connections or resources."""


class ProxyClient(ChatTransport):
    """HTTP transport to the Encore proxy.

    Hidden design decisions:
    - Endpoint URL and bearer authentication with the publishable key
    - Request body shape ({messages: [{role, content}]})
    - What counts as a malformed reply
    """

    def __init__(
        self,
        settings: ClientSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._http = http_client or httpx.AsyncClient()

    @property
    def url(self) -> str:
        return self._settings.chat_url

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._settings.anon_key:
            headers["Authorization"] = f"Bearer {self._settings.anon_key}"
        return headers

    async def send(self, messages: Sequence[Message]) -> str:
        payload = {"messages": [m.to_wire() for m in messages]}
        response = await self._http.post(self.url, json=payload, headers=self._headers())

        if not response.is_success:
            raise ProxyClientError(response.status_code, response.text)

        data: Any = response.json()
        if not isinstance(data, dict):
            raise ProxyClientError(response.status_code, "Malformed reply: expected a JSON object")

        content = data.get("content")
        return "" if content is None else str(content)

    async def close(self) -> None:
        await self._http.aclose()
