"""Pytest configuration and shared fixtures."""
import asyncio
import json
from collections.abc import Callable, Sequence

import httpx
import pytest
from fastapi.testclient import TestClient

from encore.llm import OpenRouterProvider
from encore.proxy import ProxySettings, create_app
from encore.session import ChatTransport, Message


def completion_body(content: str | None = "Hi there!") -> dict:
    """Minimal OpenAI-style chat completion payload."""
    return {
        "id": "gen-123",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "anthropic/claude-3.5-sonnet",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
            }
        ],
        "usage": {"prompt_tokens": 12, "completion_tokens": 4, "total_tokens": 16},
    }


class FakeUpstream:
    """Records upstream requests and answers them with a swappable responder."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=completion_body())
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


class FakeTransport(ChatTransport):
    """Scripted proxy transport for session tests.

    Each reply is either a string or an exception instance to raise.
    When ``gate`` is set, send() waits on it before answering.
    """

    def __init__(self, *replies: str | Exception) -> None:
        self.replies = list(replies) or ["Bravo!"]
        self.sent: list[tuple[Message, ...]] = []
        self.gate: asyncio.Event | None = None
        self.closed = False

    async def send(self, messages: Sequence[Message]) -> str:
        self.sent.append(tuple(messages))
        if self.gate is not None:
            await self.gate.wait()
        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        return reply

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def upstream():
    """Fake OpenRouter upstream."""
    return FakeUpstream()


@pytest.fixture
def proxy_settings():
    """Proxy settings with a test secret and a fake upstream base URL."""
    return ProxySettings(
        openrouter_api_key="sk-or-test",
        openrouter_base_url="https://upstream.test/api/v1",
    )


@pytest.fixture
def provider_factory(upstream):
    """Provider factory that routes the real OpenAI SDK to the fake upstream."""
    def _factory(settings: ProxySettings) -> OpenRouterProvider:
        return OpenRouterProvider(
            api_key=settings.openrouter_api_key,
            base_url=settings.openrouter_base_url,
            app_title="Encore Chatbot",
            http_client=httpx.AsyncClient(transport=upstream.transport()),
        )
    return _factory


@pytest.fixture
def proxy_app(proxy_settings, provider_factory):
    """Proxy application wired to the fake upstream."""
    return create_app(proxy_settings, provider_factory=provider_factory)


@pytest.fixture
def proxy_client(proxy_app):
    """Synchronous test client for the proxy."""
    with TestClient(proxy_app) as client:
        yield client
