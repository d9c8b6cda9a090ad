"""FastAPI application for the chat proxy endpoint.

Hides the HTTP boundary decisions:
- Permissive CORS headers on every response, preflight included
- Persona injection in front of the caller's conversation
- Mapping of configuration, upstream and unexpected failures to responses

The endpoint is stateless: each request builds, uses and closes its own
provider, and remembers nothing between calls.
"""

import logging
from collections.abc import Callable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from .. import __version__
from ..llm import LLMProvider, UpstreamStatusError, create_llm_provider
from .config import ProxySettings
from .models import ProxyError, ProxyReply, ProxyRequest
from .persona import APP_TITLE, DEFAULT_MODEL, TEMPERATURE, with_persona

logger = logging.getLogger(__name__)

CHAT_PATH = "/chat"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

ProviderFactory = Callable[[ProxySettings], LLMProvider]


def default_provider_factory(settings: ProxySettings) -> LLMProvider:
    """Create the OpenRouter provider for one request."""
    return create_llm_provider(
        "openrouter",
        api_key=settings.openrouter_api_key,
        base_url=settings.openrouter_base_url,
        model=DEFAULT_MODEL,
        app_title=APP_TITLE,
    )


def _json_response(body: BaseModel, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        body.model_dump(exclude_none=True),
        status_code=status_code,
        headers=CORS_HEADERS,
    )


def get_root(request: Request) -> JSONResponse:
    """Service info endpoint."""
    settings: ProxySettings = request.app.state.settings
    return JSONResponse(
        {
            "service": "Encore Chat Proxy",
            "status": "running",
            "default_model": DEFAULT_MODEL,
            "key_set": bool(settings.openrouter_api_key),
        },
        headers=CORS_HEADERS,
    )


def preflight_endpoint() -> PlainTextResponse:
    """Answer CORS preflight immediately."""
    return PlainTextResponse("ok", headers=CORS_HEADERS)


async def chat_endpoint(request: Request) -> JSONResponse:
    """Forward a conversation upstream behind the persona and return one reply."""
    settings: ProxySettings = request.app.state.settings
    provider_factory: ProviderFactory = request.app.state.provider_factory

    if not settings.openrouter_api_key:
        logger.error("OPENROUTER_API_KEY is not set; refusing chat request")
        return _json_response(ProxyError(error="Missing OpenRouter API key"), 500)

    try:
        body = ProxyRequest.model_validate(await request.json())
        referer = request.headers.get("origin") or settings.default_referer
        logger.info(
            "Incoming chat: turns=%s model=%s referer=%s",
            len(body.messages),
            body.resolved_model,
            referer,
        )

        async with provider_factory(settings) as llm:
            response = await llm.chat_completion(
                with_persona(body.messages),
                model=body.resolved_model,
                temperature=TEMPERATURE,
                extra_headers={"HTTP-Referer": referer},
            )

        logger.info(
            "Upstream responded with %s chars: model=%s usage=%s",
            len(response.content),
            response.model,
            response.usage,
        )
        return _json_response(ProxyReply(content=response.content))
    except UpstreamStatusError as e:
        logger.warning("Upstream error %s: %s", e.status_code, e.body[:300])
        return _json_response(
            ProxyError(error="OpenRouter error", details=e.body),
            e.status_code,
        )
    except Exception as e:
        logger.exception("Chat proxying failed: %s", e)
        return _json_response(ProxyError(error="Unexpected error", details=str(e)), 500)


def create_app(
    settings: ProxySettings | None = None,
    provider_factory: ProviderFactory | None = None,
) -> FastAPI:
    """Create the proxy application.

    Args:
        settings: Proxy settings (default: read from the environment)
        provider_factory: Builds the upstream provider for each request

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(title="Encore Chat Proxy", version=__version__)
    app.state.settings = settings or ProxySettings.from_env()
    app.state.provider_factory = provider_factory or default_provider_factory

    app.get("/health")(get_root)
    app.options(CHAT_PATH)(preflight_endpoint)
    app.post(CHAT_PATH)(chat_endpoint)

    return app
