"""Factory functions for CLI.

Centralizes creation of the proxy application and the client transport from
environment variables. Hides configuration details from command
implementations.
"""

from rich.console import Console

from ..proxy import ProxySettings, create_app
from ..session import ClientSettings, ProxyClient

# Default console for output
_console = Console()


def get_proxy_app(console: Console | None = None):
    """Create the proxy application from environment variables.

    A missing OPENROUTER_API_KEY is not fatal here: the endpoint still starts
    and answers every chat request with a 500 naming the missing key.

    Args:
        console: Optional Rich console for output

    Returns:
        FastAPI application

    Environment variables:
        OPENROUTER_API_KEY: OpenRouter API key
        OPENROUTER_BASE_URL: Upstream base URL (default: https://openrouter.ai/api/v1)
    """
    con = console or _console
    settings = ProxySettings.from_env()
    if not settings.openrouter_api_key:
        con.print("[yellow]Warning: OPENROUTER_API_KEY not set, chat requests will fail[/yellow]")
    return create_app(settings)


def get_transport(proxy_url: str | None = None) -> ProxyClient:
    """Create the proxy client from environment variables.

    Args:
        proxy_url: Overrides ENCORE_PROXY_URL when given

    Environment variables:
        ENCORE_PROXY_URL: Proxy base address (default: http://127.0.0.1:8000)
        ENCORE_ANON_KEY: Publishable access token
    """
    return ProxyClient(ClientSettings.from_env(proxy_url))
