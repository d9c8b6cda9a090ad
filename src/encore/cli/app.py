"""Main CLI application using Typer."""
import asyncio
import logging

import typer
import uvicorn
from dotenv import load_dotenv
from rich.console import Console

from .providers import get_proxy_app, get_transport

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="encore",
    help="Theatrical chat client and its stateless OpenRouter proxy",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()


@app.command()
def serve(
    host: str = typer.Option(
        "127.0.0.1",
        "--host",
        "-h",
        help="Interface to bind"
    ),
    port: int = typer.Option(
        8000,
        "--port",
        "-p",
        help="Port to listen on"
    ),
    log_level: str = typer.Option(
        "info",
        "--log-level",
        "-l",
        help="Server log level: debug, info, warning, or error"
    ),
):
    """Run the chat proxy endpoint."""
    logging.basicConfig(
        level=log_level.upper(),
        format="[%(asctime)s] %(levelname)s %(name)s - %(message)s",
    )

    proxy_app = get_proxy_app(console)
    console.print(f"[bold cyan]Encore proxy[/bold cyan] listening on http://{host}:{port}")
    uvicorn.run(proxy_app, host=host, port=port, log_level=log_level.lower())


@app.command()
def chat(
    proxy_url: str | None = typer.Option(
        None,
        "--proxy-url",
        "-u",
        help="Proxy base address (default: ENCORE_PROXY_URL or http://127.0.0.1:8000)"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Show log panel with level: debug (all), info, warning, or error"
    ),
):
    """Launch the interactive chat TUI."""
    async def _chat():
        from ..ui import run_textual_tui

        transport = get_transport(proxy_url)
        await run_textual_tui(transport, log_level=log_level)
        console.print("\n[dim]Curtain call. Goodbye![/dim]")

    try:
        asyncio.run(_chat())
    except KeyboardInterrupt:
        pass


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
