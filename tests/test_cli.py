"""Tests for the CLI wiring."""
from fastapi import FastAPI
from rich.console import Console
from typer.testing import CliRunner

from encore.cli import app
from encore.cli.providers import get_proxy_app, get_transport
from encore.session import ProxyClient

runner = CliRunner()


def test_help_lists_commands():
    """Test that both commands are registered."""
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "serve" in result.stdout
    assert "chat" in result.stdout


def test_proxy_app_starts_without_key(monkeypatch):
    """Test that a missing key warns but still builds the app."""
    monkeypatch.setenv("OPENROUTER_API_KEY", "")
    console = Console(record=True, width=120)

    proxy_app = get_proxy_app(console)

    assert isinstance(proxy_app, FastAPI)
    assert proxy_app.state.settings.openrouter_api_key is None
    assert "OPENROUTER_API_KEY not set" in console.export_text()


def test_transport_uses_cli_url(monkeypatch):
    """Test that the transport targets the given proxy address."""
    monkeypatch.setenv("ENCORE_PROXY_URL", "https://ignored.example")

    transport = get_transport("http://localhost:9000")

    assert isinstance(transport, ProxyClient)
    assert transport.url == "http://localhost:9000/chat"
