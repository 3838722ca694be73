"""Serve command implementation."""

from typing import Optional

import typer
import uvicorn
from rich.console import Console

from ..api import create_app
from ..config import Config

console = Console()


def serve_command(
    ctx: typer.Context,
    host: Optional[str] = typer.Option(None, "--host", help="Bind host (default from config)"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Bind port (default from config)"),
) -> None:
    """Run the HTTP API."""
    settings: Config = ctx.obj
    server = settings.config.server

    host = host or server.host
    port = port or server.port

    console.print(f"Serving on [bold]http://{host}:{port}[/bold] (GET /api/daily-articles, /api/read-article?url=)")
    uvicorn.run(create_app(settings), host=host, port=port, log_config=None)
