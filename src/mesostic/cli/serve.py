"""
CLI: ``mesostic serve`` — start the API server.
"""

from __future__ import annotations

import typer
import uvicorn

from mesostic.api.settings import get_settings
from mesostic.cli.utils import console


def serve_command(
    host: str | None = typer.Option(None, "--host", "-h", help="Bind address (default from settings)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port (default from settings)"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on changes"),
    workers: int = typer.Option(1, "--workers", "-w", help="Number of workers"),
    log_level: str = typer.Option("info", "--log-level"),
) -> None:
    """Start the mesostic REST API server."""
    settings = get_settings()
    host = host or settings.host
    port = port or settings.port

    console.print(f"[bold green]Starting mesostic API[/bold green] on {host}:{port}")
    uvicorn.run(
        "mesostic.api:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )
