"""chronicles serve: run the HTTP API."""

from __future__ import annotations

import sys

import click

from chronicles.core.exceptions import ConfigurationError


@click.command()
@click.option("--host", default=None, help="Bind address (default: server.host).")
@click.option("--port", default=None, type=int, help="Port (default: server.port, or $PORT).")
@click.pass_obj
def serve(config, host: str | None, port: int | None) -> None:
    """Serve journal search and lookup over HTTP."""
    import uvicorn

    from chronicles.api import create_app

    try:
        server = config.validated().server
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    host = host or server.host
    port = port or server.port

    click.echo(f"Listening on {host}:{port}")
    uvicorn.run(create_app(config), host=host, port=port, log_level="warning")
