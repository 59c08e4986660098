"""Server commands."""

from __future__ import annotations

import click
import uvicorn

from relay_service.cli.utils import info
from relay_service.core.settings import (
    get_app_settings,
    get_graphql_settings,
    get_logging_settings,
)


@click.command()
@click.option("--host", default=None, help="Host to bind (default: from settings)")
@click.option("--port", default=None, type=int, help="Port to bind (default: from settings)")
@click.option(
    "--reload/--no-reload",
    default=None,
    help="Auto-reload on code changes (default: APP_DEBUG)",
)
def serve(host: str | None, port: int | None, reload: bool | None) -> None:
    """Run the GraphQL server with uvicorn."""
    settings = get_app_settings()
    graphql_settings = get_graphql_settings()
    log_settings = get_logging_settings()

    host = host or settings.host
    port = port or settings.port
    reload = settings.debug if reload is None else reload

    info(f"GraphQL endpoint: http://{host}:{port}{graphql_settings.path}")
    info(f"Environment: {settings.environment}")

    uvicorn.run(
        "relay_service.app.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        access_log=settings.debug,
        log_level=log_settings.level.lower(),
    )
