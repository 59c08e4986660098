"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI

from relay_service.app.exception_handlers import configure_exception_handlers
from relay_service.app.lifespan import lifespan
from relay_service.app.middleware import configure_middleware
from relay_service.core.settings import get_app_settings, get_graphql_settings
from relay_service.features.graphql.router import create_graphql_router


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app_settings = get_app_settings()
    graphql_settings = get_graphql_settings()

    app = FastAPI(
        title=app_settings.title,
        version=app_settings.version,
        debug=app_settings.debug,
        lifespan=lifespan,
    )

    configure_middleware(app, app_settings)
    configure_exception_handlers(app)

    if graphql_settings.enabled:
        app.include_router(create_graphql_router(graphql_settings))

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok", "service": app_settings.service_name}

    return app
