"""Middleware configuration for FastAPI application.

The middleware stack includes:
- Security Headers: HTTP security headers on every response
- Request Logging: one access log record per request

Starlette runs the last added middleware first, so the stack is added
innermost first.

Example Usage:
    from relay_service.app.middleware import configure_middleware
    from relay_service.core.settings import get_app_settings

    configure_middleware(app, get_app_settings())
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from relay_service.app.middleware.request_logging import RequestLoggingMiddleware
from relay_service.app.middleware.security_headers import SecurityHeadersMiddleware

if TYPE_CHECKING:
    from fastapi import FastAPI

    from relay_service.core.settings import AppSettings

logger = logging.getLogger(__name__)

__all__ = [
    "RequestLoggingMiddleware",
    "SecurityHeadersMiddleware",
    "configure_middleware",
]


def configure_middleware(app: FastAPI, settings: AppSettings) -> None:
    """Add the middleware stack to ``app``.

    Args:
        app: FastAPI application instance
        settings: Application settings
    """
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        SecurityHeadersMiddleware,
        # HSTS is meaningless over plain HTTP during local development
        enable_hsts=settings.environment != "development",
    )

    logger.info(
        "All middleware configured successfully",
        extra={
            "middleware_count": len(app.user_middleware),
            "environment": settings.environment,
        },
    )
