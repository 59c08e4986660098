"""Global exception handlers for FastAPI application."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from relay_service.core.exceptions import AppException

logger = logging.getLogger(__name__)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Convert an AppException raised outside GraphQL into RFC 7807 Problem Details."""
    logger.warning(
        "Application exception",
        extra={
            "path": request.url.path,
            "status_code": exc.status_code,
            "error_type": exc.type,
        },
    )
    problem = {
        "type": exc.type,
        "title": exc.title,
        "status": exc.status_code,
        "detail": exc.detail,
        **exc.extra,
    }
    if exc.instance:
        problem["instance"] = exc.instance
    return JSONResponse(
        problem,
        status_code=exc.status_code,
        media_type="application/problem+json",
    )


def configure_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers on the application."""
    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]
