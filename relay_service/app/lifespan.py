"""Application lifespan management.

Startup configures logging and warms the data source; nothing needs
tearing down on shutdown beyond a log line.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from relay_service.core.settings import get_app_settings, get_logging_settings
from relay_service.features.swapi import SwapiKind, get_data_source
from relay_service.infra.logging.config import setup_logging

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application startup and shutdown."""
    app_settings = get_app_settings()
    setup_logging(get_logging_settings())

    data_source = get_data_source()
    counts = {str(kind): await data_source.count(kind) for kind in SwapiKind}
    logger.info(
        "Application starting",
        extra={
            "service": app_settings.service_name,
            "version": app_settings.version,
            "environment": app_settings.environment,
            "resource_counts": counts,
        },
    )

    yield

    logger.info("Application shutting down", extra={"service": app_settings.service_name})
