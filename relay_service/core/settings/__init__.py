"""Modular Pydantic Settings v2 configuration.

One frozen settings model per domain (app, graphql, logging), each read
from environment variables with its own prefix and cached by a loader:

    from relay_service.core.settings import get_graphql_settings

    settings = get_graphql_settings()
    print(settings.path)

Configuration precedence (highest to lowest):
    1. init kwargs (testing/overrides)
    2. Environment variables
    3. .env file
"""

from __future__ import annotations

from .app import AppSettings
from .graphql import GraphQLSettings
from .loader import (
    clear_all_caches,
    get_app_settings,
    get_graphql_settings,
    get_logging_settings,
)
from .logs import LoggingSettings

__all__ = [
    "AppSettings",
    "GraphQLSettings",
    "LoggingSettings",
    "clear_all_caches",
    "get_app_settings",
    "get_graphql_settings",
    "get_logging_settings",
]
