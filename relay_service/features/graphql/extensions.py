"""Strawberry extensions guarding the GraphQL endpoint.

Provides:
- Query depth limiting (``GRAPHQL_MAX_QUERY_DEPTH``, default 10)
- Introspection switch (``GRAPHQL_INTROSPECTION_ENABLED``)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from strawberry.extensions import DisableIntrospection, QueryDepthLimiter

if TYPE_CHECKING:
    from strawberry.extensions import SchemaExtension

    from relay_service.core.settings import GraphQLSettings

logger = logging.getLogger(__name__)


def get_extensions(settings: GraphQLSettings) -> list[SchemaExtension]:
    """Get list of Strawberry extensions for the schema.

    Returns:
        List of extension instances
    """
    extensions: list[SchemaExtension] = [
        QueryDepthLimiter(max_depth=settings.max_query_depth),
    ]
    if not settings.introspection_enabled:
        extensions.append(DisableIntrospection())

    logger.debug(
        "GraphQL extensions configured",
        extra={
            "max_query_depth": settings.max_query_depth,
            "introspection_enabled": settings.introspection_enabled,
        },
    )
    return extensions


__all__ = ["get_extensions"]
