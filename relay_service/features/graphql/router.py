"""GraphQL router for FastAPI integration.

Provides:
- GraphQL endpoint at ``GRAPHQL_PATH`` (GET and POST)
- GraphiQL on GET requests from browsers, when enabled
- Request context carrying the data source and the request id
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING, Annotated, Any, cast

from fastapi import APIRouter, Depends, Request
from strawberry.fastapi import GraphQLRouter
from strawberry.http import process_result

from relay_service.core.settings import GraphQLSettings, get_graphql_settings
from relay_service.features.graphql.context import GraphQLContext
from relay_service.features.graphql.error_handler import process_graphql_errors
from relay_service.features.graphql.schema import create_schema
from relay_service.features.swapi import SwapiDataSource, get_data_source
from relay_service.infra.logging import set_log_context

if TYPE_CHECKING:
    from strawberry.http import GraphQLHTTPResponse
    from strawberry.types import ExecutionResult

logger = logging.getLogger(__name__)


async def get_graphql_context(
    request: Request,
    data_source: Annotated[SwapiDataSource, Depends(get_data_source)],
) -> GraphQLContext:
    """Create GraphQL context from FastAPI dependencies.

    The request id assigned by the request logging middleware is reused so
    resolver logs and the access log line share it.

    Args:
        request: FastAPI request
        data_source: Star Wars data source from dependency

    Returns:
        GraphQLContext for use in resolvers
    """
    request_id = (
        getattr(request.state, "request_id", None)
        or request.headers.get("x-request-id")
        or str(uuid.uuid4())
    )
    set_log_context(request_id=request_id)
    return GraphQLContext(data_source=data_source, request_id=request_id)


class RelayGraphQLRouter(GraphQLRouter):
    """GraphQL router formatting errors through the application error handler."""

    async def process_result(
        self, request: Request, result: ExecutionResult
    ) -> GraphQLHTTPResponse:
        response = process_result(result)
        if result.errors:
            response["errors"] = list(process_graphql_errors(result.errors))
        return response


def create_graphql_router(settings: GraphQLSettings | None = None) -> APIRouter:
    """Create GraphQL router with settings-based configuration."""
    settings = settings or get_graphql_settings()

    graphql_app = RelayGraphQLRouter(
        create_schema(settings),
        path=settings.path,
        graphql_ide="graphiql" if settings.graphiql_enabled else None,
        context_getter=cast("Any", get_graphql_context),
        subscription_protocols=(),
    )

    router = APIRouter(tags=["graphql"])
    router.include_router(graphql_app)

    logger.debug(
        "GraphQL router created",
        extra={"path": settings.path, "graphiql": settings.graphiql_enabled},
    )
    return router


__all__ = ["RelayGraphQLRouter", "create_graphql_router", "get_graphql_context"]
