"""GraphQL schema assembly.

The root type exposes ``node`` for object refetching and one
``all<Kind>`` connection per resource kind. Limits from
:class:`~relay_service.core.settings.GraphQLSettings` are applied as
schema extensions, so each settings object gets its own schema.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import strawberry

from relay_service.core.pagination import ConnectionArguments
from relay_service.core.settings import GraphQLSettings, get_graphql_settings
from relay_service.features.graphql.error_handler import log_graphql_errors
from relay_service.features.graphql.extensions import get_extensions
from relay_service.features.graphql.relay import (
    AfterArg,
    BeforeArg,
    FirstArg,
    LastArg,
    to_graphql_connection,
)
from relay_service.features.graphql.resolvers import all_resources_connection
from relay_service.features.graphql.types import NODE_TYPES, ROOT_CONNECTIONS, node_field
from relay_service.features.swapi import SwapiKind

if TYPE_CHECKING:
    from graphql import GraphQLError
    from strawberry.types import ExecutionContext
    from strawberry.types.field import StrawberryField

logger = logging.getLogger(__name__)


def _all_resources_field(kind: SwapiKind) -> StrawberryField:
    """Build the root ``all<Kind>`` connection field."""
    definitions = ROOT_CONNECTIONS[kind]

    async def resolve(
        info: strawberry.Info,
        first: FirstArg = None,
        after: AfterArg = None,
        last: LastArg = None,
        before: BeforeArg = None,
    ) -> Any:
        args = ConnectionArguments(first=first, after=after, last=last, before=before)
        connection, total_count = await all_resources_connection(
            info.context.data_source, kind, args
        )
        return to_graphql_connection(connection, definitions, total_count=total_count)

    return strawberry.field(resolver=resolve, graphql_type=definitions.connection_type | None)


@strawberry.type(name="Root")
class Query:
    node = node_field
    all_films = _all_resources_field(SwapiKind.FILMS)
    all_people = _all_resources_field(SwapiKind.PEOPLE)
    all_planets = _all_resources_field(SwapiKind.PLANETS)
    all_species = _all_resources_field(SwapiKind.SPECIES)
    all_starships = _all_resources_field(SwapiKind.STARSHIPS)
    all_vehicles = _all_resources_field(SwapiKind.VEHICLES)


class RelaySchema(strawberry.Schema):
    """Schema logging errors through the application error handler."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        log_graphql_errors(errors, execution_context)


def create_schema(settings: GraphQLSettings | None = None) -> RelaySchema:
    """Create the schema with the limits from ``settings``."""
    settings = settings or get_graphql_settings()
    schema = RelaySchema(
        query=Query,
        # Every Node implementation is registered, reachable from a connection or not.
        types=list(NODE_TYPES.values()),
        extensions=get_extensions(settings),
    )
    logger.debug("GraphQL schema created", extra={"max_query_depth": settings.max_query_depth})
    return schema


@lru_cache(maxsize=1)
def get_schema_sdl() -> str:
    """Return the schema in SDL form."""
    return create_schema(GraphQLSettings()).as_str()


__all__ = ["Query", "RelaySchema", "create_schema", "get_schema_sdl"]
