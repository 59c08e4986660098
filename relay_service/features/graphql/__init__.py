"""GraphQL API exposing the Star Wars resources through Relay connections.

The schema is built with strawberry; see :mod:`.schema` for the root
type and :mod:`.router` for the HTTP endpoint.
"""

from relay_service.features.graphql.context import GraphQLContext
from relay_service.features.graphql.schema import create_schema, get_schema_sdl

__all__ = ["GraphQLContext", "create_schema", "get_schema_sdl"]
