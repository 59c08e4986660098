"""Relay schema helpers built on strawberry.

Connection types and arguments, the ``Node`` interface, and global ID
fields. Pagination itself lives in :mod:`relay_service.core.pagination`;
these helpers only describe it in the schema.
"""

from relay_service.features.graphql.relay.connection import (
    AfterArg,
    BeforeArg,
    ConnectionDefinitions,
    FieldMap,
    FirstArg,
    LastArg,
    PageInfo,
    connection_definitions,
    to_graphql_connection,
)
from relay_service.features.graphql.relay.node import (
    NodeDefinitions,
    global_id_field,
    node_definitions,
)
from relay_service.features.graphql.relay.thunks import Eager, Lazy, resolve_thunk

__all__ = [
    "AfterArg",
    "BeforeArg",
    "ConnectionDefinitions",
    "Eager",
    "FieldMap",
    "FirstArg",
    "LastArg",
    "Lazy",
    "NodeDefinitions",
    "PageInfo",
    "connection_definitions",
    "global_id_field",
    "node_definitions",
    "resolve_thunk",
    "to_graphql_connection",
]
