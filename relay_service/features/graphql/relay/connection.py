"""Relay connection types and arguments for strawberry schemas.

Builds the ``PageInfo`` type, the ``first``/``after``/``last``/``before``
argument annotations, and ``<Name>Edge``/``<Name>Connection`` type pairs
around any node type.

Usage:
    films = connection_definitions(
        Film,
        connection_fields=Eager({"total_count": strawberry.field(graphql_type=int | None)}),
    )

    @strawberry.field
    async def all_films(self, first: FirstArg = None, after: AfterArg = None) -> ...:
        connection = connection_from_array(items, ConnectionArguments(first=first, after=after))
        return to_graphql_connection(connection, films, total_count=len(items))

Edge nodes and cursors come straight from the core
:class:`~relay_service.core.pagination.Edge`.
"""

from typing import Annotated, Any, NamedTuple

import strawberry
from strawberry.types.field import StrawberryField

from relay_service.core.pagination import Connection
from relay_service.features.graphql.relay.thunks import Eager, Lazy, resolve_thunk

FieldMap = dict[str, StrawberryField]


@strawberry.type(description="Information about pagination in a connection.")
class PageInfo:
    has_next_page: bool = strawberry.field(
        description="When paginating forwards, are there more items?",
    )
    has_previous_page: bool = strawberry.field(
        description="When paginating backwards, are there more items?",
    )
    start_cursor: str | None = strawberry.field(
        default=None,
        description="When paginating backwards, the cursor to continue.",
    )
    end_cursor: str | None = strawberry.field(
        default=None,
        description="When paginating forwards, the cursor to continue.",
    )


# ──────────────────────────────────────────────────────────────
# Arguments
# ──────────────────────────────────────────────────────────────

AfterArg = Annotated[
    str | None,
    strawberry.argument(description="Returns the items in the list that come after the specified cursor."),
]
FirstArg = Annotated[
    int | None,
    strawberry.argument(description="Returns the first n items from the list."),
]
BeforeArg = Annotated[
    str | None,
    strawberry.argument(description="Returns the items in the list that come before the specified cursor."),
]
LastArg = Annotated[
    int | None,
    strawberry.argument(description="Returns the last n items from the list."),
]


# ──────────────────────────────────────────────────────────────
# Types
# ──────────────────────────────────────────────────────────────


class ConnectionDefinitions(NamedTuple):
    edge_type: type
    connection_type: type


def _add_fields(cls: type, fields: FieldMap) -> None:
    for field_name, field in fields.items():
        setattr(cls, field_name, field)


def connection_definitions(
    node_type: type,
    name: str | None = None,
    *,
    edge_fields: Eager[FieldMap] | Lazy[FieldMap] | None = None,
    connection_fields: Eager[FieldMap] | Lazy[FieldMap] | None = None,
) -> ConnectionDefinitions:
    """Build the edge and connection types for ``node_type``.

    Args:
        node_type: Strawberry type of the items at the end of each edge
        name: Prefix for the type names (defaults to the node type's name)
        edge_fields: Extra strawberry fields added to the edge type
        connection_fields: Extra strawberry fields added to the connection type

    Returns:
        The ``<name>Edge`` and ``<name>Connection`` types
    """
    prefix = name or node_type.__strawberry_definition__.name

    class Edge:
        node: node_type | None = strawberry.field(  # type: ignore[valid-type]
            description="The item at the end of the edge",
        )
        cursor: str = strawberry.field(description="A cursor for use in pagination")

    _add_fields(Edge, resolve_thunk(edge_fields, {}))
    edge_type = strawberry.type(Edge, name=f"{prefix}Edge", description="An edge in a connection.")

    class Connection:
        page_info: PageInfo = strawberry.field(description="Information to aid in pagination.")
        edges: list[edge_type | None] | None = strawberry.field(  # type: ignore[valid-type]
            description="A list of edges.",
        )

    _add_fields(Connection, resolve_thunk(connection_fields, {}))
    connection_type = strawberry.type(
        Connection,
        name=f"{prefix}Connection",
        description="A connection to a list of items.",
    )

    return ConnectionDefinitions(edge_type, connection_type)


def to_graphql_connection(
    connection: Connection[Any],
    definitions: ConnectionDefinitions,
    **fields: Any,
) -> Any:
    """Wrap a core connection in the generated connection type.

    Keyword arguments fill the extra connection fields, keyed by their
    Python name (for example ``total_count=6``).
    """
    page_info = connection.page_info
    return definitions.connection_type(
        page_info=PageInfo(
            has_next_page=page_info.has_next_page,
            has_previous_page=page_info.has_previous_page,
            start_cursor=page_info.start_cursor,
            end_cursor=page_info.end_cursor,
        ),
        edges=[
            definitions.edge_type(node=edge.node, cursor=edge.cursor)
            for edge in connection.edges
        ],
        **fields,
    )


__all__ = [
    "AfterArg",
    "BeforeArg",
    "ConnectionDefinitions",
    "FieldMap",
    "FirstArg",
    "LastArg",
    "PageInfo",
    "connection_definitions",
    "to_graphql_connection",
]
