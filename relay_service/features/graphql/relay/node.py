"""Relay object identification: the ``Node`` interface and global ID fields."""

from collections.abc import Awaitable, Callable
from typing import Annotated, Any, NamedTuple

import strawberry
from graphql import GraphQLAbstractType, GraphQLResolveInfo
from strawberry.types.field import StrawberryField

from relay_service.core.global_id import to_global_id

IdFetcher = Callable[[Any, strawberry.Info], str | int]
NodeFetcher = Callable[[str, strawberry.Info], Awaitable[Any]]
TypeResolver = Callable[[Any, GraphQLResolveInfo, GraphQLAbstractType], str | None]


class NodeDefinitions(NamedTuple):
    node_interface: type
    node_field: StrawberryField


def node_definitions(
    fetch_node: NodeFetcher,
    type_resolver: TypeResolver | None = None,
) -> NodeDefinitions:
    """Build the ``Node`` interface and the root ``node(id: ID!)`` field.

    Args:
        fetch_node: Maps a global ID to the underlying object, or None
        type_resolver: Maps an object to the name of its concrete type.
            When omitted, ``is_type_of`` on the object types decides.
    """

    class Node:
        id: strawberry.ID = strawberry.field(description="The id of the object.")

    if type_resolver is not None:
        Node.resolve_type = staticmethod(type_resolver)  # type: ignore[attr-defined]

    node_interface = strawberry.interface(Node, description="An object with an ID")

    async def node(
        info: strawberry.Info,
        id: Annotated[strawberry.ID, strawberry.argument(description="The ID of an object")],  # noqa: A002
    ) -> node_interface | None:  # type: ignore[valid-type]
        return await fetch_node(id, info)

    node_field = strawberry.field(resolver=node, description="Fetches an object given its ID")

    return NodeDefinitions(node_interface, node_field)


def global_id_field(
    type_name: str | None = None,
    id_fetcher: IdFetcher | None = None,
) -> StrawberryField:
    """Build an ``id: ID!`` field that resolves to a global ID.

    The type part is ``type_name`` or, when omitted, the name of the parent
    GraphQL type. The local ID is ``id_fetcher(obj, info)`` or the object's
    ``id`` attribute.
    """

    def resolve_id(root: Any, info: strawberry.Info) -> strawberry.ID:
        local_id = id_fetcher(root, info) if id_fetcher else root.id
        # strawberry's Info does not expose the parent type
        parent_type = type_name or info._raw_info.parent_type.name
        return strawberry.ID(to_global_id(parent_type, local_id))

    return strawberry.field(resolver=resolve_id, description="The ID of an object")


__all__ = [
    "NodeDefinitions",
    "global_id_field",
    "node_definitions",
]
