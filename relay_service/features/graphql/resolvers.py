"""Data access behind the Star Wars schema.

Root connections fetch only the window the pagination arguments select;
nested connections materialize the (small) list of related records and
paginate it in memory.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import strawberry

from relay_service.core.global_id import from_global_id
from relay_service.core.pagination import (
    ArraySliceMetaInfo,
    Connection,
    ConnectionArguments,
    connection_from_array,
    connection_from_array_slice,
    slice_bounds,
)
from relay_service.features.swapi import SwapiKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from relay_service.features.swapi import SwapiDataSource, SwapiResource

logger = logging.getLogger(__name__)


async def resolve_node(global_id: str, data_source: SwapiDataSource) -> SwapiResource | None:
    """Fetch the object a global ID refers to.

    Returns None when the ID names an unknown kind or a missing object.
    """
    resolved = from_global_id(global_id)
    try:
        kind = SwapiKind(resolved.type)
    except ValueError:
        logger.debug("Unknown node type", extra={"node_type": resolved.type})
        return None
    return await data_source.get_object(kind, resolved.id)


async def fetch_node(global_id: str, info: strawberry.Info) -> SwapiResource | None:
    return await resolve_node(global_id, info.context.data_source)


async def all_resources_connection(
    data_source: SwapiDataSource,
    kind: SwapiKind,
    args: ConnectionArguments,
) -> tuple[Connection[SwapiResource], int]:
    """Page through every resource of ``kind``.

    Returns:
        The connection and the total number of resources of that kind
    """
    total_count = await data_source.count(kind)
    start, end = slice_bounds(args, total_count)
    items = await data_source.list_objects(kind, offset=start, limit=max(end - start, 0))

    connection = connection_from_array_slice(
        items,
        args,
        ArraySliceMetaInfo(slice_start=start, array_length=total_count),
    )
    return connection, total_count


async def related_resources_connection(
    data_source: SwapiDataSource,
    kind: SwapiKind,
    ids: Sequence[str],
    args: ConnectionArguments,
) -> tuple[Connection[SwapiResource], int]:
    """Page through the resources of ``kind`` a parent object refers to."""
    related = await data_source.get_many(kind, ids)
    return connection_from_array(related, args), len(related)


__all__ = [
    "all_resources_connection",
    "fetch_node",
    "related_resources_connection",
    "resolve_node",
]
