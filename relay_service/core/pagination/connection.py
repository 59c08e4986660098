"""Build Relay connections from arrays and array slices.

Offsets are positions in the full ordered result set. A caller that knows
the total size can hand over only a slice of that set together with an
:class:`ArraySliceMetaInfo`; cursors and page info are still computed
against the full set.

Usage:
    args = ConnectionArguments(first=2, after=offset_to_cursor(1))
    connection = connection_from_array(["a", "b", "c", "d", "e"], args)
    connection.nodes  # ["c", "d"]

    # Only offsets 40..49 of a 100 item result set are materialized
    connection = connection_from_array_slice(
        rows,
        ConnectionArguments(first=3, after=offset_to_cursor(44)),
        ArraySliceMetaInfo(slice_start=40, array_length=100),
    )
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

from relay_service.core.exceptions import InvalidConnectionArgumentError
from relay_service.core.pagination.cursor import get_offset_with_default, offset_to_cursor
from relay_service.core.pagination.schemas import (
    ArraySliceMetaInfo,
    Connection,
    ConnectionArguments,
    Edge,
    PageInfo,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)

_NO_ARGUMENTS = ConnectionArguments()


def _validate_limit(name: str, value: int | None) -> None:
    if value is not None and value < 0:
        raise InvalidConnectionArgumentError(name, value)


def _window(
    args: ConnectionArguments,
    slice_start: int,
    slice_end: int,
    array_length: int,
) -> tuple[int, int]:
    """Compute the ``[start, end)`` offsets selected by the arguments.

    Raises:
        InvalidConnectionArgumentError: If ``first`` or ``last`` is negative
    """
    before_offset = get_offset_with_default(args.before, array_length)
    after_offset = get_offset_with_default(args.after, -1)

    start_offset = max(slice_start - 1, after_offset, -1) + 1
    end_offset = min(slice_end, before_offset, array_length)

    _validate_limit("first", args.first)
    if args.first is not None:
        end_offset = min(end_offset, start_offset + args.first)

    _validate_limit("last", args.last)
    if args.last is not None:
        start_offset = max(start_offset, end_offset - args.last)

    return start_offset, end_offset


def slice_bounds(args: ConnectionArguments | None, array_length: int) -> tuple[int, int]:
    """Return the offsets a caller must fetch to serve the arguments.

    Fetching ``[start, end)`` of the full result set and passing it to
    :func:`connection_from_array_slice` with ``slice_start=start`` yields the
    same connection as materializing the whole set.

    Args:
        args: Connection arguments from the client
        array_length: Total number of items in the result set

    Returns:
        Tuple of (start, end) offsets; ``end`` may not exceed ``start``
        when the arguments select nothing.

    Raises:
        InvalidConnectionArgumentError: If ``first`` or ``last`` is negative
    """
    return _window(args or _NO_ARGUMENTS, 0, array_length, array_length)


def connection_from_array_slice(
    array_slice: Sequence[T],
    args: ConnectionArguments | None,
    meta: ArraySliceMetaInfo,
) -> Connection[T]:
    """Build a connection from a slice of a larger result set.

    Similar to :func:`connection_from_array`, but for cases where the full
    result set is too large to materialize. The slice must be large enough
    to cover the range the arguments select.

    Args:
        array_slice: Contiguous items starting at ``meta.slice_start``
        args: Pagination arguments (None for no pagination)
        meta: Position of the slice and length of the full result set

    Returns:
        Connection whose edges are in ascending offset order

    Raises:
        InvalidConnectionArgumentError: If ``first`` or ``last`` is negative
    """
    args = args or _NO_ARGUMENTS
    slice_start = meta.slice_start
    array_length = meta.array_length
    slice_end = slice_start + len(array_slice)

    start_offset, end_offset = _window(args, slice_start, slice_end, array_length)

    # Trim the supplied slice down to the selected window
    local_start = max(start_offset - slice_start, 0)
    local_end = max(end_offset - slice_start, 0)
    window = array_slice[local_start:local_end]

    edges = [
        Edge(node=node, cursor=offset_to_cursor(start_offset + index))
        for index, node in enumerate(window)
    ]

    lower_bound = get_offset_with_default(args.after, -1) + 1 if args.after is not None else 0
    upper_bound = (
        get_offset_with_default(args.before, array_length)
        if args.before is not None
        else array_length
    )

    page_info = PageInfo(
        start_cursor=edges[0].cursor if edges else None,
        end_cursor=edges[-1].cursor if edges else None,
        has_previous_page=start_offset > lower_bound if args.last is not None else False,
        has_next_page=end_offset < upper_bound if args.first is not None else False,
    )

    logger.debug(
        "Built connection window",
        extra={
            "start_offset": start_offset,
            "end_offset": end_offset,
            "edge_count": len(edges),
            "array_length": array_length,
        },
    )
    return Connection(edges=edges, page_info=page_info)


def connection_from_array(
    data: Sequence[T],
    args: ConnectionArguments | None = None,
) -> Connection[T]:
    """Build a connection over a fully materialized array.

    Uses array offsets as cursors, so pagination is only stable while the
    array does not change. Intended for small result sets.
    """
    return connection_from_array_slice(
        data,
        args,
        ArraySliceMetaInfo(slice_start=0, array_length=len(data)),
    )


__all__ = [
    "connection_from_array",
    "connection_from_array_slice",
    "slice_bounds",
]
