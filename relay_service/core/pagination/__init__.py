"""Offset-cursor pagination producing GraphQL Relay connections.

This module turns an ordered result set (or a slice of one) plus the
Relay connection arguments into a Connection:
- Stable cursors: Each cursor encodes an offset in the full result set
- Slice aware: Only the requested window needs to be materialized
- Forgiving: Absent or malformed cursors fall back to the set boundaries

Usage:
    from relay_service.core.pagination import (
        ConnectionArguments,
        connection_from_array,
    )

    connection = connection_from_array(films, ConnectionArguments(first=2))
    connection.page_info.has_next_page

Cursors are opaque base64 strings that clients pass back unchanged.
"""

from relay_service.core.pagination.connection import (
    connection_from_array,
    connection_from_array_slice,
    slice_bounds,
)
from relay_service.core.pagination.cursor import (
    CURSOR_PREFIX,
    cursor_to_offset,
    get_offset_with_default,
    offset_to_cursor,
)
from relay_service.core.pagination.schemas import (
    ArraySliceMetaInfo,
    Connection,
    ConnectionArguments,
    Edge,
    PageInfo,
)

__all__ = [
    # Schemas
    "ArraySliceMetaInfo",
    "CURSOR_PREFIX",
    "Connection",
    "ConnectionArguments",
    "Edge",
    "PageInfo",
    # Builders
    "connection_from_array",
    "connection_from_array_slice",
    # Cursor utilities
    "cursor_to_offset",
    "get_offset_with_default",
    "offset_to_cursor",
    "slice_bounds",
]
