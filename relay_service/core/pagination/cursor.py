"""Offset cursors for array-backed connections.

A cursor is an opaque token whose payload is ``"arrayconnection:<offset>"``.
Offsets are positions in the full ordered result set, so cursors stay
valid when only a slice of that set is materialized.

Example payload:
    arrayconnection:3

Encoded: YXJyYXljb25uZWN0aW9uOjM=
"""

from __future__ import annotations

import re

from relay_service.core.encoding import base64, unbase64

CURSOR_PREFIX = "arrayconnection:"

_OFFSET_PATTERN = re.compile(r"-?[0-9]+")


def offset_to_cursor(offset: int) -> str:
    """Create the cursor string for an offset."""
    return base64(f"{CURSOR_PREFIX}{offset}")


def cursor_to_offset(cursor: str) -> int | None:
    """Rederive the offset from a cursor string.

    The parse is stricter than JavaScript's parseInt: no leading whitespace,
    no "+" sign and no trailing junk are accepted.

    Args:
        cursor: Cursor previously returned to a client

    Returns:
        The offset, or None if the cursor lacks the prefix or its suffix
        is not a base-10 integer.
    """
    payload = unbase64(cursor)
    if not payload.startswith(CURSOR_PREFIX):
        return None

    suffix = payload[len(CURSOR_PREFIX) :]
    if not _OFFSET_PATTERN.fullmatch(suffix):
        return None
    return int(suffix)


def get_offset_with_default(cursor: str | None, default_offset: int) -> int:
    """Return the offset a cursor points at, or a default.

    The default is used when the cursor is absent or malformed; bad cursors
    are treated as if no cursor was supplied.
    """
    if cursor is None:
        return default_offset
    offset = cursor_to_offset(cursor)
    return default_offset if offset is None else offset


__all__ = [
    "CURSOR_PREFIX",
    "cursor_to_offset",
    "get_offset_with_default",
    "offset_to_cursor",
]
