"""Value types for array-backed Relay connections.

This module provides:

1. Inputs:
   - ConnectionArguments: the before/after/first/last arguments a
     connection field receives
   - ArraySliceMetaInfo: where a materialized slice sits in the full
     ordered result set

2. Outputs (GraphQL Relay Connection pattern):
   - Edge: a node paired with its cursor
   - PageInfo: navigation metadata
   - Connection: edges plus page info

All models are frozen; they are built per request and never mutated.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ConnectionArguments(BaseModel):
    """Arguments a connection field receives.

    Cursors are optional opaque strings; malformed ones are ignored rather
    than rejected. ``first`` and ``last`` are validated when the connection
    is built, not here, so the error names the offending argument.

    Attributes:
        before: Only return edges before this cursor
        after: Only return edges after this cursor
        first: Return at most this many edges from the start of the window
        last: Return at most this many edges from the end of the window
    """

    before: str | None = Field(default=None, description="Cursor to end before (exclusive)")
    after: str | None = Field(default=None, description="Cursor to start after (exclusive)")
    first: int | None = Field(default=None, description="Forward page size")
    last: int | None = Field(default=None, description="Backward page size")

    model_config = {"frozen": True}


class ArraySliceMetaInfo(BaseModel):
    """Position of a slice within the full ordered result set.

    Attributes:
        slice_start: Offset of the first slice element in the full set
        array_length: Total number of elements in the full set
    """

    slice_start: int = Field(description="Offset of the first element of the slice")
    array_length: int = Field(description="Length of the full result set")

    model_config = {"frozen": True}


class PageInfo(BaseModel):
    """Pagination metadata following GraphQL Relay specification.

    Attributes:
        has_previous_page: Whether there are items before the current page
        has_next_page: Whether there are items after the current page
        start_cursor: Cursor of the first item in this page
        end_cursor: Cursor of the last item in this page
    """

    has_previous_page: bool = Field(description="Whether previous items exist")
    has_next_page: bool = Field(description="Whether more items exist")
    start_cursor: str | None = Field(
        default=None,
        description="Cursor of the first item",
    )
    end_cursor: str | None = Field(
        default=None,
        description="Cursor of the last item",
    )

    model_config = {"frozen": True}


class Edge(BaseModel, Generic[T]):
    """Edge wrapper for paginated items (Relay pattern).

    Attributes:
        node: The actual data item
        cursor: Cursor for this specific item
    """

    node: T = Field(description="The data item")
    cursor: str = Field(description="Cursor for this item")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}


class Connection(BaseModel, Generic[T]):
    """GraphQL Connection pattern for offset cursors.

    Edges are always in ascending offset order, whichever direction the
    client paginated in.

    Client navigation:
        # First page
        { allFilms(first: 2) { ... } }

        # Next page (using endCursor from previous response)
        { allFilms(first: 2, after: "YXJyYXljb25uZWN0aW9uOjE=") { ... } }

        # Previous page (using startCursor)
        { allFilms(last: 2, before: "YXJyYXljb25uZWN0aW9uOjI=") { ... } }

    Attributes:
        edges: List of Edge objects containing nodes and cursors
        page_info: Navigation metadata
    """

    edges: list[Edge[T]] = Field(
        default_factory=list,
        description="List of edges (items with cursors)",
    )
    page_info: PageInfo = Field(
        description="Pagination metadata",
    )

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @property
    def nodes(self) -> list[Any]:
        """Get just the nodes without edge wrappers."""
        return [edge.node for edge in self.edges]


__all__ = [
    "ArraySliceMetaInfo",
    "Connection",
    "ConnectionArguments",
    "Edge",
    "PageInfo",
]
