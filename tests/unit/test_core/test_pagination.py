"""Unit tests for offset cursors and array connections."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from relay_service.core.encoding import base64
from relay_service.core.exceptions import InvalidConnectionArgumentError
from relay_service.core.pagination import (
    CURSOR_PREFIX,
    ArraySliceMetaInfo,
    ConnectionArguments,
    PageInfo,
    connection_from_array,
    connection_from_array_slice,
    cursor_to_offset,
    get_offset_with_default,
    offset_to_cursor,
    slice_bounds,
)

LETTERS = ["a", "b", "c", "d", "e"]


# ──────────────────────────────────────────────────────────────
# Test cursor encoding
# ──────────────────────────────────────────────────────────────


class TestOffsetCursors:
    """Tests for offset_to_cursor / cursor_to_offset."""

    def test_offset_to_cursor(self):
        """Cursors wrap the prefixed offset in base64."""
        assert CURSOR_PREFIX == "arrayconnection:"
        assert offset_to_cursor(3) == "YXJyYXljb25uZWN0aW9uOjM="

    @pytest.mark.parametrize("offset", [0, 1, 7, 1234, -1])
    def test_round_trip(self, offset: int):
        """Decoding a cursor yields the offset it was built from."""
        assert cursor_to_offset(offset_to_cursor(offset)) == offset

    @pytest.mark.parametrize(
        "payload",
        [
            "3",
            "arrayconnection:",
            "arrayconnection:abc",
            "arrayconnection:1.5",
            "arrayconnection: 1",
            "arrayconnection:+1",
            "arrayconnection:1abc",
            "arrayconnection:1 ",
            "arrayconnection:٣",
            "ArrayConnection:1",
        ],
    )
    def test_malformed_payload_has_no_offset(self, payload: str):
        """Payloads without the prefix or a base-10 integer suffix are rejected."""
        assert cursor_to_offset(base64(payload)) is None

    def test_garbage_cursor_has_no_offset(self):
        """Tokens that are not cursors at all are rejected without raising."""
        assert cursor_to_offset("not-a-cursor") is None
        assert cursor_to_offset("") is None


class TestGetOffsetWithDefault:
    """Tests for the default fallback."""

    def test_absent_cursor_uses_default(self):
        """A missing cursor falls back to the default."""
        assert get_offset_with_default(None, 7) == 7

    def test_malformed_cursor_uses_default(self):
        """A malformed cursor falls back to the default."""
        assert get_offset_with_default("garbage", -1) == -1

    def test_valid_cursor_wins(self):
        """A valid cursor's offset is returned."""
        assert get_offset_with_default(offset_to_cursor(4), 0) == 4


# ──────────────────────────────────────────────────────────────
# Test connection_from_array
# ──────────────────────────────────────────────────────────────


class TestConnectionFromArray:
    """Tests for paginating a materialized array."""

    def test_no_arguments_returns_everything(self):
        """Without arguments every element is returned without more pages."""
        connection = connection_from_array(LETTERS)

        assert connection.nodes == LETTERS
        assert connection.page_info == PageInfo(
            has_previous_page=False,
            has_next_page=False,
            start_cursor=offset_to_cursor(0),
            end_cursor=offset_to_cursor(4),
        )

    def test_first_after(self):
        """first=2 after offset 1 returns c and d with more to follow."""
        args = ConnectionArguments(after=offset_to_cursor(1), first=2)

        connection = connection_from_array(LETTERS, args)

        assert connection.nodes == ["c", "d"]
        assert [edge.cursor for edge in connection.edges] == [
            offset_to_cursor(2),
            offset_to_cursor(3),
        ]
        assert connection.page_info.has_next_page is True
        assert connection.page_info.has_previous_page is False
        assert connection.page_info.start_cursor == offset_to_cursor(2)
        assert connection.page_info.end_cursor == offset_to_cursor(3)

    def test_first_beyond_length(self):
        """Asking for more than exists returns everything and no next page."""
        connection = connection_from_array(LETTERS, ConnectionArguments(first=10))

        assert connection.nodes == LETTERS
        assert connection.page_info.has_next_page is False

    def test_last(self):
        """last=2 returns the tail with a previous page."""
        connection = connection_from_array(LETTERS, ConnectionArguments(last=2))

        assert connection.nodes == ["d", "e"]
        assert connection.page_info.has_previous_page is True
        assert connection.page_info.has_next_page is False

    def test_last_before(self):
        """last=1 before offset 3 returns c."""
        args = ConnectionArguments(before=offset_to_cursor(3), last=1)

        connection = connection_from_array(LETTERS, args)

        assert connection.nodes == ["c"]
        assert connection.edges[0].cursor == offset_to_cursor(2)
        assert connection.page_info.has_previous_page is True

    def test_after_and_before(self):
        """after and before bound the window on both sides."""
        args = ConnectionArguments(after=offset_to_cursor(0), before=offset_to_cursor(4))

        connection = connection_from_array(LETTERS, args)

        assert connection.nodes == ["b", "c", "d"]
        assert connection.page_info.has_previous_page is False
        assert connection.page_info.has_next_page is False

    def test_first_and_last_combined(self):
        """first narrows the window before last is applied."""
        connection = connection_from_array(LETTERS, ConnectionArguments(first=4, last=2))

        assert connection.nodes == ["c", "d"]
        assert connection.page_info.has_next_page is True
        assert connection.page_info.has_previous_page is True

    def test_malformed_cursor_is_ignored(self):
        """A bad after cursor behaves like no cursor."""
        args = ConnectionArguments(after="garbage", first=2)

        connection = connection_from_array(LETTERS, args)

        assert connection.nodes == ["a", "b"]

    def test_after_beyond_end_is_empty(self):
        """A cursor past the end selects nothing."""
        args = ConnectionArguments(after=offset_to_cursor(10), first=2)

        connection = connection_from_array(LETTERS, args)

        assert connection.edges == []
        assert connection.page_info.start_cursor is None
        assert connection.page_info.end_cursor is None

    def test_first_zero(self):
        """first=0 selects nothing but reports more items ahead."""
        connection = connection_from_array(LETTERS, ConnectionArguments(first=0))

        assert connection.edges == []
        assert connection.page_info.has_next_page is True

    def test_empty_array(self):
        """An empty array yields no edges and no pages."""
        connection = connection_from_array([], ConnectionArguments(first=3))

        assert connection.edges == []
        assert connection.page_info == PageInfo(has_previous_page=False, has_next_page=False)

    def test_edges_are_ascending(self):
        """Edges come back in ascending offset order whatever the direction."""
        connection = connection_from_array(LETTERS, ConnectionArguments(last=3))

        offsets = [cursor_to_offset(edge.cursor) for edge in connection.edges]
        assert offsets == sorted(offsets) == [2, 3, 4]

    @pytest.mark.parametrize(
        ("argument", "args"),
        [
            ("first", ConnectionArguments(first=-1)),
            ("last", ConnectionArguments(last=-1)),
        ],
    )
    def test_negative_limit_raises(self, argument: str, args: ConnectionArguments):
        """Negative limits are rejected, naming the argument."""
        with pytest.raises(InvalidConnectionArgumentError) as exc_info:
            connection_from_array(LETTERS, args)

        assert exc_info.value.argument == argument
        assert exc_info.value.value == -1

    def test_arguments_are_frozen(self):
        """ConnectionArguments cannot be mutated."""
        args = ConnectionArguments(first=1)

        with pytest.raises(ValidationError):
            args.first = 2


# ──────────────────────────────────────────────────────────────
# Test connection_from_array_slice
# ──────────────────────────────────────────────────────────────


class TestConnectionFromArraySlice:
    """Tests for paginating a slice of a larger result set."""

    def test_partial_slice(self):
        """Offsets are computed against the full set, not the slice."""
        rows = [f"item-{offset}" for offset in range(40, 50)]
        args = ConnectionArguments(first=3, after=offset_to_cursor(44))

        connection = connection_from_array_slice(
            rows,
            args,
            ArraySliceMetaInfo(slice_start=40, array_length=100),
        )

        assert connection.nodes == ["item-45", "item-46", "item-47"]
        assert [cursor_to_offset(edge.cursor) for edge in connection.edges] == [45, 46, 47]
        assert connection.page_info.has_next_page is True

    def test_slice_shorter_than_window(self):
        """Only the supplied elements become edges."""
        connection = connection_from_array_slice(
            ["c"],
            ConnectionArguments(first=3, after=offset_to_cursor(1)),
            ArraySliceMetaInfo(slice_start=2, array_length=5),
        )

        assert connection.nodes == ["c"]
        assert connection.edges[0].cursor == offset_to_cursor(2)

    @pytest.mark.parametrize("first", [None, 2])
    def test_before_earlier_than_slice_start_is_empty(self, first: int | None):
        """A before cursor pointing ahead of the slice selects no edges."""
        connection = connection_from_array_slice(
            ["d", "e"],
            ConnectionArguments(first=first, before=offset_to_cursor(1)),
            ArraySliceMetaInfo(slice_start=3, array_length=5),
        )

        assert connection.edges == []
        assert connection.page_info == PageInfo(
            start_cursor=None,
            end_cursor=None,
            has_previous_page=False,
            has_next_page=False,
        )

    @pytest.mark.parametrize(
        "args",
        [
            None,
            ConnectionArguments(first=2),
            ConnectionArguments(first=2, after=offset_to_cursor(1)),
            ConnectionArguments(last=2),
            ConnectionArguments(last=2, before=offset_to_cursor(4)),
            ConnectionArguments(after=offset_to_cursor(0), before=offset_to_cursor(3)),
            ConnectionArguments(first=10, last=1),
            ConnectionArguments(after=offset_to_cursor(9)),
        ],
    )
    def test_matches_full_array(self, args: ConnectionArguments | None):
        """Fetching slice_bounds and paginating the slice equals paginating everything."""
        start, end = slice_bounds(args, len(LETTERS))

        sliced = connection_from_array_slice(
            LETTERS[start:end],
            args,
            ArraySliceMetaInfo(slice_start=start, array_length=len(LETTERS)),
        )

        assert sliced == connection_from_array(LETTERS, args)


class TestSliceBounds:
    """Tests for computing the window to fetch."""

    def test_no_arguments(self):
        """Without arguments the whole set is needed."""
        assert slice_bounds(None, 5) == (0, 5)

    def test_forward(self):
        """first/after select a window starting after the cursor."""
        args = ConnectionArguments(first=2, after=offset_to_cursor(1))

        assert slice_bounds(args, 5) == (2, 4)

    def test_backward(self):
        """last selects a window at the tail."""
        assert slice_bounds(ConnectionArguments(last=2), 5) == (3, 5)

    def test_negative_limit_raises(self):
        """Limits are validated before any data is fetched."""
        with pytest.raises(InvalidConnectionArgumentError):
            slice_bounds(ConnectionArguments(first=-3), 5)
