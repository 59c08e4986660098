"""Tests for the Relay schema helpers."""

from __future__ import annotations

from types import SimpleNamespace
from typing import Any

from graphql import GraphQLNonNull
import pytest
import strawberry
from strawberry.types.field import StrawberryField

from relay_service.core.global_id import from_global_id, to_global_id
from relay_service.core.pagination import ConnectionArguments, connection_from_array
from relay_service.features.graphql.relay import (
    Eager,
    Lazy,
    PageInfo,
    connection_definitions,
    global_id_field,
    node_definitions,
    resolve_thunk,
    to_graphql_connection,
)

SHIPS = {
    "1": SimpleNamespace(id="1", serial="XW-1", name="X-wing"),
    "2": SimpleNamespace(id="2", serial="YW-2", name="Y-wing"),
}


@strawberry.type
class Hull:
    name: str


async def _fetch_ship(global_id, _info):
    resolved = from_global_id(global_id)
    return SHIPS.get(resolved.id) if resolved.type == "Ship" else None


def _field_names(cls: type) -> set[str]:
    return {field.python_name for field in cls.__strawberry_definition__.fields}


def _build_schema(ship_id_field: StrawberryField) -> strawberry.Schema:
    node_interface, node_field = node_definitions(_fetch_ship, lambda _obj, _info, _type: "Ship")

    @strawberry.type(name="Ship")
    class Ship(node_interface):  # type: ignore[misc, valid-type]
        id: strawberry.ID = ship_id_field
        name: str

        # Roots are plain namespaces, not Ship instances
        is_type_of = staticmethod(lambda _obj, _info: True)

    ship_connections = connection_definitions(Ship)

    def resolve_ships() -> Any:
        connection = connection_from_array(list(SHIPS.values()), ConnectionArguments(first=1))
        return to_graphql_connection(connection, ship_connections)

    @strawberry.type
    class Query:
        node = node_field
        ships = strawberry.field(
            resolver=resolve_ships,
            graphql_type=ship_connections.connection_type | None,
        )

    return strawberry.Schema(query=Query, types=[Ship])


# ──────────────────────────────────────────────────────────────
# Thunks
# ──────────────────────────────────────────────────────────────


class TestThunks:
    """Tests for Eager / Lazy configuration values."""

    def test_eager(self):
        """Eager values are returned as-is."""
        assert resolve_thunk(Eager({"a": 1}), {}) == {"a": 1}

    def test_lazy(self):
        """Lazy factories are called on resolution."""
        assert resolve_thunk(Lazy(lambda: [1, 2]), []) == [1, 2]

    def test_none_uses_default(self):
        """A missing value resolves to the default."""
        assert resolve_thunk(None, "default") == "default"

    def test_rejects_other_values(self):
        """Plain values must be wrapped."""
        with pytest.raises(TypeError):
            resolve_thunk({"a": 1}, {})  # type: ignore[arg-type]


# ──────────────────────────────────────────────────────────────
# Connection definitions
# ──────────────────────────────────────────────────────────────


class TestConnectionDefinitions:
    """Tests for edge and connection type construction."""

    def test_names_default_to_node_type(self):
        """Type names are derived from the node type."""
        definitions = connection_definitions(Hull)

        assert definitions.edge_type.__strawberry_definition__.name == "HullEdge"
        assert definitions.connection_type.__strawberry_definition__.name == "HullConnection"
        assert _field_names(definitions.edge_type) == {"node", "cursor"}
        assert _field_names(definitions.connection_type) == {"page_info", "edges"}

    def test_custom_name_and_extra_fields(self):
        """Extra fields are merged from eager and lazy sources."""
        definitions = connection_definitions(
            Hull,
            "FleetHulls",
            edge_fields=Eager({"weight": strawberry.field(graphql_type=int | None, default=None)}),
            connection_fields=Lazy(
                lambda: {"total_count": strawberry.field(graphql_type=int | None, default=None)}
            ),
        )

        assert definitions.edge_type.__strawberry_definition__.name == "FleetHullsEdge"
        assert "weight" in _field_names(definitions.edge_type)
        assert "total_count" in _field_names(definitions.connection_type)

    def test_lazy_fields_resolved_once(self):
        """Lazy factories run once, while the types are built."""
        calls: list[int] = []

        def extra_fields():
            calls.append(1)
            return {"total_count": strawberry.field(graphql_type=int | None, default=None)}

        connection_definitions(Hull, "CountedHulls", connection_fields=Lazy(extra_fields))

        assert calls == [1]

    def test_page_info_is_non_null(self):
        """pageInfo is a non-null PageInfo."""
        schema = _build_schema(global_id_field())

        page_info = schema._schema.get_type("ShipConnection").fields["pageInfo"]

        assert isinstance(page_info.type, GraphQLNonNull)
        assert page_info.type.of_type.name == "PageInfo"

    def test_to_graphql_connection(self):
        """Core connections become connection instances with extra fields."""
        definitions = connection_definitions(
            Hull,
            "TotalHulls",
            connection_fields=Eager(
                {"total_count": strawberry.field(graphql_type=int | None, default=None)}
            ),
        )
        hull = Hull(name="A-wing")
        connection = connection_from_array([hull])

        source = to_graphql_connection(connection, definitions, total_count=1)

        assert isinstance(source, definitions.connection_type)
        assert source.total_count == 1
        assert source.page_info == PageInfo(
            has_next_page=False,
            has_previous_page=False,
            start_cursor=connection.page_info.start_cursor,
            end_cursor=connection.page_info.end_cursor,
        )
        [edge] = source.edges
        assert isinstance(edge, definitions.edge_type)
        assert edge.node is hull
        assert edge.cursor == connection.edges[0].cursor


# ──────────────────────────────────────────────────────────────
# Object identification
# ──────────────────────────────────────────────────────────────


class TestNodeDefinitions:
    """Tests for the Node interface and global ID fields."""

    @pytest.mark.asyncio
    async def test_global_id_defaults_to_parent_type_name(self):
        """Without a type name the parent GraphQL type name is used."""
        schema = _build_schema(global_id_field())

        result = await schema.execute("{ ships { edges { cursor node { id name } } } }")

        assert result.errors is None
        edge = result.data["ships"]["edges"][0]
        assert edge["node"] == {"id": to_global_id("Ship", "1"), "name": "X-wing"}

    @pytest.mark.asyncio
    async def test_global_id_with_fetcher(self):
        """An id fetcher supplies the local ID."""
        schema = _build_schema(global_id_field("Vessel", lambda obj, _info: obj.serial))

        result = await schema.execute("{ ships { edges { node { id } } } }")

        assert result.errors is None
        assert result.data["ships"]["edges"][0]["node"]["id"] == to_global_id("Vessel", "XW-1")

    @pytest.mark.asyncio
    async def test_node_field_refetches(self):
        """The node field resolves global IDs through the fetcher."""
        schema = _build_schema(global_id_field())
        global_id = to_global_id("Ship", "2")

        result = await schema.execute(
            "query ($id: ID!) { node(id: $id) { id ... on Ship { name } } }",
            variable_values={"id": global_id},
        )

        assert result.errors is None
        assert result.data["node"] == {"id": global_id, "name": "Y-wing"}

    @pytest.mark.asyncio
    async def test_node_field_unknown_id(self):
        """Unknown IDs resolve to null."""
        schema = _build_schema(global_id_field())

        result = await schema.execute('{ node(id: "bm9wZQ==") { id } }')

        assert result.errors is None
        assert result.data["node"] is None
