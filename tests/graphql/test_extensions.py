"""Tests for query validation limits and operation execution."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from strawberry.extensions import DisableIntrospection, QueryDepthLimiter

from relay_service.core.settings import GraphQLSettings
from relay_service.features.graphql.error_handler import ErrorCategory, process_graphql_errors
from relay_service.features.graphql.extensions import get_extensions
from relay_service.features.graphql.schema import create_schema

if TYPE_CHECKING:
    from relay_service.features.graphql.context import GraphQLContext

# allFilms 0, edges 1, node 2, title 3
DEPTH_THREE_QUERY = "{ allFilms { edges { node { title } } } }"

FRAGMENT_QUERY = """
query Deep {
  ...FilmEdges
}

fragment FilmEdges on Root {
  allFilms {
    edges {
      node {
        ...FilmCharacters
      }
    }
  }
}

fragment FilmCharacters on Film {
  characterConnection {
    totalCount
  }
}
"""

INTROSPECTION_QUERY = "{ __schema { queryType { name } } }"


async def _execute(query: str, context: GraphQLContext, **settings):
    return await create_schema(GraphQLSettings(**settings)).execute(query, context_value=context)


def test_extensions_follow_settings() -> None:
    """Test that introspection is only blocked when disabled."""
    default = get_extensions(GraphQLSettings())
    locked = get_extensions(GraphQLSettings(introspection_enabled=False))

    assert [type(extension) for extension in default] == [QueryDepthLimiter]
    assert [type(extension) for extension in locked] == [QueryDepthLimiter, DisableIntrospection]


@pytest.mark.asyncio
async def test_depth_within_limit(graphql_context: GraphQLContext) -> None:
    """Test that operations at the limit run."""
    result = await _execute(DEPTH_THREE_QUERY, graphql_context, max_query_depth=3)

    assert result.errors is None
    assert len(result.data["allFilms"]["edges"]) == 6


@pytest.mark.asyncio
async def test_depth_over_limit(graphql_context: GraphQLContext) -> None:
    """Test that deeper operations are rejected before execution."""
    result = await _execute(DEPTH_THREE_QUERY, graphql_context, max_query_depth=2)

    assert result.data is None
    assert len(result.errors) == 1
    assert "'anonymous' exceeds maximum operation depth of 2" in result.errors[0].message

    [formatted] = process_graphql_errors(result.errors, is_production=True)
    assert formatted["extensions"]["code"] == ErrorCategory.DEPTH_LIMIT


@pytest.mark.asyncio
async def test_depth_follows_fragments(graphql_context: GraphQLContext) -> None:
    """Test that fragment spreads count toward depth."""
    shallow = await _execute(FRAGMENT_QUERY, graphql_context, max_query_depth=3)
    deep_enough = await _execute(FRAGMENT_QUERY, graphql_context, max_query_depth=4)

    assert shallow.errors is not None
    assert "'Deep' exceeds" in shallow.errors[0].message
    assert deep_enough.errors is None
    assert deep_enough.data["allFilms"]["edges"][0]["node"]["characterConnection"] == {
        "totalCount": 5
    }


@pytest.mark.asyncio
async def test_introspection_enabled(graphql_context: GraphQLContext) -> None:
    """Test that introspection works by default and is not depth limited."""
    result = await _execute(INTROSPECTION_QUERY, graphql_context, max_query_depth=1)

    assert result.errors is None
    assert result.data == {"__schema": {"queryType": {"name": "Root"}}}


@pytest.mark.asyncio
async def test_introspection_disabled(graphql_context: GraphQLContext) -> None:
    """Test that introspection can be turned off."""
    result = await _execute(INTROSPECTION_QUERY, graphql_context, introspection_enabled=False)

    assert result.data is None
    assert result.errors is not None


@pytest.mark.asyncio
async def test_syntax_error(graphql_context: GraphQLContext) -> None:
    """Test that unparsable documents are returned as errors."""
    result = await _execute("{ allFilms", graphql_context)

    assert result.data is None
    assert result.errors[0].message.startswith("Syntax Error")


@pytest.mark.asyncio
async def test_unknown_field(graphql_context: GraphQLContext) -> None:
    """Test that documents failing standard validation are not executed."""
    result = await _execute("{ allDroids { totalCount } }", graphql_context)

    assert result.data is None
    assert "allDroids" in result.errors[0].message

    [formatted] = process_graphql_errors(result.errors, is_production=True)
    assert formatted["extensions"]["code"] == ErrorCategory.GRAPHQL_VALIDATION
