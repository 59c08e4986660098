"""Schema and query commands."""

from __future__ import annotations

import json
from pathlib import Path

import click

from relay_service.cli.utils import coro, error, success
from relay_service.core.settings import get_app_settings, get_graphql_settings
from relay_service.features.graphql.context import GraphQLContext
from relay_service.features.graphql.error_handler import process_graphql_errors
from relay_service.features.graphql.schema import create_schema, get_schema_sdl
from relay_service.features.swapi import get_data_source


@click.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the SDL to this file instead of stdout",
)
def schema(output: Path | None) -> None:
    """Print the GraphQL schema in SDL form."""
    sdl = get_schema_sdl()
    if output is None:
        click.echo(sdl)
        return
    output.write_text(f"{sdl}\n", encoding="utf-8")
    success(f"Schema written to {output}")


@click.command()
@click.argument("document", required=False)
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read the document from this file",
)
@click.option("--variables", "-v", default=None, help="Variable values as a JSON object")
@click.option("--operation-name", default=None, help="Operation to run")
@coro
async def query(
    document: str | None,
    file_path: Path | None,
    variables: str | None,
    operation_name: str | None,
) -> None:
    """Run a GraphQL DOCUMENT against the bundled data and print the result."""
    if file_path is not None:
        document = file_path.read_text(encoding="utf-8")
    if not document:
        raise click.UsageError("Provide a DOCUMENT or --file")

    variable_values = None
    if variables:
        try:
            variable_values = json.loads(variables)
        except json.JSONDecodeError as exc:
            raise click.BadParameter(str(exc), param_hint="--variables") from exc

    result = await create_schema(get_graphql_settings()).execute(
        document,
        variable_values=variable_values,
        context_value=GraphQLContext(data_source=get_data_source()),
        operation_name=operation_name,
    )

    payload: dict[str, object] = {"data": result.data}
    if result.errors:
        payload["errors"] = process_graphql_errors(
            result.errors,
            is_production=get_app_settings().is_production,
        )
    click.echo(json.dumps(payload, indent=2))

    if result.errors:
        error(f"{len(result.errors)} error(s)")
        raise SystemExit(1)
