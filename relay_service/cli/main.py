"""Main CLI entry point for relay-service."""

import click

from relay_service.cli.commands import ids, schema, server
from relay_service.infra.logging.config import setup_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="relay-service")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Star Wars Relay API - server and Relay token tooling.

    \b
    Quick Start:
      relay-service serve                  # Run the GraphQL server
      relay-service schema                 # Print the schema SDL
      relay-service encode-id films 1      # ZmlsbXM6MQ==
      relay-service decode-id ZmlsbXM6MQ==
      relay-service cursor 2               # YXJyYXljb25uZWN0aW9uOjI=
      relay-service query '{ allFilms(first: 2) { totalCount } }'
    """
    ctx.ensure_object(dict)


cli.add_command(server.serve)
cli.add_command(schema.schema)
cli.add_command(schema.query)
cli.add_command(ids.encode_id)
cli.add_command(ids.decode_id)
cli.add_command(ids.cursor)
cli.add_command(ids.offset)


def main() -> None:
    """Entry point for CLI."""
    setup_logging()
    cli(obj={})


if __name__ == "__main__":
    main()
