"""Global ID and cursor commands."""

from __future__ import annotations

import json

import click

from relay_service.cli.utils import error
from relay_service.core.global_id import from_global_id, to_global_id
from relay_service.core.pagination import cursor_to_offset, offset_to_cursor


@click.command(name="encode-id")
@click.argument("type_name")
@click.argument("local_id")
def encode_id(type_name: str, local_id: str) -> None:
    """Build the global ID for TYPE_NAME and LOCAL_ID."""
    click.echo(to_global_id(type_name, local_id))


@click.command(name="decode-id")
@click.argument("global_id")
def decode_id(global_id: str) -> None:
    """Split GLOBAL_ID into its type and local ID."""
    click.echo(json.dumps(from_global_id(global_id).model_dump()))


@click.command()
@click.argument("offset", type=int)
def cursor(offset: int) -> None:
    """Build the cursor for OFFSET."""
    click.echo(offset_to_cursor(offset))


@click.command()
@click.argument("token")
def offset(token: str) -> None:
    """Decode the offset stored in cursor TOKEN."""
    value = cursor_to_offset(token)
    if value is None:
        error(f"Not a valid cursor: {token}")
        raise SystemExit(1)
    click.echo(value)
