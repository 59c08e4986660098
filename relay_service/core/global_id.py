"""Global object identifiers.

A global ID wraps ``"<type>:<local id>"`` in an opaque token so that every
object exposed through the ``Node`` interface has an ID that is unique across
all types. Resolving the decoded type back to a concrete object is left to
the caller.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from relay_service.core.encoding import base64, unbase64

GLOBAL_ID_DELIMITER = ":"


class ResolvedGlobalId(BaseModel):
    """Type name and type-local ID decoded from a global ID."""

    type: str = Field(description="Type discriminator the ID was created with")
    id: str = Field(description="Identifier local to the type")

    model_config = {"frozen": True}


def to_global_id(type_name: str, local_id: str | int) -> str:
    """Build a global ID from a type name and an ID specific to that type.

    Example:
        >>> to_global_id("Person", "42")
        'UGVyc29uOjQy'
    """
    return base64(f"{type_name}{GLOBAL_ID_DELIMITER}{local_id}")


def from_global_id(global_id: str) -> ResolvedGlobalId:
    """Split a global ID back into the type name and local ID.

    The payload is split on the first delimiter only, so local IDs may
    themselves contain ``:``. Tokens whose payload has no delimiter at all
    decode to an empty type with the whole payload as the ID.
    """
    payload = unbase64(global_id)
    type_name, delimiter, local_id = payload.partition(GLOBAL_ID_DELIMITER)
    if not delimiter:
        return ResolvedGlobalId(type="", id=payload)
    return ResolvedGlobalId(type=type_name, id=local_id)


__all__ = ["GLOBAL_ID_DELIMITER", "ResolvedGlobalId", "from_global_id", "to_global_id"]
