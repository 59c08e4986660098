"""GraphQL context for request-scoped dependencies.

The context is created fresh for each GraphQL request and carries the
data source resolvers read from.

Following Strawberry's FastAPI integration pattern:
https://strawberry.rocks/docs/integrations/fastapi#context_getter

Example usage in a resolver:
    async def resolve_film(root, info: strawberry.Info) -> Film | None:
        return await info.context.data_source.get_object(SwapiKind.FILMS, root.film_id)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from strawberry.fastapi import BaseContext

if TYPE_CHECKING:
    from starlette.background import BackgroundTasks
    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.websockets import WebSocket

    from relay_service.features.swapi import SwapiDataSource


@dataclass
class GraphQLContext(BaseContext):
    """Request context for GraphQL operations.

    ``request``, ``response`` and ``background_tasks`` are filled in by
    strawberry's FastAPI integration; they stay None when operations run
    outside HTTP, as in the CLI and the tests.
    """

    # Standard Strawberry/FastAPI context fields
    request: Request | WebSocket | None = None
    response: Response | None = None
    background_tasks: BackgroundTasks | None = None

    # Custom application fields
    data_source: SwapiDataSource = field(default=None)  # type: ignore[assignment]
    request_id: str | None = None


__all__ = ["GraphQLContext"]
