"""Data source for Star Wars resources.

The GraphQL layer depends only on the :class:`SwapiDataSource` protocol.
It asks the source for the total count of a kind and for the slice of
records it needs, then builds connections from that slice.

:class:`InMemoryDataSource` serves the bundled fixtures and is what the
application wires in by default.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from relay_service.features.swapi.fixtures import RECORDS
from relay_service.features.swapi.models import MODEL_BY_KIND, SwapiKind, SwapiResource

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

logger = logging.getLogger(__name__)


@runtime_checkable
class SwapiDataSource(Protocol):
    """Ordered access to Star Wars resources by kind.

    Offsets refer to a stable ordering of each kind; ``count`` is the true
    size of that ordering.
    """

    async def count(self, kind: SwapiKind) -> int: ...

    async def get_object(self, kind: SwapiKind, object_id: str) -> SwapiResource | None: ...

    async def list_objects(
        self,
        kind: SwapiKind,
        *,
        offset: int = 0,
        limit: int | None = None,
    ) -> Sequence[SwapiResource]: ...

    async def get_many(
        self,
        kind: SwapiKind,
        object_ids: Sequence[str],
    ) -> Sequence[SwapiResource]: ...


class InMemoryDataSource:
    """Data source over records held in memory, ordered as given."""

    def __init__(self, records: Mapping[SwapiKind, Sequence[SwapiResource]]) -> None:
        self._records = {kind: list(records.get(kind, ())) for kind in SwapiKind}
        self._index = {
            kind: {record.id: record for record in items}
            for kind, items in self._records.items()
        }

    @classmethod
    def from_fixtures(cls) -> InMemoryDataSource:
        """Build a data source from the bundled fixture records."""
        records = {
            kind: [MODEL_BY_KIND[kind].model_validate(row) for row in rows]
            for kind, rows in RECORDS.items()
        }
        return cls(records)

    async def count(self, kind: SwapiKind) -> int:
        return len(self._records[kind])

    async def get_object(self, kind: SwapiKind, object_id: str) -> SwapiResource | None:
        record = self._index[kind].get(object_id)
        if record is None:
            logger.debug("Resource not found", extra={"kind": str(kind), "object_id": object_id})
        return record

    async def list_objects(
        self,
        kind: SwapiKind,
        *,
        offset: int = 0,
        limit: int | None = None,
    ) -> list[SwapiResource]:
        offset = max(offset, 0)
        items = self._records[kind]
        if limit is None:
            return items[offset:]
        return items[offset : offset + max(limit, 0)]

    async def get_many(
        self,
        kind: SwapiKind,
        object_ids: Sequence[str],
    ) -> list[SwapiResource]:
        """Return the records for the IDs that exist, in the order given."""
        index = self._index[kind]
        return [index[object_id] for object_id in object_ids if object_id in index]


_data_source: SwapiDataSource | None = None


def get_data_source() -> SwapiDataSource:
    """Get the process-wide data source, built from fixtures on first use."""
    global _data_source
    if _data_source is None:
        _data_source = InMemoryDataSource.from_fixtures()
    return _data_source


__all__ = [
    "InMemoryDataSource",
    "SwapiDataSource",
    "get_data_source",
]
