"""Star Wars object graph served through the Relay schema."""

from relay_service.features.swapi.datasource import (
    InMemoryDataSource,
    SwapiDataSource,
    get_data_source,
)
from relay_service.features.swapi.models import (
    MODEL_BY_KIND,
    Film,
    Person,
    Planet,
    Species,
    Starship,
    SwapiKind,
    SwapiResource,
    Vehicle,
)

__all__ = [
    "MODEL_BY_KIND",
    "Film",
    "InMemoryDataSource",
    "Person",
    "Planet",
    "Species",
    "Starship",
    "SwapiDataSource",
    "SwapiKind",
    "SwapiResource",
    "Vehicle",
    "get_data_source",
]
