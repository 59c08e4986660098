"""Star Wars resource models.

Each resource kind is a member of the closed :class:`SwapiKind` enum; the
enum value doubles as the type discriminator stored in global IDs.
"""

from __future__ import annotations

from datetime import date
from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, Field


class SwapiKind(StrEnum):
    """Resource kinds exposed through the Node interface."""

    FILMS = "films"
    PEOPLE = "people"
    PLANETS = "planets"
    SPECIES = "species"
    STARSHIPS = "starships"
    VEHICLES = "vehicles"


class SwapiResource(BaseModel):
    """Base class for every resource kind."""

    kind: ClassVar[SwapiKind]

    id: str = Field(description="Identifier local to the resource kind")

    model_config = {"frozen": True}


class Film(SwapiResource):
    kind: ClassVar[SwapiKind] = SwapiKind.FILMS

    title: str
    episode_id: int
    director: str
    producers: list[str] = Field(default_factory=list)
    release_date: date | None = None
    character_ids: list[str] = Field(default_factory=list)
    planet_ids: list[str] = Field(default_factory=list)


class Person(SwapiResource):
    kind: ClassVar[SwapiKind] = SwapiKind.PEOPLE

    name: str
    birth_year: str | None = None
    gender: str | None = None
    height: int | None = None
    homeworld_id: str | None = None
    film_ids: list[str] = Field(default_factory=list)


class Planet(SwapiResource):
    kind: ClassVar[SwapiKind] = SwapiKind.PLANETS

    name: str
    climate: str | None = None
    terrain: str | None = None
    population: int | None = None


class Species(SwapiResource):
    kind: ClassVar[SwapiKind] = SwapiKind.SPECIES

    name: str
    classification: str | None = None
    language: str | None = None


class Starship(SwapiResource):
    kind: ClassVar[SwapiKind] = SwapiKind.STARSHIPS

    name: str
    model: str | None = None
    manufacturer: str | None = None
    starship_class: str | None = None


class Vehicle(SwapiResource):
    kind: ClassVar[SwapiKind] = SwapiKind.VEHICLES

    name: str
    model: str | None = None
    manufacturer: str | None = None
    vehicle_class: str | None = None


MODEL_BY_KIND: dict[SwapiKind, type[SwapiResource]] = {
    SwapiKind.FILMS: Film,
    SwapiKind.PEOPLE: Person,
    SwapiKind.PLANETS: Planet,
    SwapiKind.SPECIES: Species,
    SwapiKind.STARSHIPS: Starship,
    SwapiKind.VEHICLES: Vehicle,
}


__all__ = [
    "MODEL_BY_KIND",
    "Film",
    "Person",
    "Planet",
    "Species",
    "Starship",
    "SwapiKind",
    "SwapiResource",
    "Vehicle",
]
