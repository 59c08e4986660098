"""GraphQL object types for the Star Wars resources.

Every resource type implements ``Node``. The type part of each global ID
is the resource kind (``films``, ``people``, ...), so a global ID can be
routed back to its kind through :class:`SwapiKind` alone.

Resolvers hand the frozen pydantic models from the data source straight
to these types; ``is_type_of`` matches a model to its type by kind.
Films list characters and people list films, so the nested connection
fields name their connection types as forward references resolved when
the schema is built.
"""

from __future__ import annotations

from typing import Any

import strawberry
from graphql import GraphQLAbstractType, GraphQLResolveInfo

from relay_service.core.pagination import ConnectionArguments
from relay_service.features.graphql.relay import (
    AfterArg,
    BeforeArg,
    ConnectionDefinitions,
    FieldMap,
    FirstArg,
    LastArg,
    Lazy,
    connection_definitions,
    global_id_field,
    node_definitions,
    to_graphql_connection,
)
from relay_service.features.graphql.resolvers import fetch_node, related_resources_connection
from relay_service.features.swapi import Film as FilmModel
from relay_service.features.swapi import Person as PersonModel
from relay_service.features.swapi import SwapiKind, SwapiResource


def _resolve_node_type(
    obj: Any,
    _info: GraphQLResolveInfo,
    _abstract_type: GraphQLAbstractType,
) -> str | None:
    node_type = NODE_TYPES.get(getattr(obj, "kind", None))
    return node_type.__strawberry_definition__.name if node_type else None


Node, node_field = node_definitions(fetch_node, _resolve_node_type)


def _kind_check(kind: SwapiKind) -> staticmethod:
    def is_type_of(obj: Any, _info: GraphQLResolveInfo) -> bool:
        return getattr(obj, "kind", None) == kind

    return staticmethod(is_type_of)


def _counted_connection(node_type: type, name: str, plural_field: str) -> ConnectionDefinitions:
    """Connection definitions with ``totalCount`` and a plain list of nodes."""

    def resolve_nodes(root: Any) -> list[Any]:
        return [edge.node for edge in root.edges or ()]

    def extra_fields() -> FieldMap:
        return {
            "total_count": strawberry.field(
                graphql_type=int | None,
                default=None,
                description=(
                    "A count of the total number of objects in this connection, "
                    "ignoring pagination."
                ),
            ),
            plural_field: strawberry.field(
                resolver=resolve_nodes,
                graphql_type=list[node_type | None] | None,  # type: ignore[valid-type]
                description=(
                    "A list of all of the objects returned in the connection. This is "
                    "a convenience field provided for quickly exploring the API."
                ),
            ),
        }

    return connection_definitions(node_type, name, connection_fields=Lazy(extra_fields))


async def _related(
    info: strawberry.Info,
    kind: SwapiKind,
    ids: list[str],
    definitions: ConnectionDefinitions,
    args: ConnectionArguments,
) -> Any:
    connection, total_count = await related_resources_connection(
        info.context.data_source, kind, ids, args
    )
    return to_graphql_connection(connection, definitions, total_count=total_count)


# ──────────────────────────────────────────────────────────────
# Field resolvers
# ──────────────────────────────────────────────────────────────


def _release_date(root: FilmModel) -> str | None:
    return root.release_date.isoformat() if root.release_date else None


async def _film_characters(
    root: FilmModel,
    info: strawberry.Info,
    first: FirstArg = None,
    after: AfterArg = None,
    last: LastArg = None,
    before: BeforeArg = None,
) -> FilmCharactersConnection:
    args = ConnectionArguments(first=first, after=after, last=last, before=before)
    return await _related(info, SwapiKind.PEOPLE, root.character_ids, film_characters, args)


async def _film_planets(
    root: FilmModel,
    info: strawberry.Info,
    first: FirstArg = None,
    after: AfterArg = None,
    last: LastArg = None,
    before: BeforeArg = None,
) -> FilmPlanetsConnection:
    args = ConnectionArguments(first=first, after=after, last=last, before=before)
    return await _related(info, SwapiKind.PLANETS, root.planet_ids, film_planets, args)


async def _person_films(
    root: PersonModel,
    info: strawberry.Info,
    first: FirstArg = None,
    after: AfterArg = None,
    last: LastArg = None,
    before: BeforeArg = None,
) -> PersonFilmsConnection:
    args = ConnectionArguments(first=first, after=after, last=last, before=before)
    return await _related(info, SwapiKind.FILMS, root.film_ids, person_films, args)


async def _homeworld(root: PersonModel, info: strawberry.Info) -> SwapiResource | None:
    if root.homeworld_id is None:
        return None
    return await info.context.data_source.get_object(SwapiKind.PLANETS, root.homeworld_id)


# ──────────────────────────────────────────────────────────────
# Resource types
# ──────────────────────────────────────────────────────────────


@strawberry.type(description="A large mass, planet or planetoid in the Star Wars Universe.")
class Planet(Node):
    is_type_of = _kind_check(SwapiKind.PLANETS)

    id: strawberry.ID = global_id_field(SwapiKind.PLANETS)
    name: str | None = strawberry.field(description="The name of this planet.")
    climate: str | None = strawberry.field(description="The climate of this planet.")
    terrain: str | None = strawberry.field(description="The terrain of this planet.")
    population: float | None = strawberry.field(
        description="The average population of sentient beings inhabiting this planet.",
    )


@strawberry.type(description="A single film.")
class Film(Node):
    is_type_of = _kind_check(SwapiKind.FILMS)

    id: strawberry.ID = global_id_field(SwapiKind.FILMS)
    title: str | None = strawberry.field(description="The title of this film.")
    episode_id: int | None = strawberry.field(
        name="episodeID",
        description="The episode number of this film.",
    )
    director: str | None = strawberry.field(description="The name of the director of this film.")
    producers: list[str | None] | None = strawberry.field(
        description="The name(s) of the producer(s) of this film.",
    )
    release_date: str | None = strawberry.field(
        resolver=_release_date,
        description="The ISO 8601 date format of film release at original creator country.",
    )
    character_connection = strawberry.field(resolver=_film_characters)
    planet_connection = strawberry.field(resolver=_film_planets)


@strawberry.type(description="An individual person or character within the Star Wars universe.")
class Person(Node):
    is_type_of = _kind_check(SwapiKind.PEOPLE)

    id: strawberry.ID = global_id_field(SwapiKind.PEOPLE)
    name: str | None = strawberry.field(description="The name of this person.")
    birth_year: str | None = strawberry.field(
        description=(
            "The birth year of the person, using the in-universe standard of BBY "
            "or ABY - Before the Battle of Yavin or After the Battle of Yavin."
        ),
    )
    gender: str | None = strawberry.field(
        description='The gender of this person, or "n/a" for droids.',
    )
    height: int | None = strawberry.field(description="The height of the person in centimeters.")
    homeworld: Planet | None = strawberry.field(
        resolver=_homeworld,
        description="A planet that this person was born on or inhabits.",
    )
    film_connection = strawberry.field(resolver=_person_films)


@strawberry.type(description="A type of person or character within the Star Wars Universe.")
class Species(Node):
    is_type_of = _kind_check(SwapiKind.SPECIES)

    id: strawberry.ID = global_id_field(SwapiKind.SPECIES)
    name: str | None = strawberry.field(description="The name of this species.")
    classification: str | None = strawberry.field(
        description="The classification of this species, such as mammal or reptile.",
    )
    language: str | None = strawberry.field(
        description="The language commonly spoken by this species.",
    )


@strawberry.type(description="A single transport craft that has hyperdrive capability.")
class Starship(Node):
    is_type_of = _kind_check(SwapiKind.STARSHIPS)

    id: strawberry.ID = global_id_field(SwapiKind.STARSHIPS)
    name: str | None = strawberry.field(description="The name of this starship.")
    model: str | None = strawberry.field(
        description="The model or official name of this starship.",
    )
    manufacturer: str | None = strawberry.field(
        description="The manufacturer of this starship.",
    )
    starship_class: str | None = strawberry.field(
        description=(
            "The class of this starship, such as Starfighter or Deep Space Mobile Battlestation."
        ),
    )


@strawberry.type(description="A single transport craft that does not have hyperdrive capability.")
class Vehicle(Node):
    is_type_of = _kind_check(SwapiKind.VEHICLES)

    id: strawberry.ID = global_id_field(SwapiKind.VEHICLES)
    name: str | None = strawberry.field(description="The name of this vehicle.")
    model: str | None = strawberry.field(
        description="The model or official name of this vehicle.",
    )
    manufacturer: str | None = strawberry.field(
        description="The manufacturer of this vehicle.",
    )
    vehicle_class: str | None = strawberry.field(
        description="The class of this vehicle, such as Wheeled or Repulsorcraft.",
    )


NODE_TYPES: dict[SwapiKind, type] = {
    SwapiKind.FILMS: Film,
    SwapiKind.PEOPLE: Person,
    SwapiKind.PLANETS: Planet,
    SwapiKind.SPECIES: Species,
    SwapiKind.STARSHIPS: Starship,
    SwapiKind.VEHICLES: Vehicle,
}


# ──────────────────────────────────────────────────────────────
# Connections
# ──────────────────────────────────────────────────────────────

film_characters = _counted_connection(Person, "FilmCharacters", "characters")
film_planets = _counted_connection(Planet, "FilmPlanets", "planets")
person_films = _counted_connection(Film, "PersonFilms", "films")

FilmCharactersConnection = film_characters.connection_type
FilmPlanetsConnection = film_planets.connection_type
PersonFilmsConnection = person_films.connection_type

# Root connections, keyed by kind
ROOT_CONNECTIONS: dict[SwapiKind, ConnectionDefinitions] = {
    SwapiKind.FILMS: _counted_connection(Film, "Films", "films"),
    SwapiKind.PEOPLE: _counted_connection(Person, "People", "people"),
    SwapiKind.PLANETS: _counted_connection(Planet, "Planets", "planets"),
    SwapiKind.SPECIES: _counted_connection(Species, "Species", "species"),
    SwapiKind.STARSHIPS: _counted_connection(Starship, "Starships", "starships"),
    SwapiKind.VEHICLES: _counted_connection(Vehicle, "Vehicles", "vehicles"),
}


__all__ = [
    "NODE_TYPES",
    "ROOT_CONNECTIONS",
    "Film",
    "Node",
    "Person",
    "Planet",
    "Species",
    "Starship",
    "Vehicle",
    "node_field",
]
