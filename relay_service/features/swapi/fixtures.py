"""Bundled Star Wars records backing the in-memory data source."""

from __future__ import annotations

from typing import Any

from relay_service.features.swapi.models import SwapiKind

RECORDS: dict[SwapiKind, list[dict[str, Any]]] = {
    SwapiKind.FILMS: [
        {
            "id": "1",
            "title": "A New Hope",
            "episode_id": 4,
            "director": "George Lucas",
            "producers": ["Gary Kurtz", "Rick McCallum"],
            "release_date": "1977-05-25",
            "character_ids": ["1", "2", "3", "4", "5"],
            "planet_ids": ["1"],
        },
        {
            "id": "2",
            "title": "The Empire Strikes Back",
            "episode_id": 5,
            "director": "Irvin Kershner",
            "producers": ["Gary Kurtz", "Rick McCallum"],
            "release_date": "1980-05-17",
            "character_ids": ["1", "2", "3", "4", "5"],
            "planet_ids": ["2"],
        },
        {
            "id": "3",
            "title": "Return of the Jedi",
            "episode_id": 6,
            "director": "Richard Marquand",
            "producers": ["Howard G. Kazanjian", "George Lucas", "Rick McCallum"],
            "release_date": "1983-05-25",
            "character_ids": ["1", "2", "3", "4", "5"],
            "planet_ids": ["1"],
        },
        {
            "id": "4",
            "title": "The Phantom Menace",
            "episode_id": 1,
            "director": "George Lucas",
            "producers": ["Rick McCallum"],
            "release_date": "1999-05-19",
            "character_ids": ["2", "3"],
            "planet_ids": ["1"],
        },
        {
            "id": "5",
            "title": "Attack of the Clones",
            "episode_id": 2,
            "director": "George Lucas",
            "producers": ["Rick McCallum"],
            "release_date": "2002-05-16",
            "character_ids": ["2", "3"],
            "planet_ids": ["1"],
        },
        {
            "id": "6",
            "title": "Revenge of the Sith",
            "episode_id": 3,
            "director": "George Lucas",
            "producers": ["Rick McCallum"],
            "release_date": "2005-05-19",
            "character_ids": ["1", "2", "3", "4", "5"],
            "planet_ids": ["1"],
        },
    ],
    SwapiKind.PEOPLE: [
        {
            "id": "1",
            "name": "Luke Skywalker",
            "birth_year": "19BBY",
            "gender": "male",
            "height": 172,
            "homeworld_id": "1",
            "film_ids": ["1", "2", "3", "6"],
        },
        {
            "id": "2",
            "name": "C-3PO",
            "birth_year": "112BBY",
            "gender": "n/a",
            "height": 167,
            "homeworld_id": "1",
            "film_ids": ["1", "2", "3", "4", "5", "6"],
        },
        {
            "id": "3",
            "name": "R2-D2",
            "birth_year": "33BBY",
            "gender": "n/a",
            "height": 96,
            "homeworld_id": "3",
            "film_ids": ["1", "2", "3", "4", "5", "6"],
        },
        {
            "id": "4",
            "name": "Darth Vader",
            "birth_year": "41.9BBY",
            "gender": "male",
            "height": 202,
            "homeworld_id": "1",
            "film_ids": ["1", "2", "3", "6"],
        },
        {
            "id": "5",
            "name": "Leia Organa",
            "birth_year": "19BBY",
            "gender": "female",
            "height": 150,
            "homeworld_id": "2",
            "film_ids": ["1", "2", "3", "6"],
        },
    ],
    SwapiKind.PLANETS: [
        {"id": "1", "name": "Tatooine", "climate": "arid", "terrain": "desert", "population": 200000},
        {"id": "2", "name": "Alderaan", "climate": "temperate", "terrain": "grasslands, mountains", "population": 2000000000},
        {"id": "3", "name": "Naboo", "climate": "temperate", "terrain": "grassy hills, swamps, forests, mountains", "population": 4500000000},
    ],
    SwapiKind.SPECIES: [
        {"id": "1", "name": "Human", "classification": "mammal", "language": "Galactic Basic"},
        {"id": "2", "name": "Droid", "classification": "artificial", "language": "n/a"},
        {"id": "3", "name": "Wookie", "classification": "mammal", "language": "Shyriiwook"},
    ],
    SwapiKind.STARSHIPS: [
        {"id": "2", "name": "CR90 corvette", "model": "CR90 corvette", "manufacturer": "Corellian Engineering Corporation", "starship_class": "corvette"},
        {"id": "3", "name": "Star Destroyer", "model": "Imperial I-class Star Destroyer", "manufacturer": "Kuat Drive Yards", "starship_class": "Star Destroyer"},
        {"id": "10", "name": "Millennium Falcon", "model": "YT-1300 light freighter", "manufacturer": "Corellian Engineering Corporation", "starship_class": "Light freighter"},
    ],
    SwapiKind.VEHICLES: [
        {"id": "4", "name": "Sand Crawler", "model": "Digger Crawler", "manufacturer": "Corellia Mining Corporation", "vehicle_class": "wheeled"},
        {"id": "6", "name": "T-16 skyhopper", "model": "T-16 skyhopper", "manufacturer": "Incom Corporation", "vehicle_class": "repulsorcraft"},
        {"id": "7", "name": "X-34 landspeeder", "model": "X-34 landspeeder", "manufacturer": "SoroSuub Corporation", "vehicle_class": "repulsorcraft"},
    ],
}

__all__ = ["RECORDS"]
