"""Test fixtures for film-explorer.

Provides fixtures for:
- The three-film scenario (A, B, C) used across engine tests
- A larger catalogue with ties, accents and repeated directors
- Dataset files on disk for loader, build and CLI tests
"""

import json
from pathlib import Path
from typing import Any

import pytest

from film_explorer.models import Film, FilmCollection

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def make_film(
    title: str,
    year: int,
    director: str,
    box: float,
    country: str,
    summary: str = "",
) -> Film:
    """Build a film with a derived URL."""
    return Film(
        title=title,
        release_year=year,
        director=director,
        box_office=box,
        country=country,
        summary=summary,
        url=f"https://example.org/films/{title.lower().replace(' ', '-')}",
    )


@pytest.fixture
def abc_films() -> FilmCollection:
    """Films A, B and C: two directors tied at 300 in revenue."""
    return FilmCollection(
        [
            make_film("A", 2000, "X", 100, "US"),
            make_film("B", 2000, "Y", 300, "FR"),
            make_film("C", 2005, "X", 200, "US"),
        ]
    )


@pytest.fixture
def catalogue() -> FilmCollection:
    """A mixed catalogue of eight films."""
    return FilmCollection(
        [
            make_film("Avatar", 2009, "James Cameron", 2923706026, "United States"),
            make_film("Titanic", 1997, "James Cameron", 2264743305, "United States"),
            make_film("Spirited Away", 2001, "Hayao Miyazaki", 395580000, "Japan"),
            make_film("Amélie", 2001, "Jean-Pierre Jeunet", 174200000, "France"),
            make_film("Avengers: Endgame", 2019, "Russo brothers", 2799439100, "United States"),
            make_film("Parasite", 2019, "Bong Joon-ho", 262676009, "South Korea"),
            make_film("Ne Zha", 2019, "Jiaozi", 742718499, "China"),
            make_film("The Intouchables", 2011, "Olivier Nakache", 426588510, "France"),
        ]
    )


@pytest.fixture
def raw_films() -> list[dict[str, Any]]:
    """Wire-format records as they appear in films.json."""
    with (FIXTURES_DIR / "films.json").open(encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def films_file(tmp_path: Path, raw_films: list[dict[str, Any]]) -> Path:
    """Write the fixture dataset to a temporary file."""
    path = tmp_path / "films.json"
    path.write_text(json.dumps(raw_films), encoding="utf-8")
    return path
