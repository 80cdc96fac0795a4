"""Film record and collection models.

A ``Film`` is validated once at the load boundary and is immutable afterwards.
A ``FilmCollection`` is the canonical, never-mutated sequence of films that
every view and aggregation is derived from.
"""

from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from pydantic import BaseModel, ConfigDict, Field


class Film(BaseModel):
    """One film entry.

    The dataset spells the link field ``film_url``; it is exposed as ``url``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    release_year: int
    director: str
    box_office: float = Field(ge=0)
    country: str
    summary: str = ""
    url: str = Field(default="", alias="film_url")


class FilmCollection(Sequence[Film]):
    """Immutable ordered collection of films.

    Backed by a tuple so neither the sequence nor its members can change
    after load. Slicing returns a plain list, never a new collection.
    """

    __slots__ = ("_films",)

    def __init__(self, films: Iterable[Film] = ()) -> None:
        self._films: tuple[Film, ...] = tuple(films)

    @overload
    def __getitem__(self, index: int) -> Film: ...

    @overload
    def __getitem__(self, index: slice) -> list[Film]: ...

    def __getitem__(self, index: int | slice) -> Film | list[Film]:
        if isinstance(index, slice):
            return list(self._films[index])
        return self._films[index]

    def __len__(self) -> int:
        return len(self._films)

    def __iter__(self) -> Iterator[Film]:
        return iter(self._films)

    def __repr__(self) -> str:
        return f"FilmCollection({len(self._films)} films)"

    def release_years(self) -> list[int]:
        """Unique release years, ascending. Feeds the year selector."""
        return sorted({film.release_year for film in self._films})
