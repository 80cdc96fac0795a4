"""Table rows for the film table.

Turns an ordered view of films into display rows carrying a derived rank.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from film_explorer.models import Film


@dataclass(frozen=True)
class TableRow:
    """One rendered table row.

    Attributes:
        rank: 1-based position of the film in the current view.
        film: The film shown in the row.
    """

    rank: int
    film: Film

    @property
    def box_office_display(self) -> str:
        return format_box_office(self.film.box_office)

    def to_dict(self) -> dict[str, object]:
        """Flatten for templates and JSON export."""
        return {
            "rank": self.rank,
            "title": self.film.title,
            "release_year": self.film.release_year,
            "director": self.film.director,
            "box_office": self.film.box_office,
            "box_office_display": self.box_office_display,
            "country": self.film.country,
            "summary": self.film.summary,
            "url": self.film.url,
        }


def format_box_office(value: float) -> str:
    """Format a box office figure as dollars with thousands separators."""
    if float(value).is_integer():
        return f"${int(value):,}"
    return f"${value:,.2f}"


def build_table_rows(films: Iterable[Film]) -> list[TableRow]:
    """Number films in view order, starting at 1."""
    return [TableRow(rank=index, film=film) for index, film in enumerate(films, 1)]
