"""Whole-collection aggregations for the summary charts.

Computes:
    - country distribution: films per country
    - top directors: directors ranked by summed box office, truncated to N

Both functions are meant to be called with the canonical collection, never a
filtered table view, and group on exact string values with no normalization.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

import polars as pl

from film_explorer.models import Film

logger = logging.getLogger(__name__)

DEFAULT_TOP_DIRECTORS = 5

_AGGREGATION_SCHEMA = {
    "director": pl.Utf8,
    "country": pl.Utf8,
    "box_office": pl.Float64,
}


@dataclass(frozen=True)
class DirectorRevenue:
    """Aggregate bucket for one director.

    Attributes:
        director: Director name as it appears in the dataset.
        revenue: Sum of box office across the director's films.
        film_count: Number of films by the director.
    """

    director: str
    revenue: float
    film_count: int


def _to_frame(films: Iterable[Film]) -> pl.DataFrame:
    """Build the grouping columns for a set of films."""
    rows = list(films)
    return pl.DataFrame(
        {
            "director": [film.director for film in rows],
            "country": [film.country for film in rows],
            "box_office": [float(film.box_office) for film in rows],
        },
        schema=_AGGREGATION_SCHEMA,
    )


def aggregate_by_country(films: Iterable[Film]) -> dict[str, int]:
    """Count films per country.

    Args:
        films: Canonical film collection.

    Returns:
        Mapping of country to film count, in order of first appearance.
        Counts sum to the number of films.
    """
    frame = _to_frame(films)
    counts = frame.group_by("country", maintain_order=True).agg(pl.len().alias("count"))

    distribution = dict(
        zip(counts["country"].to_list(), counts["count"].to_list(), strict=True)
    )
    logger.debug("Aggregated %d films into %d countries", len(frame), len(distribution))
    return distribution


def aggregate_top_directors(
    films: Iterable[Film],
    n: int = DEFAULT_TOP_DIRECTORS,
) -> list[DirectorRevenue]:
    """Rank directors by total box office.

    Directors with equal revenue keep the order in which they first appear
    in the collection.

    Args:
        films: Canonical film collection.
        n: Maximum number of directors to return.

    Returns:
        Up to ``n`` DirectorRevenue entries, highest revenue first. Fewer when
        the collection has fewer distinct directors.

    Raises:
        ValueError: If ``n`` is not a positive integer.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        msg = f"n must be a positive integer, got {n!r}"
        raise ValueError(msg)

    frame = _to_frame(films)
    if len(frame) == 0:
        logger.debug("No films to rank directors from")
        return []

    ranked = (
        frame.group_by("director", maintain_order=True)
        .agg(
            pl.col("box_office").sum().alias("revenue"),
            pl.len().alias("film_count"),
        )
        .sort("revenue", descending=True, maintain_order=True)
        .head(n)
    )

    return [
        DirectorRevenue(
            director=row["director"],
            revenue=row["revenue"],
            film_count=row["film_count"],
        )
        for row in ranked.iter_rows(named=True)
    ]
