"""Aggregations over the canonical film collection."""

from film_explorer.metrics.aggregations import (
    DEFAULT_TOP_DIRECTORS,
    DirectorRevenue,
    aggregate_by_country,
    aggregate_top_directors,
)

__all__ = [
    "DEFAULT_TOP_DIRECTORS",
    "DirectorRevenue",
    "aggregate_by_country",
    "aggregate_top_directors",
]
