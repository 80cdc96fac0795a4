"""Film filters for the table view.

Filters:
    year: Exact release year match
    title: Case-insensitive title substring search
"""

from collections.abc import Iterable

from film_explorer.models import Film

from .base import BaseFilter, FilterCriteria, FilterResult
from .chain import FilterChain
from .title import TitleSearchFilter
from .year import YearFilter, coerce_year

__all__ = [
    "BaseFilter",
    "FilterChain",
    "FilterCriteria",
    "FilterResult",
    "TitleSearchFilter",
    "YearFilter",
    "coerce_year",
    "filter_films",
]


def filter_films(films: Iterable[Film], criteria: FilterCriteria) -> list[Film]:
    """Narrow films by year and title search, preserving order."""
    return FilterChain(criteria).apply(films)
