"""Table sort orders.

Sorting never reorders its input; every call returns a new list. All orders
are stable, so films that tie keep their relative input order, including for
descending orders.
"""

import logging
import unicodedata
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any

from film_explorer.models import Film

logger = logging.getLogger(__name__)


class SortKey(str, Enum):
    """Supported table orders."""

    TITLE_ASC = "title-asc"
    TITLE_DESC = "title-desc"
    YEAR_ASC = "year-asc"
    YEAR_DESC = "year-desc"
    BOX_ASC = "box-asc"
    BOX_DESC = "box-desc"


# Order used when no sort has been chosen or the choice is not recognised.
DEFAULT_SORT_KEY = SortKey.BOX_DESC


def collation_key(text: str) -> tuple[str, str, str]:
    """Build a locale-style collation key for a string.

    Compares letters first with accents and case ignored, then accents,
    then case (lowercase before uppercase), so "éclair" sorts beside
    "eclair" rather than after "zebra".
    """
    decomposed = unicodedata.normalize("NFKD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), decomposed.casefold(), text.swapcase()


_SORT_FIELDS: dict[SortKey, tuple[Callable[[Film], Any], bool]] = {
    SortKey.TITLE_ASC: (lambda film: collation_key(film.title), False),
    SortKey.TITLE_DESC: (lambda film: collation_key(film.title), True),
    SortKey.YEAR_ASC: (lambda film: film.release_year, False),
    SortKey.YEAR_DESC: (lambda film: film.release_year, True),
    SortKey.BOX_ASC: (lambda film: film.box_office, False),
    SortKey.BOX_DESC: (lambda film: film.box_office, True),
}


def parse_sort_key(value: SortKey | str | None) -> SortKey:
    """Map a raw sort selection to a SortKey.

    Args:
        value: Sort selection, e.g. "year-desc". None, blank, or unknown
            values select the default order.

    Returns:
        The matching SortKey, or DEFAULT_SORT_KEY.
    """
    if isinstance(value, SortKey):
        return value
    if not value:
        return DEFAULT_SORT_KEY
    try:
        return SortKey(value.strip())
    except ValueError:
        logger.debug("Unknown sort key %r, using %s", value, DEFAULT_SORT_KEY.value)
        return DEFAULT_SORT_KEY


def sort_films(films: Iterable[Film], key: SortKey | str | None = None) -> list[Film]:
    """Return films in the requested order.

    Args:
        films: Films to order. Not modified.
        key: Sort selection; see parse_sort_key for fallback rules.

    Returns:
        New list of films in sorted order.
    """
    sort_key = parse_sort_key(key)
    field, descending = _SORT_FIELDS[sort_key]
    return sorted(films, key=field, reverse=descending)
