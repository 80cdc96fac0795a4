"""Filter chain for narrowing a film collection.

Provides composable filtering with rejection statistics.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable

from film_explorer.models import Film

from .base import BaseFilter, FilterCriteria, FilterResult
from .title import TitleSearchFilter
from .year import YearFilter

logger = logging.getLogger(__name__)


class FilterChain:
    """Composable filter chain for the film table.

    Every enabled filter must pass (logical AND). Tracks how many films each
    filter rejected.
    """

    def __init__(self, criteria: FilterCriteria) -> None:
        """Initialize filter chain from criteria.

        Args:
            criteria: Current table filter criteria.
        """
        self.criteria = criteria
        self.stats: dict[str, int] = defaultdict(int)

        self.filters: list[BaseFilter] = [
            YearFilter(),
            TitleSearchFilter(),
        ]

    def evaluate(self, film: Film) -> FilterResult:
        """Evaluate all enabled filters for a film.

        Short-circuits on first failure.

        Args:
            film: Film to check.

        Returns:
            FilterResult with pass/fail and rejection reason.
        """
        for filter_obj in self.filters:
            if not filter_obj.is_enabled(self.criteria):
                continue

            result = filter_obj.evaluate(film, self.criteria)
            if not result.passed:
                return result

        return FilterResult(passed=True, filter_name="none")

    def apply(self, films: Iterable[Film]) -> list[Film]:
        """Return the films passing every enabled filter, in input order.

        Args:
            films: Films to narrow.

        Returns:
            New list of surviving films. May be empty.
        """
        kept: list[Film] = []
        for film in films:
            result = self.evaluate(film)
            if result.passed:
                kept.append(film)
            else:
                self.record_rejection(result.filter_name)

        if self.stats:
            logger.debug("Kept %d films, rejections: %s", len(kept), self.get_stats())

        return kept

    def record_rejection(self, filter_name: str) -> None:
        """Record a filter rejection for statistics.

        Args:
            filter_name: Name of the filter that rejected the film.
        """
        self.stats[filter_name] += 1

    def get_stats(self) -> dict[str, int]:
        """Get filter rejection statistics.

        Returns:
            Dictionary mapping filter names to rejection counts.
        """
        return dict(self.stats)
