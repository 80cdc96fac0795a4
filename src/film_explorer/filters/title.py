"""Case-insensitive title search filter."""

from film_explorer.models import Film

from .base import BaseFilter, FilterCriteria, FilterResult


class TitleSearchFilter(BaseFilter):
    """Keep films whose title contains the search text, ignoring case."""

    name = "title_search"

    def is_enabled(self, criteria: FilterCriteria) -> bool:
        """Search is enabled when the text is non-empty after trimming."""
        return bool(criteria.search and criteria.search.strip())

    def evaluate(self, film: Film, criteria: FilterCriteria) -> FilterResult:
        """Evaluate film title against the search text.

        Args:
            film: Film to check.
            criteria: Criteria holding the search text.

        Returns:
            FilterResult indicating pass/fail.
        """
        needle = (criteria.search or "").strip().lower()

        if needle not in film.title.lower():
            return FilterResult(
                passed=False,
                reason=f"Title {film.title!r} does not contain {criteria.search!r}",
                filter_name=self.name,
            )

        return FilterResult(passed=True, filter_name=self.name)
