"""Release year filter."""

from film_explorer.models import Film

from .base import BaseFilter, FilterCriteria, FilterResult


def coerce_year(value: int | str | None) -> int | None:
    """Convert a year criterion to an int.

    Returns None for an absent or blank criterion. Raises ValueError when the
    criterion is present but not an integer.
    """
    if value is None:
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text:
        return None
    return int(text)


class YearFilter(BaseFilter):
    """Keep films released in exactly the selected year.

    The selected year may arrive as a string ("2004"); it is compared
    numerically against ``release_year``.
    """

    name = "year"

    def is_enabled(self, criteria: FilterCriteria) -> bool:
        """Year filter is enabled when a non-blank year is selected."""
        if criteria.year is None:
            return False
        return bool(str(criteria.year).strip())

    def evaluate(self, film: Film, criteria: FilterCriteria) -> FilterResult:
        """Evaluate film release year.

        Args:
            film: Film to check.
            criteria: Criteria holding the selected year.

        Returns:
            FilterResult indicating pass/fail.
        """
        try:
            year = coerce_year(criteria.year)
        except ValueError:
            # A non-numeric selection matches no film.
            return FilterResult(
                passed=False,
                reason=f"Year criterion {criteria.year!r} is not a number",
                filter_name=self.name,
            )

        if film.release_year != year:
            return FilterResult(
                passed=False,
                reason=f"Released in {film.release_year}, not {year}",
                filter_name=self.name,
            )

        return FilterResult(passed=True, filter_name=self.name)
