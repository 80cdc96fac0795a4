"""Base filter interface for film filtering."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from film_explorer.models import Film


@dataclass(frozen=True)
class FilterCriteria:
    """Current table filter settings.

    Attributes:
        year: Exact release year to keep. Accepts an int or its string form
            as it arrives from a year selector; None or blank means no
            year constraint.
        search: Title substring, matched case-insensitively. None or
            whitespace-only means no text constraint.
    """

    year: int | str | None = None
    search: str | None = None


@dataclass
class FilterResult:
    """Result of a filter evaluation.

    Attributes:
        passed: Whether the film passed the filter.
        reason: Optional reason for rejection (None if passed).
        filter_name: Name of the filter that produced this result.
    """

    passed: bool
    reason: str | None = None
    filter_name: str = ""


class BaseFilter(ABC):
    """Abstract base class for film filters.

    All filters must implement:
    - is_enabled(): Check if the criteria constrain this filter's field
    - evaluate(): Evaluate a film against the filter
    """

    name: str = "base"

    @abstractmethod
    def is_enabled(self, criteria: FilterCriteria) -> bool:
        """Check if this filter applies to the given criteria.

        Args:
            criteria: Current filter criteria.

        Returns:
            True if the filter should be applied.
        """

    @abstractmethod
    def evaluate(self, film: Film, criteria: FilterCriteria) -> FilterResult:
        """Evaluate a film against this filter.

        Args:
            film: Film to check.
            criteria: Current filter criteria.

        Returns:
            FilterResult indicating pass/fail with optional reason.
        """
