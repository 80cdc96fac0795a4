"""View pipeline over the canonical film collection.

Two named views exist over one canonical collection:

- the table view: filtered then sorted, recomputed in full on every change
  of year, search text, or sort key;
- the chart series: country distribution and top directors, aggregated
  once from the canonical collection and never from the table view.

Presentation is delegated to a Renderer. Filtering scans the whole
collection on every change; for datasets much larger than a few thousand
films, index the collection by release year before filtering.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from typing import Any, Generic, Protocol, TypeVar

from film_explorer.filters import FilterCriteria, filter_films
from film_explorer.metrics.aggregations import (
    DEFAULT_TOP_DIRECTORS,
    DirectorRevenue,
    aggregate_by_country,
    aggregate_top_directors,
)
from film_explorer.models import Film, FilmCollection
from film_explorer.report.views.table_view import TableRow, build_table_rows
from film_explorer.sorting import SortKey, sort_films

logger = logging.getLogger(__name__)

H = TypeVar("H")


@dataclass(frozen=True)
class ViewState:
    """UI state read whenever the table view is recomputed."""

    year: int | str | None = None
    search: str | None = None
    sort: SortKey | str | None = None

    def criteria(self) -> FilterCriteria:
        return FilterCriteria(year=self.year, search=self.search)


@dataclass(frozen=True)
class ChartSeries:
    """Chart aggregations of the whole collection."""

    countries: dict[str, int] = field(default_factory=dict)
    top_directors: tuple[DirectorRevenue, ...] = ()


class Renderer(Protocol):
    """Presentation side of the pipeline."""

    def render_table(self, rows: Sequence[TableRow]) -> None: ...

    def render_country_chart(self, series: dict[str, int]) -> None: ...

    def render_director_chart(self, series: Sequence[DirectorRevenue]) -> None: ...


class ChartSlot(Generic[H]):
    """Owner of at most one live chart handle.

    Replacing the handle always releases the previous one first.
    """

    def __init__(self, name: str, release: Callable[[H], Any] | None = None) -> None:
        self.name = name
        self._release = release
        self._handle: H | None = None

    @property
    def current(self) -> H | None:
        return self._handle

    def replace(self, handle: H) -> None:
        """Install a new handle, releasing the current one."""
        self.release()
        self._handle = handle

    def release(self) -> None:
        """Release the current handle, if any."""
        if self._handle is None:
            return
        logger.debug("Releasing chart in slot %s", self.name)
        if self._release is not None:
            self._release(self._handle)
        self._handle = None


def compute_view(films: Sequence[Film], state: ViewState) -> list[Film]:
    """Filter then sort films for the table."""
    return sort_films(filter_films(films, state.criteria()), state.sort)


def compute_chart_series(
    canonical: FilmCollection,
    top_directors: int = DEFAULT_TOP_DIRECTORS,
) -> ChartSeries:
    """Aggregate the canonical collection for both charts."""
    return ChartSeries(
        countries=aggregate_by_country(canonical),
        top_directors=tuple(aggregate_top_directors(canonical, top_directors)),
    )


class ViewPipeline:
    """Drives the table and chart renders for one loaded collection.

    The environment calls initial_render() once after load, then the
    on_*_changed callbacks as the user interacts. Callbacks only recompute
    and re-render the table.
    """

    def __init__(
        self,
        canonical: FilmCollection,
        renderer: Renderer,
        state: ViewState | None = None,
        top_directors: int = DEFAULT_TOP_DIRECTORS,
    ) -> None:
        """Initialize the pipeline.

        Args:
            canonical: The loaded collection. Never filtered or sorted here.
            renderer: Presentation collaborator.
            state: Initial UI state; defaults to no filters, default order.
            top_directors: How many directors the director chart ranks.
        """
        self._canonical = canonical
        self._renderer = renderer
        self._state = state or ViewState()
        self._top_directors = top_directors
        self._chart_series: ChartSeries | None = None
        self._charts_rendered = False

    @property
    def canonical(self) -> FilmCollection:
        return self._canonical

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def chart_series(self) -> ChartSeries:
        """Chart aggregations, computed on first access only."""
        if self._chart_series is None:
            self._chart_series = compute_chart_series(self._canonical, self._top_directors)
            logger.info(
                "Computed chart series: %d countries, %d directors",
                len(self._chart_series.countries),
                len(self._chart_series.top_directors),
            )
        return self._chart_series

    def year_options(self) -> list[int]:
        """Release years available in the year selector."""
        return self._canonical.release_years()

    def current_view(self) -> list[Film]:
        """Table view for the current state."""
        return compute_view(self._canonical, self._state)

    def refresh(self) -> list[TableRow]:
        """Recompute the table view in full and render it."""
        rows = build_table_rows(self.current_view())
        logger.debug("Rendering %d of %d films", len(rows), len(self._canonical))
        self._renderer.render_table(rows)
        return rows

    def initial_render(self) -> list[TableRow]:
        """Render the table and, the first time only, both charts."""
        rows = self.refresh()
        if self._charts_rendered:
            logger.warning("Charts already rendered, skipping")
            return rows

        series = self.chart_series
        self._renderer.render_country_chart(series.countries)
        self._renderer.render_director_chart(series.top_directors)
        self._charts_rendered = True
        return rows

    def on_filter_changed(self, year: int | str | None) -> list[TableRow]:
        self._state = replace(self._state, year=year)
        return self.refresh()

    def on_search_changed(self, text: str | None) -> list[TableRow]:
        self._state = replace(self._state, search=text)
        return self.refresh()

    def on_sort_changed(self, key: SortKey | str | None) -> list[TableRow]:
        self._state = replace(self._state, sort=key)
        return self.refresh()
