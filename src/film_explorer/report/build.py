"""Site build system for generating the static film explorer page.

Renders the film table and both summary charts into ``index.html`` using a
Jinja2 template, and writes the underlying data as JSON next to it.
"""

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from film_explorer.config import Config
from film_explorer.metrics.aggregations import DirectorRevenue
from film_explorer.models import FilmCollection
from film_explorer.pipeline import ChartSlot, ViewPipeline, ViewState
from film_explorer.report.transformers.charts import (
    generate_country_chart,
    generate_director_chart,
)
from film_explorer.report.views.table_view import TableRow
from film_explorer.sorting import SortKey

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

SORT_LABELS = {
    SortKey.TITLE_ASC: "Title (A-Z)",
    SortKey.TITLE_DESC: "Title (Z-A)",
    SortKey.YEAR_ASC: "Year (oldest first)",
    SortKey.YEAR_DESC: "Year (newest first)",
    SortKey.BOX_ASC: "Box office (lowest first)",
    SortKey.BOX_DESC: "Box office (highest first)",
}


class SiteRenderer:
    """Collects rendered table rows and chart configs for the site.

    Each chart lives in its own slot, so re-rendering a chart discards the
    previous config instead of stacking a second one.
    """

    def __init__(self) -> None:
        self.rows: list[TableRow] = []
        self.country_chart: ChartSlot[dict[str, Any]] = ChartSlot("country-chart")
        self.director_chart: ChartSlot[dict[str, Any]] = ChartSlot("top-directors-chart")

    def render_table(self, rows: Sequence[TableRow]) -> None:
        self.rows = list(rows)

    def render_country_chart(self, series: dict[str, int]) -> None:
        self.country_chart.replace(generate_country_chart(series))

    def render_director_chart(self, series: Sequence[DirectorRevenue]) -> None:
        self.director_chart.replace(generate_director_chart(series))

    def charts(self) -> dict[str, Any]:
        """Chart configs keyed by canvas id."""
        return {
            "country-chart": self.country_chart.current,
            "top-directors-chart": self.director_chart.current,
        }


def _create_environment(templates_dir: Path) -> Environment:
    env = Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )

    def format_number(value: int | float | None) -> str:
        if value is None:
            return "0"
        try:
            if isinstance(value, float) and not value.is_integer():
                return f"{value:,.2f}"
            return f"{int(value):,}"
        except (ValueError, TypeError):
            return str(value)

    env.filters["format_number"] = format_number
    return env


def _write_json(path: Path, data: Any) -> None:
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def build_site(
    config: Config,
    collection: FilmCollection,
    output_dir: Path | None = None,
    templates_dir: Path = TEMPLATES_DIR,
) -> dict[str, Any]:
    """Build the static site for a loaded collection.

    Args:
        config: Application configuration.
        collection: Canonical film collection.
        output_dir: Overrides ``config.report.output_dir``.
        templates_dir: Directory containing ``index.html``.

    Returns:
        Build statistics: output path, files written, film and chart counts.
    """
    target = output_dir or config.report.output_dir
    data_dir = target / "data"
    data_dir.mkdir(parents=True, exist_ok=True)

    renderer = SiteRenderer()
    pipeline = ViewPipeline(
        collection,
        renderer,
        state=ViewState(sort=config.view.default_sort),
        top_directors=config.view.top_directors,
    )
    pipeline.initial_render()
    charts = renderer.charts()

    files_written: list[str] = []

    films_path = data_dir / "films.json"
    _write_json(films_path, [row.to_dict() for row in renderer.rows])
    files_written.append(str(films_path))

    charts_path = data_dir / "charts.json"
    _write_json(charts_path, charts)
    files_written.append(str(charts_path))

    env = _create_environment(templates_dir)
    template = env.get_template("index.html")
    html = template.render(
        title=config.report.title,
        rows=[row.to_dict() for row in renderer.rows],
        years=pipeline.year_options(),
        sort_options=[(key.value, label) for key, label in SORT_LABELS.items()],
        default_sort=config.view.default_sort,
        charts_json=json.dumps(charts, ensure_ascii=False).replace("</", "<\\/"),
    )
    index_path = target / "index.html"
    index_path.write_text(html, encoding="utf-8")
    files_written.append(str(index_path))

    logger.info("Built site with %d films at %s", len(renderer.rows), target)

    return {
        "output_dir": str(target),
        "files_written": files_written,
        "films": len(renderer.rows),
        "countries": len(pipeline.chart_series.countries),
        "directors": len(pipeline.chart_series.top_directors),
    }
