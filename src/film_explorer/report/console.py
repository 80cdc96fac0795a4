"""Terminal renderer for the CLI."""

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from film_explorer.metrics.aggregations import DirectorRevenue
from film_explorer.report.transformers.charts import director_tooltip_label
from film_explorer.report.views.table_view import TableRow


class ConsoleRenderer:
    """Render the film table and chart summaries with rich."""

    def __init__(self, console: Console | None = None, title: str = "Films") -> None:
        self.console = console or Console()
        self.title = title

    def render_table(self, rows: Sequence[TableRow]) -> None:
        if not rows:
            self.console.print("[yellow]No films match the current filters.[/yellow]")
            return

        table = Table(title=self.title)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Title", style="bold")
        table.add_column("Year", justify="right")
        table.add_column("Director")
        table.add_column("Box Office", justify="right", style="green")
        table.add_column("Country")

        for row in rows:
            table.add_row(
                str(row.rank),
                row.film.title,
                str(row.film.release_year),
                row.film.director,
                row.box_office_display,
                row.film.country,
            )

        self.console.print(table)

    def render_country_chart(self, series: dict[str, int]) -> None:
        table = Table(title="Films by Country")
        table.add_column("Country")
        table.add_column("Films", justify="right")
        for country, count in series.items():
            table.add_row(country, str(count))
        self.console.print(table)

    def render_director_chart(self, series: Sequence[DirectorRevenue]) -> None:
        self.console.print(f"[bold]Top {len(series)} Directors by Revenue[/bold]")
        for position, entry in enumerate(series, 1):
            self.console.print(f"  {position}. {director_tooltip_label(entry)}")
