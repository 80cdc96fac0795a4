"""CLI entry point for film-explorer.

Commands:
- table: Print the filtered and sorted film table
- charts: Print the country distribution and top directors
- build: Build the static HTML page
"""

import asyncio
from pathlib import Path

import click
from rich.console import Console

from film_explorer import __version__
from film_explorer.config import Config, load_config
from film_explorer.dataset.loader import DatasetLoadError, load_films
from film_explorer.logging import setup_logging
from film_explorer.models import FilmCollection
from film_explorer.pipeline import ViewPipeline, ViewState
from film_explorer.report.console import ConsoleRenderer
from film_explorer.sorting import SortKey

console = Console()

SORT_CHOICES = [key.value for key in SortKey]


@click.group()
@click.version_option(version=__version__, prog_name="film-explorer")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable verbose output")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to config.yaml file",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config: Path | None) -> None:
    """Film Catalogue Explorer.

    Browse a film dataset as a filterable, sortable table and summarize it
    by country and by top-grossing directors.

    \b
    Quick Start:
        film-explorer table --source films.json --year 2019
        film-explorer charts --source films.json
        film-explorer build --source films.json --output site
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging(verbose=verbose)
    ctx.obj["config"] = load_config(config) if config else Config()


def _load(ctx: click.Context, source: str | None) -> FilmCollection:
    """Load the dataset or abort with a readable error."""
    cfg: Config = ctx.obj["config"]
    try:
        return asyncio.run(
            load_films(source or cfg.dataset.source, timeout=cfg.dataset.timeout_seconds)
        )
    except DatasetLoadError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise click.Abort() from e


source_option = click.option(
    "--source",
    "-s",
    type=str,
    default=None,
    help="Dataset JSON path or URL (overrides config)",
)


@main.command()
@source_option
@click.option("--year", type=str, default=None, help="Only films released in this year")
@click.option("--search", type=str, default=None, help="Case-insensitive title search")
@click.option(
    "--sort",
    "sort_key",
    type=click.Choice(SORT_CHOICES),
    default=None,
    help="Sort order (default from config, box-desc)",
)
@click.pass_context
def table(
    ctx: click.Context,
    source: str | None,
    year: str | None,
    search: str | None,
    sort_key: str | None,
) -> None:
    """Print the film table.

    Filters combine: a film must match both the year and the search text.
    """
    cfg: Config = ctx.obj["config"]
    collection = _load(ctx, source)

    pipeline = ViewPipeline(
        collection,
        ConsoleRenderer(console, title=cfg.report.title),
        state=ViewState(year=year, search=search, sort=sort_key or cfg.view.default_sort),
        top_directors=cfg.view.top_directors,
    )
    rows = pipeline.refresh()

    console.print(f"\n  Showing {len(rows)} of {len(collection)} films")


@main.command()
@source_option
@click.option("--top", type=click.IntRange(min=1), default=None, help="Number of directors")
@click.pass_context
def charts(ctx: click.Context, source: str | None, top: int | None) -> None:
    """Print the country distribution and top directors by revenue.

    Always summarizes the whole dataset.
    """
    cfg: Config = ctx.obj["config"]
    collection = _load(ctx, source)

    renderer = ConsoleRenderer(console)
    pipeline = ViewPipeline(
        collection,
        renderer,
        top_directors=top or cfg.view.top_directors,
    )
    series = pipeline.chart_series
    renderer.render_country_chart(series.countries)
    console.print()
    renderer.render_director_chart(series.top_directors)


@main.command()
@source_option
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Output directory (overrides config)",
)
@click.pass_context
def build(ctx: click.Context, source: str | None, output: Path | None) -> None:
    """Build the static HTML page.

    Writes index.html plus data/films.json and data/charts.json.
    """
    from film_explorer.report.build import build_site

    cfg: Config = ctx.obj["config"]
    collection = _load(ctx, source)

    console.print("[bold cyan]Building static site...[/bold cyan]")

    try:
        stats = build_site(cfg, collection, output_dir=output)
    except Exception as e:
        console.print(f"\n[bold red]Build failed:[/bold red] {e}")
        if ctx.obj.get("verbose"):
            import traceback

            console.print("\n[dim]Traceback:[/dim]")
            console.print(traceback.format_exc())
        raise click.Abort() from e

    console.print()
    console.print("[bold green]Site built successfully![/bold green]")
    console.print(f"  Films: {stats['films']}")
    console.print(f"  Files written: {len(stats['files_written'])}")
    console.print(f"  Output: {stats['output_dir']}")
    console.print()
    console.print("[bold]To view the site:[/bold]")
    console.print(f"  python -m http.server -d {stats['output_dir']}")


if __name__ == "__main__":
    main()
