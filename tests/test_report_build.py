"""Tests for the static site build."""

import json
from pathlib import Path

import pytest

from film_explorer.config import Config
from film_explorer.metrics.aggregations import DirectorRevenue
from film_explorer.models import FilmCollection
from film_explorer.report.build import SiteRenderer, build_site

from conftest import make_film


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config.model_validate(
        {
            "report": {"title": "Test Films", "output_dir": str(tmp_path / "site")},
            "view": {"top_directors": 3},
        }
    )


class TestSiteRenderer:
    """Tests for SiteRenderer chart slots."""

    def test_rerender_replaces_chart(self) -> None:
        """Test a second render releases the first chart config."""
        renderer = SiteRenderer()

        renderer.render_country_chart({"US": 1})
        renderer.render_country_chart({"FR": 2})

        assert renderer.country_chart.current["data"]["labels"] == ["FR"]
        assert renderer.charts()["country-chart"]["data"]["labels"] == ["FR"]
        assert renderer.director_chart.current is None

    def test_charts_before_render(self) -> None:
        """Test empty slots before anything is rendered."""
        assert SiteRenderer().charts() == {"country-chart": None, "top-directors-chart": None}

    def test_director_chart(self) -> None:
        """Test director chart slot is filled."""
        renderer = SiteRenderer()

        renderer.render_director_chart([DirectorRevenue("X", 300, 2)])

        assert renderer.charts()["top-directors-chart"]["tooltipLabels"] == ["X: $300 (2 films)"]


class TestBuildSite:
    """Tests for build_site."""

    def test_writes_site(self, config: Config, catalogue: FilmCollection) -> None:
        """Test index.html and data files are written."""
        stats = build_site(config, catalogue)

        site = config.report.output_dir
        assert stats["films"] == 8
        assert stats["countries"] == 5
        assert stats["directors"] == 3
        assert len(stats["files_written"]) == 3
        assert (site / "index.html").exists()

    def test_films_json_default_order(self, config: Config, catalogue: FilmCollection) -> None:
        """Test exported rows are ranked box office descending."""
        build_site(config, catalogue)

        rows = json.loads((config.report.output_dir / "data" / "films.json").read_text())
        assert [row["rank"] for row in rows] == list(range(1, 9))
        assert rows[0]["title"] == "Avatar"
        assert rows[0]["box_office_display"] == "$2,923,706,026"

    def test_charts_json(self, config: Config, abc_films: FilmCollection) -> None:
        """Test chart data covers the whole collection."""
        build_site(config, abc_films)

        charts = json.loads((config.report.output_dir / "data" / "charts.json").read_text())
        assert charts["country-chart"]["data"]["labels"] == ["US", "FR"]
        assert charts["country-chart"]["data"]["datasets"][0]["data"] == [2, 1]
        assert charts["top-directors-chart"]["data"]["labels"] == ["X", "Y"]

    def test_index_html(self, config: Config, catalogue: FilmCollection) -> None:
        """Test the page shows the title, rows and chart canvases."""
        build_site(config, catalogue)

        html = (config.report.output_dir / "index.html").read_text(encoding="utf-8")
        assert "<title>Test Films</title>" in html
        assert "Spirited Away" in html
        assert "$2,923,706,026" in html
        assert 'id="country-chart"' in html
        assert 'id="top-directors-chart"' in html
        assert "between 1997 and 2019" in html

    def test_index_html_controls(self, config: Config, catalogue: FilmCollection) -> None:
        """Test the page carries the year, search and sort controls."""
        build_site(config, catalogue)

        html = (config.report.output_dir / "index.html").read_text(encoding="utf-8")
        assert 'id="year-filter"' in html
        assert '<option value="">Select Year</option>' in html
        for year in catalogue.release_years():
            assert f'<option value="{year}">{year}</option>' in html
        assert html.count('<option value="2019">') == 1
        assert 'id="search-input"' in html
        assert 'id="sort-filter"' in html
        for key in ("title-asc", "title-desc", "year-asc", "year-desc", "box-asc"):
            assert f'<option value="{key}">' in html
        assert '<option value="box-desc" selected>' in html
        assert "data/films.json" in html

    def test_index_html_default_sort_from_config(
        self, config: Config, abc_films: FilmCollection
    ) -> None:
        """Test the sort control preselects the configured order."""
        config.view.default_sort = "year-asc"

        build_site(config, abc_films)

        html = (config.report.output_dir / "index.html").read_text(encoding="utf-8")
        assert '<option value="year-asc" selected>' in html
        assert '<option value="box-desc">' in html

    def test_html_is_escaped(self, config: Config) -> None:
        """Test markup in film data cannot break out of the page."""
        films = FilmCollection(
            [make_film("<script>alert(1)</script>", 2000, "</script>", 10, "US")]
        )

        build_site(config, films)

        html = (config.report.output_dir / "index.html").read_text(encoding="utf-8")
        assert "<script>alert(1)</script>" not in html
        assert html.count("</script>") == 2

    def test_output_dir_override(
        self, config: Config, abc_films: FilmCollection, tmp_path: Path
    ) -> None:
        """Test output_dir argument wins over config."""
        target = tmp_path / "elsewhere"

        stats = build_site(config, abc_films, output_dir=target)

        assert stats["output_dir"] == str(target)
        assert (target / "index.html").exists()

    def test_empty_collection(self, config: Config) -> None:
        """Test an empty dataset still builds a page."""
        stats = build_site(config, FilmCollection())

        assert stats["films"] == 0
        html = (config.report.output_dir / "index.html").read_text(encoding="utf-8")
        assert "No films." in html
