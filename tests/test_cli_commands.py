"""Tests for CLI commands (table, charts, build)."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from film_explorer.cli import main


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def config_file(tmp_path: Path, films_file: Path) -> Path:
    """Create a temporary config file pointing at the fixture dataset."""
    config_content = """dataset:
  source: {source}
view:
  default_sort: year-asc
  top_directors: 2
report:
  title: "Test Catalogue"
  output_dir: {site_root}
"""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        config_content.format(source=str(films_file), site_root=str(tmp_path / "site"))
    )
    return config_path


class TestMainGroup:
    """Tests for main CLI group."""

    def test_version_flag(self, runner: CliRunner) -> None:
        """Test that --version shows version information."""
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "film-explorer" in result.output

    def test_help_flag(self, runner: CliRunner) -> None:
        """Test that --help lists the commands."""
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Film Catalogue Explorer" in result.output
        assert "table" in result.output
        assert "charts" in result.output
        assert "build" in result.output

    def test_missing_config_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test a nonexistent --config path is rejected."""
        result = runner.invoke(main, ["--config", str(tmp_path / "nope.yaml"), "table"])
        assert result.exit_code != 0


class TestTableCommand:
    """Tests for the table command."""

    def test_default_order(self, runner: CliRunner, films_file: Path) -> None:
        """Test all films are listed, highest box office first."""
        result = runner.invoke(main, ["table", "--source", str(films_file)])

        assert result.exit_code == 0, result.output
        assert "Showing 5 of 5 films" in result.output
        assert result.output.index("Avatar") < result.output.index("Titanic")

    def test_year_and_search(self, runner: CliRunner, films_file: Path) -> None:
        """Test year and search narrow the table together."""
        result = runner.invoke(
            main, ["table", "--source", str(films_file), "--year", "2019", "--search", "PARA"]
        )

        assert result.exit_code == 0, result.output
        assert "Parasite" in result.output
        assert "Showing 1 of 5 films" in result.output

    def test_no_matches(self, runner: CliRunner, films_file: Path) -> None:
        """Test an empty result is reported, not an error."""
        result = runner.invoke(main, ["table", "--source", str(films_file), "--year", "1900"])

        assert result.exit_code == 0
        assert "No films match" in result.output
        assert "Showing 0 of 5 films" in result.output

    def test_invalid_sort_rejected(self, runner: CliRunner, films_file: Path) -> None:
        """Test unsupported sort keys are refused by the CLI."""
        result = runner.invoke(
            main, ["table", "--source", str(films_file), "--sort", "rating-desc"]
        )

        assert result.exit_code != 0

    def test_config_default_sort(self, runner: CliRunner, config_file: Path) -> None:
        """Test the configured default sort and source are used."""
        result = runner.invoke(main, ["--config", str(config_file), "table"])

        assert result.exit_code == 0, result.output
        assert result.output.index("Titanic") < result.output.index("Avatar")

    def test_load_failure_aborts(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test a missing dataset aborts with an error message."""
        result = runner.invoke(main, ["table", "--source", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "Failed to load films" in result.output

    def test_non_utf8_dataset_aborts(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test an undecodable dataset aborts instead of raising."""
        path = tmp_path / "films.json"
        path.write_bytes(b'[{"title": "Am\xe9lie"}]')

        result = runner.invoke(main, ["table", "--source", str(path)])

        assert result.exit_code == 1
        assert "Failed to load films" in result.output


class TestChartsCommand:
    """Tests for the charts command."""

    def test_charts(self, runner: CliRunner, films_file: Path) -> None:
        """Test country counts and director ranking are printed."""
        result = runner.invoke(main, ["charts", "--source", str(films_file), "--top", "2"])

        assert result.exit_code == 0, result.output
        assert "Films by Country" in result.output
        assert "United States" in result.output
        assert "Top 2 Directors by Revenue" in result.output
        assert "1. James Cameron: $5,188,449,331 (2 films)" in result.output

    def test_top_must_be_positive(self, runner: CliRunner, films_file: Path) -> None:
        """Test --top 0 is rejected."""
        result = runner.invoke(main, ["charts", "--source", str(films_file), "--top", "0"])

        assert result.exit_code != 0


class TestBuildCommand:
    """Tests for the build command."""

    def test_build(self, runner: CliRunner, films_file: Path, tmp_path: Path) -> None:
        """Test the site is written to the output directory."""
        output = tmp_path / "out"

        result = runner.invoke(
            main, ["build", "--source", str(films_file), "--output", str(output)]
        )

        assert result.exit_code == 0, result.output
        assert "Site built successfully!" in result.output
        assert (output / "index.html").exists()
        assert (output / "data" / "films.json").exists()
        assert (output / "data" / "charts.json").exists()

    def test_build_uses_config_output(
        self, runner: CliRunner, config_file: Path, tmp_path: Path
    ) -> None:
        """Test the configured output directory is used."""
        result = runner.invoke(main, ["--config", str(config_file), "build"])

        assert result.exit_code == 0, result.output
        assert (tmp_path / "site" / "index.html").exists()
