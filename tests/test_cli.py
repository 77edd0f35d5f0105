"""Tests for the command line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from conftest import BASE_RECIPE, build_page
from recipe_extractor import __version__
from recipe_extractor.cli.main import app

runner = CliRunner()

URL = "https://www.allrecipes.com/recipe/1/chili"


@pytest.fixture
def page_file(tmp_path: Path) -> Path:
    path = tmp_path / "page.html"
    path.write_text(build_page(body='<a href="https://example.com/more">More</a>'), encoding="utf-8")
    return path


class TestScrapeCommand:
    """Tests for the scrape command."""

    def test_prints_json(self, page_file: Path) -> None:
        """Test the record is printed as JSON."""
        result = runner.invoke(app, ["scrape", str(page_file), "--url", URL])

        assert result.exit_code == 0
        recipe = json.loads(result.stdout)
        assert recipe["title"] == "Weeknight Chili"
        assert recipe["host"] == "allrecipes.com"
        assert recipe["links"] == []

    def test_links(self, page_file: Path) -> None:
        """Test --links enables link collection."""
        result = runner.invoke(app, ["scrape", str(page_file), "-u", URL, "--links"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["links"] == [{"href": "https://example.com/more", "text": "More"}]

    def test_config_file(self, page_file: Path, tmp_path: Path) -> None:
        """Test options are read from a YAML file."""
        config = tmp_path / "options.yaml"
        config.write_text("links_enabled: true\n")

        result = runner.invoke(app, ["scrape", str(page_file), "-u", URL, "--config", str(config)])

        assert result.exit_code == 0
        assert len(json.loads(result.stdout)["links"]) == 1

    def test_report(self, page_file: Path) -> None:
        """Test --report prints the diagnostics table."""
        result = runner.invoke(app, ["scrape", str(page_file), "-u", URL, "--report"])

        assert result.exit_code == 0
        assert "Scraper Diagnostics" in result.output
        assert "SchemaOrgPlugin" in result.output

    def test_plugins(self, page_file: Path) -> None:
        """Test --plugins prints the extractor and post-processor chains."""
        result = runner.invoke(app, ["scrape", str(page_file), "-u", URL, "--plugins"])

        assert result.exit_code == 0
        assert "Plugin Chain" in result.output
        assert "SchemaOrgPlugin" in result.output
        assert "OpenGraphPlugin" in result.output
        assert "HtmlStripper" in result.output
        assert "post_processor" in result.output

    def test_missing_required_field(self, tmp_path: Path) -> None:
        """Test a missing required field exits with status 1."""
        recipe = {key: value for key, value in BASE_RECIPE.items() if key != "author"}
        path = tmp_path / "page.html"
        path.write_text(build_page(recipe), encoding="utf-8")

        result = runner.invoke(app, ["scrape", str(path), "-u", URL])

        assert result.exit_code == 1
        assert "No extractor found for field: author" in result.output

    def test_strict_unknown_host(self, page_file: Path) -> None:
        """Test --strict rejects sites without overrides."""
        result = runner.invoke(app, ["scrape", str(page_file), "-u", "https://example.com/x", "--strict"])

        assert result.exit_code == 2

    def test_unknown_host_lenient(self, page_file: Path) -> None:
        """Test sites without overrides use the generic scraper by default."""
        result = runner.invoke(app, ["scrape", str(page_file), "-u", "https://example.com/x"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["host"] == "example.com"

    def test_invalid_log_level(self, page_file: Path) -> None:
        """Test an unknown log level exits with status 2."""
        result = runner.invoke(app, ["scrape", str(page_file), "-u", URL, "--log-level", "chatty"])

        assert result.exit_code == 2
        assert "Unknown log level" in result.output

    def test_config_not_a_mapping(self, page_file: Path, tmp_path: Path) -> None:
        """Test an options file holding a list exits with status 2."""
        config = tmp_path / "options.yaml"
        config.write_text("- links_enabled\n")

        result = runner.invoke(app, ["scrape", str(page_file), "-u", URL, "--config", str(config)])

        assert result.exit_code == 2
        assert "must contain a mapping" in result.output

    def test_missing_config(self, page_file: Path, tmp_path: Path) -> None:
        """Test a missing options file exits with status 2."""
        result = runner.invoke(
            app, ["scrape", str(page_file), "-u", URL, "--config", str(tmp_path / "missing.yaml")]
        )

        assert result.exit_code == 2


class TestOtherCommands:
    """Tests for the hosts and version commands."""

    def test_hosts(self) -> None:
        """Test registered hosts are listed."""
        result = runner.invoke(app, ["hosts"])

        assert result.exit_code == 0
        assert "allrecipes.com" in result.output
        assert "Supported Sites" in result.output

    def test_version(self) -> None:
        """Test the version is printed."""
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert f"v{__version__}" in result.output
