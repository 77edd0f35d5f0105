"""Recipe Extractor CLI using Typer."""

import asyncio
import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from recipe_extractor import __version__
from recipe_extractor.core.enums import LogLevel
from recipe_extractor.core.exceptions import ExtractorNotFoundError, UnsupportedSiteError
from recipe_extractor.extraction.config import get_default_options, load_options
from recipe_extractor.extraction.diagnostics import ScraperDiagnostics
from recipe_extractor.extraction.registry import PluginManager
from recipe_extractor.scrapers import get_scraper, get_site_override, list_hosts

# Load .env file from current directory or project root
_env_paths = [
    Path.cwd() / ".env",
    Path(__file__).parent.parent.parent / ".env",
]
for _env_path in _env_paths:
    if _env_path.exists():
        load_dotenv(_env_path)
        break

err_console = Console(stderr=True)

app = typer.Typer(
    name="recipe-extractor",
    help="Recipe Extractor - Extract structured recipe data from HTML pages",
    add_completion=False,
)


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _print_report(diagnostics: ScraperDiagnostics) -> None:
    table = Table(title="Scraper Diagnostics")
    table.add_column("Field", style="bold")
    table.add_column("Source")
    table.add_column("Status")
    table.add_column("Error")

    for attempt in diagnostics.attempts():
        status = "[green]ok[/green]" if attempt.success else "[red]failed[/red]"
        error = "" if attempt.success else str(attempt.error)
        table.add_row(attempt.field, attempt.source, status, error)

    err_console.print(table)


def _print_plugins(manager: PluginManager) -> None:
    table = Table(title="Plugin Chain")
    table.add_column("Kind", style="bold")
    table.add_column("Plugin")
    table.add_column("Priority", justify="right")

    for info in manager.list_plugins():
        table.add_row(info["kind"], info["name"], info["priority"])

    err_console.print(table)


@app.command()
def scrape(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="HTML file to extract from"),
    url: str = typer.Option(..., "--url", "-u", help="URL the page was fetched from"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML options file"),
    links: bool = typer.Option(False, "--links", help="Collect outbound links"),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", "-l", help="VERBOSE, DEBUG, INFO, WARN or ERROR"
    ),
    report: bool = typer.Option(False, "--report", "-r", help="Print the diagnostics report"),
    plugins: bool = typer.Option(False, "--plugins", help="Print the plugin chain"),
    strict: bool = typer.Option(False, "--strict", help="Fail for sites without overrides"),
) -> None:
    """
    Extract a recipe from a saved HTML page and print it as JSON.

    Examples:
        recipe-extractor scrape page.html --url=https://www.allrecipes.com/recipe/1
        recipe-extractor scrape page.html -u cooking.nytimes.com/recipes/1 --report
    """
    try:
        options = load_options(config) if config else get_default_options()
        options = replace(
            options,
            links_enabled=options.links_enabled or links,
            log_level=LogLevel.parse(log_level) if log_level else options.log_level,
        )
    except (FileNotFoundError, ValueError) as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    _configure_logging(options.log_level)

    try:
        scraper = get_scraper(path.read_text(encoding="utf-8"), url, options=options, strict=strict)
    except (UnsupportedSiteError, ValueError) as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    if plugins:
        _print_plugins(scraper.plugin_manager)

    try:
        recipe = asyncio.run(scraper.to_object())
    except ExtractorNotFoundError as e:
        rprint(f"[red]Error:[/red] {e}")
        if report:
            _print_report(scraper.diagnostics)
        raise typer.Exit(1)

    typer.echo(json.dumps(recipe, indent=2, ensure_ascii=False))

    if report:
        _print_report(scraper.diagnostics)


@app.command()
def hosts() -> None:
    """List sites with registered overrides."""
    table = Table(title="Supported Sites")
    table.add_column("Host", style="bold")
    table.add_column("Name")
    table.add_column("Overridden Fields")

    for host in list_hosts():
        info = get_site_override(host).get_info()
        table.add_row(info["host"], info["name"], info["fields"] or "-")

    Console().print(table)


@app.command()
def version() -> None:
    """Show the Recipe Extractor version."""
    typer.echo(f"Recipe Extractor v{__version__}")


if __name__ == "__main__":
    app()
