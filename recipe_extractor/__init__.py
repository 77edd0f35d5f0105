"""
Recipe Extractor
================

Extracts a canonical recipe record from recipe web pages using
schema.org structured data, OpenGraph metadata and per-site overrides.

Example:
    scraper = get_scraper(html, "https://www.allrecipes.com/recipe/1")
    recipe = await scraper.to_object()
"""

__version__ = "0.1.0"

from recipe_extractor.core import (
    ExtractionFailedError,
    ExtractorNotFoundError,
    FlatIngredients,
    GroupedIngredients,
    LogLevel,
    RecipeData,
    RecipeExtractorError,
    RecipeField,
    UnsupportedSiteError,
)
from recipe_extractor.extraction import ScraperDiagnostics, ScraperOptions, load_options
from recipe_extractor.scraper import RecipeScraper
from recipe_extractor.scrapers import get_scraper, list_hosts, register_site_override, SiteOverride

__all__ = [
    "__version__",
    # Core types
    "ExtractionFailedError",
    "ExtractorNotFoundError",
    "FlatIngredients",
    "GroupedIngredients",
    "LogLevel",
    "RecipeData",
    "RecipeExtractorError",
    "RecipeField",
    "UnsupportedSiteError",
    # Extraction
    "RecipeScraper",
    "ScraperDiagnostics",
    "ScraperOptions",
    "load_options",
    # Site overrides
    "SiteOverride",
    "get_scraper",
    "list_hosts",
    "register_site_override",
]
