"""
Site Override Registry
======================

Central registry of per-site field overrides, keyed by host.
Provides the factory that builds a scraper for a page URL.
"""

from __future__ import annotations

from urllib.parse import urlparse

from recipe_extractor.core.exceptions import UnsupportedSiteError
from recipe_extractor.extraction.config import ScraperOptions
from recipe_extractor.scraper import RecipeScraper
from recipe_extractor.scrapers.allrecipes import ALLRECIPES
from recipe_extractor.scrapers.americastestkitchen import AMERICAS_TEST_KITCHEN
from recipe_extractor.scrapers.base import FieldOverride, SiteOverride
from recipe_extractor.scrapers.bbcgoodfood import BBC_GOOD_FOOD
from recipe_extractor.scrapers.epicurious import EPICURIOUS
from recipe_extractor.scrapers.nytimes import NYTIMES
from recipe_extractor.scrapers.simplyrecipes import SIMPLY_RECIPES

# Registry mapping hosts to their site overrides
SITE_OVERRIDES: dict[str, SiteOverride] = {
    override.host: override
    for override in (
        ALLRECIPES,
        AMERICAS_TEST_KITCHEN,
        BBC_GOOD_FOOD,
        EPICURIOUS,
        NYTIMES,
        SIMPLY_RECIPES,
    )
}


def get_host(url: str) -> str:
    """
    Get the registry host for a URL ("https://www.epicurious.com/x" -> "epicurious.com").

    Raises:
        ValueError: If the URL has no host
    """
    candidate = url.strip()
    if "://" not in candidate:
        candidate = f"https://{candidate}"

    host = urlparse(candidate).hostname
    if not host:
        raise ValueError(f"Invalid URL: {url!r}")

    return host[4:] if host.startswith("www.") else host


def get_site_override(host: str) -> SiteOverride | None:
    """
    Get the site override registered for a host.

    Args:
        host: Site host, with or without a leading "www."

    Returns:
        SiteOverride if registered, None otherwise
    """
    host = host.lower()
    return SITE_OVERRIDES.get(host[4:] if host.startswith("www.") else host)


def register_site_override(override: SiteOverride) -> None:
    """
    Register a site override, replacing any existing one for its host.

    Args:
        override: The override to register
    """
    if not isinstance(override, SiteOverride):
        raise TypeError(f"{override!r} must be a SiteOverride")
    SITE_OVERRIDES[override.host] = override


def list_hosts() -> list[str]:
    """
    List all registered hosts.

    Returns:
        Sorted list of hosts
    """
    return sorted(SITE_OVERRIDES)


def get_scraper(
    html: str,
    url: str,
    options: ScraperOptions | None = None,
    strict: bool = True,
) -> RecipeScraper:
    """
    Build a scraper for a page, with its site's overrides when registered.

    Args:
        html: Raw HTML of the page
        url: URL the page was fetched from
        options: Run options
        strict: Reject hosts without a registered override

    Returns:
        RecipeScraper for the page

    Raises:
        ValueError: If the URL is invalid
        UnsupportedSiteError: If strict and the host is not registered
    """
    host = get_host(url)
    override = get_site_override(host)

    if override is None and strict:
        raise UnsupportedSiteError(host)

    return RecipeScraper(html, url, options=options, site_override=override)


__all__ = [
    # Registry functions
    "get_host",
    "get_scraper",
    "get_site_override",
    "list_hosts",
    "register_site_override",
    "SITE_OVERRIDES",
    # Base types
    "FieldOverride",
    "SiteOverride",
]
