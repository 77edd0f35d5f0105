"""
Recipe Scraper Module
=====================

Orchestrates extraction of a full recipe record from one HTML document:
builds the plugin chains, runs every field through the extraction engine
and post-processors, and assembles (and caches) the record.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

from recipe_extractor.core.enums import RecipeField
from recipe_extractor.core.log import ScraperLogger
from recipe_extractor.core.schema import LinkRecord, RecipeData
from recipe_extractor.extraction.config import ScraperOptions, get_default_options
from recipe_extractor.extraction.diagnostics import ScraperDiagnostics
from recipe_extractor.extraction.engine import RecipeExtractor, resolve
from recipe_extractor.extraction.registry import PluginManager
from recipe_extractor.plugins import (
    ExtractorPlugin,
    HtmlStripperPlugin,
    OpenGraphPlugin,
    PostProcessorPlugin,
    SchemaOrgPlugin,
)

if TYPE_CHECKING:
    from recipe_extractor.scrapers.base import SiteOverride

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


def normalize_base_url(url: str) -> str:
    """Prefix scheme-less URLs with https://."""
    return url if url.startswith("http") else f"https://{url}"


class RecipeScraper:
    """
    Extracts a recipe record from one document.

    One instance owns one document, its plugin chains and its
    diagnostics ledger; nothing is shared between instances.

    Example:
        scraper = RecipeScraper(html, "https://www.allrecipes.com/recipe/1")
        record = await scraper.to_object()
    """

    def __init__(
        self,
        html: str,
        url: str,
        options: ScraperOptions | None = None,
        site_override: SiteOverride | None = None,
    ) -> None:
        """
        Initialize the scraper.

        Args:
            html: Raw HTML of the page
            url: URL the page was fetched from
            options: Run options (defaults from get_default_options())
            site_override: Field overrides for the page's site
        """
        self.html = html
        self.url = url
        self.options = options if options is not None else get_default_options()
        self.site_override = site_override
        self.name = site_override.name if site_override else self.__class__.__name__

        self.log = ScraperLogger(logger, self.name, self.options.log_level)
        self.soup = BeautifulSoup(html or "", "lxml")
        self.diagnostics = ScraperDiagnostics()

        base_extractors: list[ExtractorPlugin] = [
            OpenGraphPlugin(self.soup, self.log.child(OpenGraphPlugin.name)),
            SchemaOrgPlugin(self.soup, self.log.child(SchemaOrgPlugin.name)),
        ]
        base_post_processors: list[PostProcessorPlugin] = [HtmlStripperPlugin()]

        self.plugin_manager = PluginManager(
            base_extractors,
            base_post_processors,
            self.options.build_extractors(self.soup),
            self.options.build_post_processors(),
        )
        self.recipe_extractor = RecipeExtractor(
            self.plugin_manager.get_extractors(),
            self.name,
            diagnostics=self.diagnostics,
            log_level=self.options.log_level,
        )

        self._recipe_data: RecipeData | None = None

    async def extract(self, field: RecipeField) -> Any:
        """
        Resolve one field, then run the post-processors over it.

        Raises:
            ExtractorNotFoundError: If a required field has no value
        """
        field = RecipeField(field)
        override = self.site_override.get_extractor(field) if self.site_override else None
        site_extractor = functools.partial(override, self) if override else None

        value = await self.recipe_extractor.extract(field, site_extractor)

        for processor in self.plugin_manager.get_post_processors():
            if processor.should_process(field):
                value = await resolve(processor.process(field, value))

        return value

    @property
    def host(self) -> str:
        """
        The site override's host, else the host of the page URL.

        Raises:
            ValueError: If the page URL has no host
        """
        if self.site_override:
            return self.site_override.host

        host = urlparse(normalize_base_url(self.url)).hostname
        if not host:
            raise ValueError(f"Invalid URL: {self.url!r}")
        return host

    def canonical_url(self) -> str:
        """The page's canonical link resolved against its URL."""
        base = normalize_base_url(self.url)
        link = self.soup.select_one('link[rel="canonical"][href]')
        href = (link.get("href") or "").strip() if link else ""
        return urljoin(base, href) if href else base

    def language(self) -> str:
        """The document language from <html lang> or a content-language meta tag."""
        html_tag = self.soup.find("html")
        lang = html_tag.get("lang") if html_tag else None
        if lang:
            return lang

        meta = self.soup.select_one('meta[http-equiv="content-language"][content]')
        if meta:
            meta_lang = meta["content"].split(",")[0].strip()
            if meta_lang:
                return meta_lang

        self.log.warning("Could not determine language")
        return DEFAULT_LANGUAGE

    def links(self) -> list[LinkRecord]:
        """Absolute outbound links, when link collection is enabled."""
        if not self.options.links_enabled:
            return []

        links = []
        for anchor in self.soup.select("a[href]"):
            href = anchor["href"]
            if href.startswith("http"):
                links.append(LinkRecord(href=href, text=anchor.get_text().strip()))
        return links

    async def scrape(self) -> RecipeData:
        """
        Extract every field and cache the assembled record.

        Raises:
            ExtractorNotFoundError: If any required field has no value
        """
        if self._recipe_data is not None:
            return self._recipe_data

        self._recipe_data = RecipeData(
            author=await self.extract(RecipeField.AUTHOR),
            canonical_url=self.canonical_url(),
            category=tuple(await self.extract(RecipeField.CATEGORY)),
            cook_time=await self.extract(RecipeField.COOK_TIME),
            cooking_method=await self.extract(RecipeField.COOKING_METHOD),
            cuisine=tuple(await self.extract(RecipeField.CUISINE)),
            description=await self.extract(RecipeField.DESCRIPTION),
            dietary_restrictions=tuple(await self.extract(RecipeField.DIETARY_RESTRICTIONS)),
            equipment=tuple(await self.extract(RecipeField.EQUIPMENT)),
            host=self.host,
            image=await self.extract(RecipeField.IMAGE),
            ingredients=await self.extract(RecipeField.INGREDIENTS),
            instructions=tuple(await self.extract(RecipeField.INSTRUCTIONS)),
            keywords=tuple(await self.extract(RecipeField.KEYWORDS)),
            language=self.language(),
            links=self.links(),
            nutrients=dict(await self.extract(RecipeField.NUTRIENTS)),
            prep_time=await self.extract(RecipeField.PREP_TIME),
            ratings=await self.extract(RecipeField.RATINGS),
            ratings_count=await self.extract(RecipeField.RATINGS_COUNT),
            reviews=dict(await self.extract(RecipeField.REVIEWS)),
            site_name=await self.extract(RecipeField.SITE_NAME),
            title=await self.extract(RecipeField.TITLE),
            total_time=await self.extract(RecipeField.TOTAL_TIME),
            yields=await self.extract(RecipeField.YIELDS),
        )

        return self._recipe_data

    async def to_object(self) -> dict[str, Any]:
        """The scraped record as a JSON-serializable dict with camelCase keys."""
        recipe = await self.scrape()
        return recipe.to_object()
