"""
Extraction Engine Module
========================

Resolves one recipe field at a time:

1. Plugins in priority order; the first one to produce a value wins
2. The site override, which receives the plugin result
3. The documented default for optional fields
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Union

from recipe_extractor.core.constants import default_value, is_optional_field
from recipe_extractor.core.enums import LogLevel, RecipeField
from recipe_extractor.core.exceptions import ExtractorNotFoundError
from recipe_extractor.core.log import ScraperLogger
from recipe_extractor.extraction.diagnostics import ScraperDiagnostics
from recipe_extractor.extraction.registry import sort_by_priority
from recipe_extractor.plugins.base import ExtractorPlugin

logger = logging.getLogger(__name__)

SiteExtractor = Callable[[Any], Union[Any, Awaitable[Any]]]


async def resolve(value: Any) -> Any:
    """Await ``value`` if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value


def is_empty(value: Any) -> bool:
    """None and empty containers/strings count as "no value" for defaults."""
    if value is None:
        return True
    if isinstance(value, (bool, int, float)):
        return False
    try:
        return len(value) == 0
    except TypeError:
        return False


class RecipeExtractor:
    """
    Runs the plugin chain, site override and defaults for a field.

    Plugin and override failures are recorded in the diagnostics ledger
    and never interrupt extraction; only a field left without any value
    raises ExtractorNotFoundError.
    """

    def __init__(
        self,
        plugins: Sequence[ExtractorPlugin],
        scraper_name: str,
        diagnostics: ScraperDiagnostics | None = None,
        log_level: LogLevel = LogLevel.WARN,
    ) -> None:
        """
        Initialize the engine.

        Args:
            plugins: Extractor plugins (re-sorted by descending priority)
            scraper_name: Name failures of the site override are recorded under
            diagnostics: Ledger to record attempts in
            log_level: Verbosity threshold for this run
        """
        self.plugins = sort_by_priority(plugins)
        self.scraper_name = scraper_name
        self.diagnostics = diagnostics if diagnostics is not None else ScraperDiagnostics()
        self.log = ScraperLogger(logger, f"{scraper_name}.RecipeExtractor", log_level)

    async def extract(self, field: RecipeField, extractor: SiteExtractor | None = None) -> Any:
        """
        Extract a single field.

        Args:
            field: The field to extract
            extractor: Optional site override, called with the plugin result
                (None if no plugin produced one)

        Returns:
            The resolved value

        Raises:
            ExtractorNotFoundError: If a required field has no value
        """
        field = RecipeField(field)
        result: Any = None

        self.log.debug("Extracting field: %s", field)

        for plugin in self.plugins:
            plugin_log = self.log.child(plugin.name)

            if result is not None or not plugin.supports(field):
                plugin_log.verbose("Skipping field: %s", field)
                continue

            try:
                result = await resolve(plugin.extract(field))
            except Exception as e:
                plugin_log.debug("Failed to extract %s: %s", field, e)
                self.diagnostics.record_failure(plugin.name, field, e)
                continue

            if result is not None:
                self.diagnostics.record_success(plugin.name, field)

        if extractor is not None:
            self.log.debug("Using site-specific extractor for: %s", field)
            self.log.verbose("Current result: %r", result)

            try:
                result = await resolve(extractor(result))
                self.log.verbose("Site result for %s: %r", field, result)
                if result is not None:
                    self.diagnostics.record_success(self.scraper_name, field)
            except Exception as e:
                self.log.error("Site extractor failed for %s: %s", field, e)
                self.diagnostics.record_failure(self.scraper_name, field, e)

        if is_empty(result) and is_optional_field(field):
            self.log.debug("Using default value for: %s", field)
            return default_value(field)

        if result is not None:
            return result

        raise ExtractorNotFoundError(field)
