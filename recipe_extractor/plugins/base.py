"""
Plugin Base Module
==================

Defines the abstract base classes for extraction plugins.

Extractor plugins answer "do I support field F" and "extract field F"
from a parsed document. Post-processor plugins transform a field's value
after it has been fully resolved.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

from bs4 import BeautifulSoup

from recipe_extractor.core.enums import RecipeField
from recipe_extractor.core.exceptions import UnsupportedFieldError
from recipe_extractor.core.log import ScraperLogger


class ExtractorPlugin(ABC):
    """
    Abstract base class for field extractor plugins.

    Subclasses must define ``name`` and ``priority`` and implement:
    - supports: Whether the plugin can extract a field
    - extract: Produce the field value (may be a coroutine function)

    Higher priority plugins run first.
    """

    name: str = "ExtractorPlugin"
    priority: int = 0

    def __init__(self, soup: BeautifulSoup, log: ScraperLogger | None = None) -> None:
        """
        Initialize the plugin.

        Args:
            soup: The parsed document to extract from
            log: Logger of the scraper run (defaults to the plugin module logger)
        """
        self.soup = soup
        self.log = log if log is not None else ScraperLogger(logging.getLogger(type(self).__module__), self.name)

    @abstractmethod
    def supports(self, field: RecipeField) -> bool:
        """Whether this plugin can extract the given field."""

    @abstractmethod
    def extract(self, field: RecipeField) -> Any | Awaitable[Any]:
        """
        Extract the field from the document.

        Raises:
            ExtractionFailedError: If no valid value is present
            UnsupportedFieldError: If the field is not supported
        """

    def get_info(self) -> dict[str, str]:
        """Get plugin information."""
        return {
            "name": self.name,
            "priority": str(self.priority),
            "class": self.__class__.__name__,
        }


class TableExtractorPlugin(ExtractorPlugin):
    """
    Extractor plugin backed by a fixed field -> method dispatch table.

    ``supports`` is a membership check against the table's keys.
    """

    def __init__(self, soup: BeautifulSoup, log: ScraperLogger | None = None) -> None:
        super().__init__(soup, log)
        self._extractors: dict[RecipeField, Callable[[], Any]] = self.build_extractors()

    @abstractmethod
    def build_extractors(self) -> dict[RecipeField, Callable[[], Any]]:
        """Return the dispatch table for this plugin."""

    def supports(self, field: RecipeField) -> bool:
        return field in self._extractors

    def extract(self, field: RecipeField) -> Any:
        extractor = self._extractors.get(field)
        if extractor is None:
            raise UnsupportedFieldError(field)
        return extractor()


class PostProcessorPlugin(ABC):
    """
    Abstract base class for value post-processors.

    Post-processors run after a field's value is fully resolved, in
    descending priority order.
    """

    name: str = "PostProcessorPlugin"
    priority: int = 0

    @abstractmethod
    def should_process(self, field: RecipeField) -> bool:
        """Whether this processor applies to the given field."""

    @abstractmethod
    def process(self, field: RecipeField, value: Any) -> Any | Awaitable[Any]:
        """Transform a resolved field value."""
