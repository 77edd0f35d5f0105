"""OpenGraph meta tag extractor plugin."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from recipe_extractor.core.enums import RecipeField
from recipe_extractor.core.exceptions import ExtractionFailedError
from recipe_extractor.plugins.base import TableExtractorPlugin


class OpenGraphError(ExtractionFailedError):
    """No usable OpenGraph value for a field."""


class OpenGraphPlugin(TableExtractorPlugin):
    """Falls back to ``og:*`` meta tags for the site name and lead image."""

    name = "OpenGraphPlugin"
    priority = 60

    def build_extractors(self) -> dict[RecipeField, Callable[[], Any]]:
        return {
            RecipeField.IMAGE: self.image,
            RecipeField.SITE_NAME: self.site_name,
        }

    def _meta_content(self, selector: str) -> str:
        tag = self.soup.select_one(selector)
        if tag is None:
            return ""
        return (tag.get("content") or "").strip()

    def site_name(self) -> str:
        site_name = self._meta_content('meta[property="og:site_name"]') or self._meta_content(
            'meta[name="og:site_name"]'
        )

        if not site_name:
            raise OpenGraphError(RecipeField.SITE_NAME)

        return site_name

    def image(self) -> str:
        image = self._meta_content('meta[property="og:image"][content]')

        if not image.startswith("http"):
            raise OpenGraphError(RecipeField.IMAGE, image or None)

        return image
