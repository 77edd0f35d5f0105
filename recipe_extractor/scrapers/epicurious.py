"""epicurious.com: author from the byline link."""

from __future__ import annotations

from recipe_extractor.core.enums import RecipeField
from recipe_extractor.extraction.normalizer import normalize_string
from recipe_extractor.scrapers.base import SiteOverride


def author(scraper, previous: str | None) -> str | None:
    byline = scraper.soup.select_one('a[itemprop="author"]')
    name = normalize_string(byline.get_text()) if byline else ""
    return name or previous


EPICURIOUS = SiteOverride(
    host="epicurious.com",
    name="Epicurious",
    extractors={RecipeField.AUTHOR: author},
)
