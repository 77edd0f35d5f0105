"""cooking.nytimes.com: ingredient groups from generated class names."""

from __future__ import annotations

from recipe_extractor.core.enums import RecipeField
from recipe_extractor.core.schema import FlatIngredients, Ingredients
from recipe_extractor.extraction.grouping import group_ingredients
from recipe_extractor.scrapers.base import SiteOverride

# Class names carry a generated suffix, so match on a substring of the class attribute
HEADING_SELECTOR = 'h3[class*="ingredientgroup_name"]'
INGREDIENT_SELECTOR = 'li[class*="ingredient"]'


def ingredients(scraper, previous: Ingredients | None) -> Ingredients:
    if isinstance(previous, FlatIngredients) and previous:
        return group_ingredients(scraper.soup, previous, HEADING_SELECTOR, INGREDIENT_SELECTOR, scraper.log)
    raise ValueError("No ingredients found to group")


NYTIMES = SiteOverride(
    host="cooking.nytimes.com",
    name="NYTimes",
    extractors={RecipeField.INGREDIENTS: ingredients},
)
