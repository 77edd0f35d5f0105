"""bbcgoodfood.com: ingredients regrouped by the recipe card's subheadings."""

from __future__ import annotations

from recipe_extractor.core.enums import RecipeField
from recipe_extractor.core.schema import FlatIngredients, Ingredients
from recipe_extractor.extraction.grouping import group_ingredients
from recipe_extractor.scrapers.base import SiteOverride

HEADING_SELECTOR = ".recipe__ingredients h3"
INGREDIENT_SELECTOR = ".recipe__ingredients li"


def ingredients(scraper, previous: Ingredients | None) -> Ingredients:
    if isinstance(previous, FlatIngredients) and previous:
        return group_ingredients(scraper.soup, previous, HEADING_SELECTOR, INGREDIENT_SELECTOR, scraper.log)
    raise ValueError("No ingredients found to group")


BBC_GOOD_FOOD = SiteOverride(
    host="bbcgoodfood.com",
    name="BBCGoodFood",
    extractors={RecipeField.INGREDIENTS: ingredients},
)
