"""simplyrecipes.com: instructions from the step list."""

from __future__ import annotations

import copy

from recipe_extractor.core.enums import RecipeField
from recipe_extractor.core.schema import unique_list
from recipe_extractor.extraction.normalizer import normalize_string
from recipe_extractor.scrapers.base import SiteOverride

STEP_SELECTOR = "div.structured-project__steps ol li"


def instructions(scraper, previous: tuple[str, ...] | None) -> tuple[str, ...] | None:
    steps = []
    for item in scraper.soup.select(STEP_SELECTOR):
        # Step images carry captions that are not part of the step text
        step = copy.copy(item)
        for media in step.select("img, picture, figure"):
            media.decompose()
        text = normalize_string(step.get_text())
        if text:
            steps.append(text)
    return unique_list(steps) or previous


SIMPLY_RECIPES = SiteOverride(
    host="simplyrecipes.com",
    name="SimplyRecipes",
    extractors={RecipeField.INSTRUCTIONS: instructions},
)
