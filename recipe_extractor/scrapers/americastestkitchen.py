"""
America's Test Kitchen
======================

americastestkitchen.com ships its recipe as page data in an embedded
``application/json`` script. Ingredients and instructions are read from
it, validated with pydantic; ingredients fall back to regrouping the
plugin result against the rendered DOM.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from recipe_extractor.core.enums import RecipeField
from recipe_extractor.core.schema import (
    DEFAULT_INGREDIENTS_GROUP_NAME,
    FlatIngredients,
    GroupedIngredients,
    Ingredients,
    unique_list,
)
from recipe_extractor.extraction.grouping import group_ingredients
from recipe_extractor.extraction.normalizer import normalize_string
from recipe_extractor.scrapers.base import SiteOverride

logger = logging.getLogger(__name__)

SITE_NAME = "America's Test Kitchen"

# Class names carry a generated suffix
HEADING_SELECTOR = '[class*="RecipeIngredientGroups_group"] > span'
INGREDIENT_SELECTOR = '[class*="RecipeIngredient"] label'


class IngredientFields(BaseModel):
    title: str
    pluralTitle: str = ""
    kind: str = ""


class Ingredient(BaseModel):
    contentType: str = ""
    fields: IngredientFields


class IngredientItemFields(BaseModel):
    qty: str = ""
    preText: str = ""
    postText: str = ""
    measurement: Optional[str] = None
    pluralIngredient: bool = False
    ingredient: Ingredient


class IngredientItem(BaseModel):
    fields: IngredientItemFields


class IngredientGroupFields(BaseModel):
    title: str = ""
    recipeIngredientItems: list[IngredientItem] = Field(default_factory=list)


class IngredientGroup(BaseModel):
    fields: IngredientGroupFields


class InstructionFields(BaseModel):
    content: str


class Instruction(BaseModel):
    fields: InstructionFields


class RecipePageData(BaseModel):
    totalCookTime: float
    recipeTimeNote: Optional[str] = None
    ingredientGroups: list[IngredientGroup]
    headnote: Optional[str] = None
    instructions: list[Instruction]


class PageProps(BaseModel):
    data: RecipePageData


class PageData(BaseModel):
    pageProps: PageProps


class NextData(BaseModel):
    props: PageData


def get_recipe_data(soup, log: logging.Logger | logging.LoggerAdapter = logger) -> RecipePageData | None:
    """Parse and validate the embedded page data, if present."""
    script = soup.select_one('script[type="application/json"]')
    text = script.string if script is not None else None

    if not text:
        log.warning("Could not find JSON data script tag")
        return None

    try:
        return NextData.model_validate(json.loads(text)).props.pageProps.data
    except (json.JSONDecodeError, ValidationError) as e:
        log.error("Failed to parse JSON data: %s", e)
        return None


def format_ingredient(item: IngredientItem) -> str:
    """Join quantity, measurement, name and trailing note ("2 cups flour, sifted")."""
    fields = item.fields
    fragments = [
        fields.qty,
        fields.measurement or "",
        fields.ingredient.fields.title,
        fields.postText,
    ]
    text = " ".join(fragment.rstrip() for fragment in fragments if fragment)
    return text.rstrip().replace(" ,", ",")


def parse_ingredients(data: RecipePageData) -> Ingredients | None:
    groups = data.ingredientGroups
    if not groups:
        return None

    if len(groups) == 1:
        return FlatIngredients(tuple(format_ingredient(item) for item in groups[0].fields.recipeIngredientItems))

    grouped: dict[str, tuple[str, ...]] = {}
    for group in groups:
        title = group.fields.title or DEFAULT_INGREDIENTS_GROUP_NAME
        items = tuple(format_ingredient(item) for item in group.fields.recipeIngredientItems)
        grouped[title] = grouped.get(title, ()) + items

    return GroupedIngredients(grouped)


def ingredients(scraper, previous: Ingredients | None) -> Ingredients:
    data = get_recipe_data(scraper.soup, scraper.log)
    result = parse_ingredients(data) if data else None

    if result is None and isinstance(previous, FlatIngredients) and previous:
        result = group_ingredients(scraper.soup, previous, HEADING_SELECTOR, INGREDIENT_SELECTOR, scraper.log)

    if result is None:
        raise ValueError("Failed to extract ingredients")

    return result


def instructions(scraper, previous: tuple[str, ...] | None) -> tuple[str, ...]:
    data = get_recipe_data(scraper.soup, scraper.log)

    if data is None:
        if previous:
            return previous
        raise ValueError("Failed to extract instructions")

    steps = []
    if data.headnote:
        steps.append(f"Note: {normalize_string(data.headnote)}")
    steps.extend(normalize_string(step.fields.content) for step in data.instructions)

    return unique_list(step for step in steps if step)


def site_name(scraper, previous: str | None) -> str:
    return SITE_NAME


AMERICAS_TEST_KITCHEN = SiteOverride(
    host="americastestkitchen.com",
    name="AmericasTestKitchen",
    extractors={
        RecipeField.INGREDIENTS: ingredients,
        RecipeField.INSTRUCTIONS: instructions,
        RecipeField.SITE_NAME: site_name,
    },
)
