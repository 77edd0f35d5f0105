"""
Schema.org Extractor Plugin
===========================

Reads recipe fields from schema.org structured data (JSON-LD and
microdata). Structured data is the most reliable source on most recipe
sites, so this plugin runs ahead of the generic meta-tag plugins.
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Sequence
from typing import Any

from bs4 import BeautifulSoup

from recipe_extractor.core.enums import RecipeField
from recipe_extractor.core.exceptions import MISSING, ExtractionFailedError
from recipe_extractor.core.log import ScraperLogger
from recipe_extractor.core.schema import FlatIngredients, unique_list
from recipe_extractor.extraction.normalizer import (
    normalize_string,
    parse_minutes,
    parse_yields,
    round_half_up,
    split_to_list,
)
from recipe_extractor.plugins.base import TableExtractorPlugin
from recipe_extractor.plugins.schema_org.graph import (
    EntityGraph,
    is_aggregate_rating,
    is_base_type,
    is_how_to_section,
    is_how_to_step,
    is_organization,
    is_restricted_diet,
    load_entity_graph,
)

DEFAULT_TEXT_PROPS = ("textValue", "name", "title", "@id")

SCHEMA_ORG_PREFIX_RE = re.compile(r"^https?://schema\.org/", re.I)

RESTRICTED_DIETS = frozenset(
    {
        "DiabeticDiet",
        "GlutenFreeDiet",
        "HalalDiet",
        "HinduDiet",
        "KosherDiet",
        "LowCalorieDiet",
        "LowFatDiet",
        "LowLactoseDiet",
        "LowSaltDiet",
        "VeganDiet",
        "VegetarianDiet",
    }
)


class SchemaOrgError(ExtractionFailedError):
    """No usable schema.org value for a field."""


def pick_from_object(obj: Any, props: Sequence[str]) -> str | None:
    """Return the first string-valued key of ``obj`` among ``props``."""
    if not isinstance(obj, dict):
        return None
    for prop in props:
        value = obj.get(prop)
        if isinstance(value, str):
            return value
    return None


def get_schema_text_value(value: Any, props: Sequence[str] = DEFAULT_TEXT_PROPS) -> str:
    """
    Canonicalize a schema.org value to text.

    Strings are used as-is, numbers are stringified, lists resolve their
    first element, and objects their first string property among
    ``props``. Never raises; a total miss gives an empty string.
    """
    if isinstance(value, str):
        text: str | None = value
    elif isinstance(value, bool):
        text = None
    elif isinstance(value, (int, float)):
        text = str(int(value)) if float(value).is_integer() else str(value)
    elif isinstance(value, list):
        text = get_schema_text_value(value[0], props) if value else None
    else:
        text = pick_from_object(value, props)

    return normalize_string(text)


def schema_value_to_list(value: Any) -> tuple[str, ...]:
    """Resolve a comma-delimited string or a list of text values to an ordered set."""
    if isinstance(value, list):
        items = (get_schema_text_value(item) for item in value)
        return unique_list(item for item in items if item)
    if isinstance(value, str):
        return unique_list(split_to_list(value, ","))
    return ()


def strip_schema_prefix(value: str) -> str:
    """Drop a leading "https://schema.org/" from a vocabulary term."""
    return SCHEMA_ORG_PREFIX_RE.sub("", value)


class SchemaOrgPlugin(TableExtractorPlugin):
    """
    Extracts recipe fields from the page's schema.org entity graph.

    The graph is built once, when the plugin is created, and is read-only
    afterwards.
    """

    name = "SchemaOrgPlugin"
    priority = 90

    def __init__(self, soup: BeautifulSoup, log: ScraperLogger | None = None) -> None:
        super().__init__(soup, log)
        self.graph: EntityGraph = load_entity_graph(soup, get_schema_text_value, self.log)

    @property
    def recipe(self):
        return self.graph.recipe

    def build_extractors(self) -> dict[RecipeField, Callable[[], Any]]:
        return {
            RecipeField.SITE_NAME: self.site_name,
            RecipeField.LANGUAGE: self.language,
            RecipeField.TITLE: self.title,
            RecipeField.AUTHOR: self.author,
            RecipeField.DESCRIPTION: self.description,
            RecipeField.IMAGE: self.image,
            RecipeField.INGREDIENTS: self.ingredients,
            RecipeField.INSTRUCTIONS: self.instructions,
            RecipeField.CATEGORY: self.category,
            RecipeField.YIELDS: self.yields,
            RecipeField.TOTAL_TIME: self.total_time,
            RecipeField.COOK_TIME: self.cook_time,
            RecipeField.PREP_TIME: self.prep_time,
            RecipeField.CUISINE: self.cuisine,
            RecipeField.COOKING_METHOD: self.cooking_method,
            RecipeField.RATINGS: self.ratings,
            RecipeField.RATINGS_COUNT: self.ratings_count,
            RecipeField.NUTRIENTS: self.nutrients,
            RecipeField.KEYWORDS: self.keywords,
            RecipeField.DIETARY_RESTRICTIONS: self.dietary_restrictions,
        }

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _required_text(self, field: RecipeField, value: Any) -> str:
        text = get_schema_text_value(value)
        if not text:
            raise SchemaOrgError(field)
        return text

    def _parse_duration(self, field: RecipeField) -> int:
        key = field.value
        value = self.recipe.get(key)

        if not value:
            raise SchemaOrgError(field)

        if isinstance(value, (int, float)) and not isinstance(value, bool):
            self.log.warning('Duration field "%s" is a number: %s', key, value)
            return round_half_up(value)

        if isinstance(value, str):
            try:
                return parse_minutes(value)
            except ValueError:
                raise SchemaOrgError(field, value) from None

        # QuantitativeValue: use the upper bound
        if is_base_type(value) and "maxValue" in value:
            max_value = get_schema_text_value(value["maxValue"])
            try:
                return parse_minutes(max_value)
            except ValueError:
                raise SchemaOrgError(field, max_value) from None

        raise SchemaOrgError(field, value)

    def _duration_or_zero(self, field: RecipeField) -> int:
        try:
            return self._parse_duration(field)
        except SchemaOrgError as e:
            if e.value is not MISSING:
                raise
            return 0

    def _parse_instructions(self, value: Any) -> list[str]:
        if isinstance(value, str):
            return [normalize_string(value)]

        items: list[Any] = []
        for item in value if isinstance(value, list) else [value]:
            if isinstance(item, list):
                items.extend(item)
            else:
                items.append(item)

        result: list[str] = []
        for item in items:
            name = get_schema_text_value(item, ("name",))
            text = get_schema_text_value(item, ("text",))

            if isinstance(item, str):
                result.append(normalize_string(item))
            elif is_how_to_step(item):
                # "Preheat oven." still prefixes "Preheat oven to 200C."
                name_prefix = name[:-1] if name.endswith(".") else name
                if name and text and not text.startswith(name_prefix):
                    result.append(name)
                if text:
                    result.append(text)
            elif is_how_to_section(item):
                if name:
                    result.append(name)
                if item.get("itemListElement"):
                    result.extend(self._parse_instructions(item["itemListElement"]))
            elif text:
                result.append(text)

        return [step for step in result if step]

    def _aggregate_rating(self) -> dict[str, Any] | None:
        rating = self.recipe.get("aggregateRating")
        if isinstance(rating, dict):
            rating = self.graph.lookup(rating, self.graph.ratings)
        return rating if is_aggregate_rating(rating) else None

    # ------------------------------------------------------------------
    # Field extractors
    # ------------------------------------------------------------------

    def site_name(self) -> str:
        publisher = self.recipe.get("publisher")
        if isinstance(publisher, list) and publisher:
            publisher = publisher[0]
        if isinstance(publisher, dict):
            publisher = self.graph.lookup(publisher, self.graph.organizations)

        if is_organization(publisher):
            publisher_name = get_schema_text_value(publisher, ("name", "alternateName"))
            if publisher_name:
                return publisher_name

        if not self.graph.website_name:
            raise SchemaOrgError(RecipeField.SITE_NAME)

        return self.graph.website_name

    def language(self) -> str:
        return self._required_text(RecipeField.LANGUAGE, self.recipe.get("inLanguage"))

    def title(self) -> str:
        return self._required_text(RecipeField.TITLE, self.recipe.get("name"))

    def author(self) -> str:
        author = self.recipe.get("author")

        if isinstance(author, list) and author:
            author = author[0]

        if isinstance(author, dict):
            author = self.graph.lookup(author, self.graph.people)
            name = get_schema_text_value(author, ("name",))
        else:
            name = get_schema_text_value(author, ())

        if not name:
            raise SchemaOrgError(RecipeField.AUTHOR)

        return name

    def description(self) -> str:
        return self._required_text(RecipeField.DESCRIPTION, self.recipe.get("description"))

    def image(self) -> str:
        image = get_schema_text_value(self.recipe.get("image"), ("url", "contentUrl"))

        if not image.startswith("http"):
            raise SchemaOrgError(RecipeField.IMAGE, image)

        return image

    def ingredients(self) -> FlatIngredients:
        ingredients = self.recipe.get("recipeIngredient") or self.recipe.get("ingredients") or []

        if isinstance(ingredients, str):
            ingredients = [ingredients]

        if not isinstance(ingredients, list):
            raise SchemaOrgError(RecipeField.INGREDIENTS, ingredients)

        cleaned: list[str] = []
        for item in ingredients:
            for entry in item if isinstance(item, list) else [item]:
                ingredient = get_schema_text_value(entry).replace("((", "(").replace("))", ")")
                if ingredient:
                    cleaned.append(ingredient)

        if not cleaned:
            raise SchemaOrgError(RecipeField.INGREDIENTS)

        return FlatIngredients(tuple(cleaned))

    def instructions(self) -> tuple[str, ...]:
        instructions = unique_list(self._parse_instructions(self.recipe.get("recipeInstructions")))

        if not instructions:
            raise SchemaOrgError(RecipeField.INSTRUCTIONS)

        return instructions

    def category(self) -> tuple[str, ...]:
        category = self.recipe.get("recipeCategory")
        if not category:
            raise SchemaOrgError(RecipeField.CATEGORY)
        return schema_value_to_list(category)

    def yields(self) -> str:
        raw = self.recipe.get("recipeYield")
        if raw is None:
            raw = self.recipe.get("yield")
        yields = get_schema_text_value(raw)

        if not yields:
            raise SchemaOrgError(RecipeField.YIELDS)

        return parse_yields(yields)

    def total_time(self) -> int:
        total_time = self._duration_or_zero(RecipeField.TOTAL_TIME)
        if total_time:
            return total_time

        prep_time = self._duration_or_zero(RecipeField.PREP_TIME)
        cook_time = self._duration_or_zero(RecipeField.COOK_TIME)

        if prep_time or cook_time:
            return prep_time + cook_time

        raise SchemaOrgError(RecipeField.TOTAL_TIME)

    def cook_time(self) -> int:
        return self._parse_duration(RecipeField.COOK_TIME)

    def prep_time(self) -> int:
        return self._parse_duration(RecipeField.PREP_TIME)

    def cuisine(self) -> tuple[str, ...]:
        cuisine = self.recipe.get("recipeCuisine")
        if not cuisine:
            raise SchemaOrgError(RecipeField.CUISINE)
        return schema_value_to_list(cuisine)

    def cooking_method(self) -> str:
        return self._required_text(RecipeField.COOKING_METHOD, self.recipe.get("cookingMethod"))

    def ratings(self) -> float:
        rating = self._aggregate_rating()
        value = get_schema_text_value(rating["ratingValue"]) if rating and "ratingValue" in rating else ""

        if not value:
            raise SchemaOrgError(RecipeField.RATINGS)

        try:
            return round_half_up(float(value) * 100) / 100
        except ValueError:
            raise SchemaOrgError(RecipeField.RATINGS, value) from None

    def ratings_count(self) -> int:
        rating = self._aggregate_rating()
        count = ""
        if rating:
            count = get_schema_text_value(rating.get("ratingCount")) or get_schema_text_value(
                rating.get("reviewCount")
            )

        if not count:
            raise SchemaOrgError(RecipeField.RATINGS_COUNT)

        try:
            return max(0, math.floor(float(count)))
        except ValueError:
            raise SchemaOrgError(RecipeField.RATINGS_COUNT, count) from None

    def nutrients(self) -> dict[str, str]:
        nutrition = self.recipe.get("nutrition")

        if not isinstance(nutrition, dict):
            raise SchemaOrgError(RecipeField.NUTRIENTS, nutrition)

        nutrients: dict[str, str] = {}
        for key, value in nutrition.items():
            if not key or key.startswith("@") or not value:
                continue
            nutrients[key] = get_schema_text_value(value)

        return nutrients

    def keywords(self) -> tuple[str, ...]:
        keywords = self.recipe.get("keywords")
        if not keywords:
            raise SchemaOrgError(RecipeField.KEYWORDS)
        return schema_value_to_list(keywords)

    def dietary_restrictions(self) -> tuple[str, ...]:
        restrictions = self.recipe.get("suitableForDiet")
        candidates = restrictions if isinstance(restrictions, list) else [restrictions]

        diets: list[str] = []
        for candidate in candidates:
            if is_restricted_diet(candidate):
                term = get_schema_text_value(candidate)
            elif isinstance(candidate, str):
                term = normalize_string(candidate)
            else:
                continue

            term = strip_schema_prefix(term)
            if term in RESTRICTED_DIETS or (is_restricted_diet(candidate) and term):
                diets.append(term)

        if not diets:
            raise SchemaOrgError(RecipeField.DIETARY_RESTRICTIONS, restrictions)

        return unique_list(diets)
