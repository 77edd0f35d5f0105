"""
Ingredient Grouping Module
==========================

Reconstructs ingredient subsections ("For the sauce", "For the dough")
from the page DOM and maps each DOM item back onto the already extracted
ingredient strings using bigram similarity.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import soupsieve
from bs4 import BeautifulSoup

from recipe_extractor.core.exceptions import IngredientGroupingError
from recipe_extractor.core.schema import (
    DEFAULT_INGREDIENTS_GROUP_NAME,
    FlatIngredients,
    GroupedIngredients,
    Ingredients,
    unique_list,
)
from recipe_extractor.extraction.normalizer import normalize_string

logger = logging.getLogger(__name__)

# Selector conventions of common recipe card plugins
DEFAULT_GROUPING_SELECTORS: dict[str, dict[str, list[str]]] = {
    "wprm": {
        "heading_selectors": [
            ".wprm-recipe-ingredient-group h4",
            ".wprm-recipe-group-name",
        ],
        "item_selectors": [
            ".wprm-recipe-ingredient",
            ".wprm-recipe-ingredients li",
        ],
    },
    "tasty": {
        "heading_selectors": [
            ".tasty-recipes-ingredients-body p strong",
            ".tasty-recipes-ingredients h4",
        ],
        "item_selectors": [
            ".tasty-recipes-ingredients-body ul li",
            ".tasty-recipes-ingredients ul li",
        ],
    },
}


def _bigrams(text: str) -> set[str]:
    return {text[i : i + 2] for i in range(len(text) - 1)}


def score_sentence_similarity(first: str, second: str) -> float:
    """
    Dice coefficient over adjacent character pairs.

    Args:
        first: First string
        second: Second string

    Returns:
        Similarity between 0.0 and 1.0; identical strings score 1.0 and
        strings shorter than two characters score 0.0
    """
    if first == second and len(first) >= 2:
        return 1.0

    if len(first) < 2 or len(second) < 2:
        return 0.0

    first_bigrams = _bigrams(first)
    second_bigrams = _bigrams(second)
    shared = len(first_bigrams & second_bigrams)

    return (2 * shared) / (len(first_bigrams) + len(second_bigrams))


def best_match(test_string: str, target_strings: Sequence[str]) -> str:
    """
    Find the target most similar to ``test_string``.

    Ties go to the first candidate with the top score.

    Raises:
        ValueError: If there are no targets
    """
    if not target_strings:
        raise ValueError("target_strings cannot be empty")

    best_index = 0
    best_score = score_sentence_similarity(test_string, target_strings[0])

    for index in range(1, len(target_strings)):
        score = score_sentence_similarity(test_string, target_strings[index])
        if score > best_score:
            best_score = score
            best_index = index

    return target_strings[best_index]


def find_selectors(
    soup: BeautifulSoup,
    heading_selector: str | None = None,
    item_selector: str | None = None,
) -> tuple[str, str] | None:
    """
    Pick the heading/item selector pair to group with.

    Caller-supplied selectors are used only if both match the document.
    Otherwise the known recipe card conventions are tried pair by pair.
    """
    if heading_selector and item_selector:
        if soup.select_one(heading_selector) and soup.select_one(item_selector):
            return heading_selector, item_selector
        return None

    for selectors in DEFAULT_GROUPING_SELECTORS.values():
        for heading in selectors["heading_selectors"]:
            for item in selectors["item_selectors"]:
                if soup.select_one(heading) and soup.select_one(item):
                    return heading, item

    return None


def group_ingredients(
    soup: BeautifulSoup,
    ingredients: Sequence[str] | FlatIngredients,
    heading_selector: str | None = None,
    item_selector: str | None = None,
    log: logging.Logger | logging.LoggerAdapter = logger,
) -> Ingredients:
    """
    Group an extracted ingredient list by the headings found in the DOM.

    Headings and items are walked in document order. Each DOM item is
    matched to the most similar extracted ingredient, and the extracted
    text (not the DOM text) is placed in the current heading's group.

    Args:
        soup: Parsed document
        ingredients: Ingredients already extracted for the page
        heading_selector: CSS selector for group headings
        item_selector: CSS selector for ingredient items
        log: Logger of the scraper run

    Returns:
        GroupedIngredients, or the ingredients unchanged (flat) when no
        usable selector pair exists

    Raises:
        IngredientGroupingError: If the number of DOM items differs from
            the number of extracted ingredients
    """
    flat = ingredients if isinstance(ingredients, FlatIngredients) else FlatIngredients(tuple(ingredients))
    selectors = find_selectors(soup, heading_selector, item_selector)

    if selectors is None:
        log.debug("No ingredient grouping selectors matched")
        return flat

    group_selector, ingredient_selector = selectors
    candidates = list(flat.items)

    found = unique_list(
        text for text in (normalize_string(el.get_text()) for el in soup.select(ingredient_selector)) if text
    )
    if len(found) != len(candidates):
        raise IngredientGroupingError(found=len(found), expected=len(candidates))

    groupings: dict[str, list[str]] = {}
    current_heading: str | None = None

    for element in soup.select(f"{group_selector}, {ingredient_selector}"):
        if soupsieve.match(group_selector, element):
            current_heading = normalize_string(element.get_text()) or DEFAULT_INGREDIENTS_GROUP_NAME
            groupings.setdefault(current_heading, [])
        elif soupsieve.match(ingredient_selector, element):
            text = normalize_string(element.get_text())
            if not text:
                continue

            matched = best_match(text, candidates)
            heading = current_heading or DEFAULT_INGREDIENTS_GROUP_NAME
            group = groupings.setdefault(heading, [])
            if matched not in group:
                group.append(matched)

    return GroupedIngredients({name: tuple(items) for name, items in groupings.items()})
