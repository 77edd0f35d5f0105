"""Shared fixtures for recipe extractor tests."""

import json
from typing import Any, Callable

import pytest

from recipe_extractor.extraction.config import reset_default_options

BASE_RECIPE: dict[str, Any] = {
    "@context": "https://schema.org",
    "@type": "Recipe",
    "name": "Weeknight <b>Chili</b>",
    "author": {"@type": "Person", "name": "Sam Cook"},
    "description": "A quick chili.",
    "image": {"@type": "ImageObject", "url": "https://example.com/chili.jpg"},
    "recipeIngredient": ["1 lb ground beef", "1 can beans", "1 tbsp chili powder"],
    "recipeInstructions": [
        {"@type": "HowToStep", "text": "Brown the beef."},
        {"@type": "HowToStep", "text": "Add beans &amp; spices."},
    ],
    "recipeYield": "4",
    "totalTime": "PT45M",
    "recipeCategory": "Dinner",
    "aggregateRating": {"@type": "AggregateRating", "ratingValue": "4.25", "ratingCount": "8"},
}


def build_page(
    recipe: dict[str, Any] | None = None,
    head: str = "",
    body: str = "",
    lang: str | None = "en",
) -> str:
    """Render an HTML page embedding a Recipe as JSON-LD."""
    recipe = BASE_RECIPE if recipe is None else recipe
    lang_attr = f' lang="{lang}"' if lang else ""
    return (
        f"<!DOCTYPE html><html{lang_attr}><head>{head}"
        f'<script type="application/ld+json">{json.dumps(recipe)}</script>'
        f"</head><body>{body}</body></html>"
    )


@pytest.fixture
def recipe_page() -> Callable[..., str]:
    return build_page


@pytest.fixture(autouse=True)
def isolated_default_options(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("RECIPE_EXTRACTOR_CONFIG", raising=False)
    reset_default_options()
    yield
    reset_default_options()
