"""Post-processor that strips markup from text fields."""

from __future__ import annotations

import html
import re
from collections.abc import Iterable
from typing import Any

from recipe_extractor.core.enums import RecipeField
from recipe_extractor.core.schema import (
    DEFAULT_INGREDIENTS_GROUP_NAME,
    FlatIngredients,
    GroupedIngredients,
    unique_list,
)
from recipe_extractor.plugins.base import PostProcessorPlugin

TAG_RE = re.compile(r"<[^>]*>")


def strip_html(value: str) -> str:
    """Remove tags, decode entities and trim."""
    text = TAG_RE.sub("", value)
    text = html.unescape(text).replace("\xa0", " ")
    return text.strip()


def strip_html_items(values: Iterable[str]) -> tuple[str, ...]:
    """Strip every item, dropping the ones left empty."""
    return unique_list(text for text in (strip_html(value) for value in values) if text)


class HtmlStripperPlugin(PostProcessorPlugin):
    """Cleans leftover HTML out of titles, instructions and ingredients."""

    name = "HtmlStripper"
    priority = 100

    fields_to_process = frozenset({RecipeField.TITLE, RecipeField.INSTRUCTIONS, RecipeField.INGREDIENTS})

    def should_process(self, field: RecipeField) -> bool:
        return field in self.fields_to_process

    def process(self, field: RecipeField, value: Any) -> Any:
        if isinstance(value, str):
            return strip_html(value)

        if field == RecipeField.INSTRUCTIONS and isinstance(value, (list, tuple)):
            return strip_html_items(value)

        if field == RecipeField.INGREDIENTS:
            return self._process_ingredients(value)

        return value

    def _process_ingredients(self, value: Any) -> Any:
        if isinstance(value, FlatIngredients):
            return FlatIngredients(strip_html_items(value.items))

        if isinstance(value, GroupedIngredients):
            groups: dict[str, tuple[str, ...]] = {}
            for name, items in value.groups.items():
                stripped = strip_html(name) or DEFAULT_INGREDIENTS_GROUP_NAME
                groups[stripped] = groups.get(stripped, ()) + strip_html_items(items)
            return GroupedIngredients(groups)

        return value
