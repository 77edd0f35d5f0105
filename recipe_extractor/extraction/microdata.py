"""
Microdata Module
================

Synthesizes schema.org-style objects from ``itemscope``/``itemprop``
annotated HTML, so microdata can be resolved the same way as JSON-LD.
"""

from __future__ import annotations

import re
from typing import Any

from bs4 import BeautifulSoup, Tag

RECIPE_MICRODATA_SELECTOR = '[itemtype*="schema.org/Recipe"], [itemtype*="Recipe"]'

SCHEMA_TYPE_RE = re.compile(r"schema\.org/(\w+)")


def extract_schema_type(item_type: str | None) -> str | None:
    """Get the bare type name from an itemtype URL ("https://schema.org/Recipe" -> "Recipe")."""
    if not item_type:
        return None
    match = SCHEMA_TYPE_RE.search(item_type)
    return match.group(1) if match else None


def extract_value(element: Tag) -> str | None:
    """Read the value carried by a single itemprop element."""
    if element.name == "meta":
        return element.get("content")
    if element.name == "time":
        return element.get("datetime") or element.get_text().strip()
    if element.name in ("img", "source", "video", "audio"):
        return element.get("src")
    if element.name in ("a", "link"):
        return element.get("href")
    if element.has_attr("content"):
        return element.get("content")
    return element.get_text().strip()


def add_property(obj: dict[str, Any], key: str, value: Any) -> None:
    """Set a property, turning repeated properties into a list."""
    if key not in obj:
        obj[key] = value
    elif isinstance(obj[key], list):
        obj[key].append(value)
    else:
        obj[key] = [obj[key], value]


def _is_nested_in_scope(element: Tag, root: Tag) -> bool:
    """Whether an element sits inside another itemtype scope below ``root``."""
    for parent in element.parents:
        if parent is root:
            return False
        if parent.has_attr("itemtype"):
            return True
    return False


def _extract_nested(element: Tag) -> dict[str, Any]:
    nested: dict[str, Any] = {}
    schema_type = extract_schema_type(element.get("itemtype"))
    if schema_type:
        nested["@type"] = schema_type

    for prop in element.select("[itemprop]"):
        name = prop.get("itemprop")
        value = extract_value(prop)
        if name and value:
            add_property(nested, name, value)

    return nested


def extract_microdata(soup: BeautifulSoup, selector: str) -> list[dict[str, Any]]:
    """
    Extract microdata objects for every element matching ``selector``.

    Properties of a nested itemtype scope are collected into a nested
    object (one level deep) rather than leaking into the root object.

    Args:
        soup: Parsed document
        selector: CSS selector for the item scopes to extract

    Returns:
        List of objects with "@type" and one key per itemprop
    """
    results: list[dict[str, Any]] = []

    for root in soup.select(selector):
        obj: dict[str, Any] = {}
        schema_type = extract_schema_type(root.get("itemtype"))
        if schema_type:
            obj["@type"] = schema_type

        for prop in root.select("[itemprop]"):
            if _is_nested_in_scope(prop, root):
                continue

            name = prop.get("itemprop")
            if not name:
                continue

            if prop.has_attr("itemtype"):
                value: Any = _extract_nested(prop)
            else:
                value = extract_value(prop)

            if value:
                add_property(obj, name, value)

        if len(obj) > 1 or (len(obj) == 1 and "@type" not in obj):
            results.append(obj)

    return results


def extract_recipe_microdata(soup: BeautifulSoup) -> list[dict[str, Any]]:
    """Extract every Recipe microdata scope in the document."""
    return extract_microdata(soup, RECIPE_MICRODATA_SELECTOR)
