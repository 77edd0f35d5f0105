"""
Schema.org Entity Graph Module
==============================

Collects schema.org entities embedded in a page (JSON-LD blocks and
Recipe microdata) and resolves them into one working set: a merged
Recipe plus identifier indexes for the entities it references.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from bs4 import BeautifulSoup

from recipe_extractor.extraction.microdata import extract_recipe_microdata

logger = logging.getLogger(__name__)

Thing = dict[str, Any]


def is_plain_object(obj: Any) -> bool:
    return isinstance(obj, dict)


def has_id(obj: Any) -> bool:
    return is_plain_object(obj) and isinstance(obj.get("@id"), str)


def is_graph_type(obj: Any) -> bool:
    return is_plain_object(obj) and isinstance(obj.get("@graph"), list)


def is_base_type(obj: Any) -> bool:
    return is_plain_object(obj) and isinstance(obj.get("@type"), (str, list))


def is_schema_org_data(obj: Any) -> bool:
    """Whether a parsed JSON-LD document looks like a graph or a typed thing."""
    return is_graph_type(obj) or is_base_type(obj)


def thing_type(obj: Any) -> str | None:
    """The primary (first) @type of an entity."""
    if not is_base_type(obj):
        return None
    value = obj["@type"]
    if isinstance(value, list):
        value = value[0] if value else None
    return value if isinstance(value, str) else None


def is_thing_type(obj: Any, schema_type: str) -> bool:
    return thing_type(obj) == schema_type


def is_aggregate_rating(obj: Any) -> bool:
    return is_thing_type(obj, "AggregateRating")


def is_how_to_section(obj: Any) -> bool:
    return is_thing_type(obj, "HowToSection")


def is_how_to_step(obj: Any) -> bool:
    return is_thing_type(obj, "HowToStep")


def is_organization(obj: Any) -> bool:
    return is_thing_type(obj, "Organization")


def is_person(obj: Any) -> bool:
    return is_thing_type(obj, "Person")


def is_recipe(obj: Any) -> bool:
    return is_thing_type(obj, "Recipe")


def is_restricted_diet(obj: Any) -> bool:
    return is_thing_type(obj, "RestrictedDiet")


def is_web_page(obj: Any) -> bool:
    return is_thing_type(obj, "WebPage")


def is_web_site(obj: Any) -> bool:
    return is_thing_type(obj, "WebSite")


def get_id_or_url(obj: Any) -> str | None:
    """Identity key of an entity: its @id, else its url."""
    if has_id(obj):
        return obj["@id"]
    if is_plain_object(obj) and isinstance(obj.get("url"), str):
        return obj["url"]
    return None


@dataclass(frozen=True)
class EntityGraph:
    """
    Resolved schema.org entities for one document.

    Attributes:
        recipe: All Recipe nodes merged key by key (later nodes win)
        people: Person entities by @id or url
        organizations: Organization entities by @id or url
        ratings: AggregateRating entities by @id
        website_name: Name of the WebSite entity, if any
    """

    recipe: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({"@type": "Recipe"}))
    people: Mapping[str, Thing] = field(default_factory=lambda: MappingProxyType({}))
    organizations: Mapping[str, Thing] = field(default_factory=lambda: MappingProxyType({}))
    ratings: Mapping[str, Thing] = field(default_factory=lambda: MappingProxyType({}))
    website_name: str | None = None

    def lookup(self, obj: Any, index: Mapping[str, Thing]) -> Any:
        """Follow an @id/url reference through an index, if it resolves."""
        key = get_id_or_url(obj)
        if key is not None and key in index:
            return index[key]
        return obj


class _GraphBuilder:
    def __init__(self, text_value) -> None:
        self.text_value = text_value
        self.recipe: dict[str, Any] = {"@type": "Recipe"}
        self.people: dict[str, Thing] = {}
        self.organizations: dict[str, Thing] = {}
        self.ratings: dict[str, Thing] = {}
        self.website_name: str | None = None

    def add(self, data: Any) -> None:
        if is_graph_type(data):
            for item in data["@graph"]:
                self.process_item(item)
        else:
            self.process_item(data)

    def process_item(self, item: Any) -> None:
        if not is_base_type(item):
            return
        if is_recipe(item):
            self.recipe.update(item)
            return

        if is_web_site(item):
            self.website_name = self.text_value(item) or self.website_name

        if is_web_page(item) and is_base_type(item.get("mainEntity")):
            self.process_item(item["mainEntity"])

        if is_person(item):
            key = get_id_or_url(item)
            if key:
                self.people[key] = item

        if is_organization(item):
            key = get_id_or_url(item)
            if key:
                self.organizations[key] = item

        if is_aggregate_rating(item) and has_id(item):
            self.ratings[item["@id"]] = item

    def build(self) -> EntityGraph:
        return EntityGraph(
            recipe=MappingProxyType(self.recipe),
            people=MappingProxyType(self.people),
            organizations=MappingProxyType(self.organizations),
            ratings=MappingProxyType(self.ratings),
            website_name=self.website_name,
        )


def extract_json_ld(soup: BeautifulSoup, log: logging.Logger | logging.LoggerAdapter = logger) -> list[Any]:
    """
    Parse every JSON-LD block in the document.

    Blocks that fail to parse are logged and skipped. A top-level JSON
    array contributes each of its entries.
    """
    documents: list[Any] = []

    for script in soup.select('script[type="application/ld+json"]'):
        text = script.string if script.string is not None else script.get_text()
        text = (text or "").strip()
        if not text:
            continue
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            log.warning("Failed to parse JSON-LD: %s", e)
            continue

        candidates = data if isinstance(data, list) else [data]
        documents.extend(item for item in candidates if is_schema_org_data(item))

    return documents


def build_entity_graph(documents: Iterable[Any], text_value) -> EntityGraph:
    """
    Classify candidate entities into an EntityGraph.

    Args:
        documents: Graph documents or typed things, in document order
        text_value: Callable resolving an entity to its display name
    """
    builder = _GraphBuilder(text_value)
    for document in documents:
        builder.add(document)
    return builder.build()


def load_entity_graph(
    soup: BeautifulSoup,
    text_value,
    log: logging.Logger | logging.LoggerAdapter = logger,
) -> EntityGraph:
    """Build the EntityGraph from a document's JSON-LD and microdata."""
    documents = extract_json_ld(soup, log)
    documents.extend(item for item in extract_recipe_microdata(soup) if is_recipe(item))
    return build_entity_graph(documents, text_value)
