"""Schema.org structured data extraction."""

from recipe_extractor.plugins.schema_org.graph import EntityGraph, build_entity_graph, load_entity_graph
from recipe_extractor.plugins.schema_org.plugin import SchemaOrgError, SchemaOrgPlugin, get_schema_text_value

__all__ = [
    "EntityGraph",
    "SchemaOrgError",
    "SchemaOrgPlugin",
    "build_entity_graph",
    "get_schema_text_value",
    "load_entity_graph",
]
