"""
Extraction Plugins
==================

Extractor plugins produce field values from a parsed document;
post-processor plugins clean up resolved values.
"""

from recipe_extractor.plugins.base import ExtractorPlugin, PostProcessorPlugin, TableExtractorPlugin
from recipe_extractor.plugins.html_stripper import HtmlStripperPlugin
from recipe_extractor.plugins.opengraph import OpenGraphError, OpenGraphPlugin
from recipe_extractor.plugins.schema_org import SchemaOrgError, SchemaOrgPlugin

__all__ = [
    "ExtractorPlugin",
    "HtmlStripperPlugin",
    "OpenGraphError",
    "OpenGraphPlugin",
    "PostProcessorPlugin",
    "SchemaOrgError",
    "SchemaOrgPlugin",
    "TableExtractorPlugin",
]
