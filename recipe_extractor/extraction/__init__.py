"""
Recipe Extraction Framework
===========================

Field-by-field extraction of a recipe record from one HTML document.

Stages per field:
1. Extractor plugins, highest priority first (first value wins)
2. Site override, refining or replacing the plugin value
3. Defaults for optional fields
4. Post-processors over the resolved value
"""

from recipe_extractor.extraction.normalizer import (
    normalize_string,
    parse_fraction,
    parse_minutes,
    parse_yields,
    split_instructions,
    split_to_list,
)
from recipe_extractor.extraction.microdata import extract_microdata, extract_recipe_microdata
from recipe_extractor.extraction.diagnostics import ExtractionAttempt, Failure, ScraperDiagnostics
from recipe_extractor.extraction.grouping import (
    best_match,
    group_ingredients,
    score_sentence_similarity,
)
from recipe_extractor.extraction.registry import PluginManager, compose_plugins
from recipe_extractor.extraction.engine import RecipeExtractor
from recipe_extractor.extraction.config import (
    ScraperOptions,
    get_default_options,
    load_options,
    reset_default_options,
)

__all__ = [
    # Normalization
    "normalize_string",
    "parse_fraction",
    "parse_minutes",
    "parse_yields",
    "split_instructions",
    "split_to_list",
    # Microdata
    "extract_microdata",
    "extract_recipe_microdata",
    # Diagnostics
    "ExtractionAttempt",
    "Failure",
    "ScraperDiagnostics",
    # Grouping
    "best_match",
    "group_ingredients",
    "score_sentence_similarity",
    # Engine
    "PluginManager",
    "RecipeExtractor",
    "compose_plugins",
    # Config
    "ScraperOptions",
    "get_default_options",
    "load_options",
    "reset_default_options",
]
