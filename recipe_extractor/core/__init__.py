"""Core types shared across the recipe extractor."""

from recipe_extractor.core.enums import LogLevel, RecipeField
from recipe_extractor.core.exceptions import (
    ExtractionFailedError,
    ExtractorNotFoundError,
    IngredientGroupingError,
    NotImplementedFeatureError,
    RecipeExtractorError,
    UnsupportedFieldError,
    UnsupportedSiteError,
)
from recipe_extractor.core.schema import (
    DEFAULT_INGREDIENTS_GROUP_NAME,
    FlatIngredients,
    GroupedIngredients,
    Ingredients,
    LinkRecord,
    RecipeData,
    RecipeObject,
    ingredients_to_object,
    unique_list,
)

__all__ = [
    "LogLevel",
    "RecipeField",
    "ExtractionFailedError",
    "ExtractorNotFoundError",
    "IngredientGroupingError",
    "NotImplementedFeatureError",
    "RecipeExtractorError",
    "UnsupportedFieldError",
    "UnsupportedSiteError",
    "DEFAULT_INGREDIENTS_GROUP_NAME",
    "FlatIngredients",
    "GroupedIngredients",
    "Ingredients",
    "LinkRecord",
    "RecipeData",
    "RecipeObject",
    "ingredients_to_object",
    "unique_list",
]
