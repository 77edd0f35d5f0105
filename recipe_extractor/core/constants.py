"""Default values for optional recipe fields."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

from recipe_extractor.core.enums import RecipeField

# Used when no plugin or site override produced a value.
OPTIONAL_RECIPE_FIELD_DEFAULT_VALUES: MappingProxyType[RecipeField, Any] = MappingProxyType(
    {
        RecipeField.SITE_NAME: None,
        RecipeField.CATEGORY: (),
        RecipeField.COOK_TIME: None,
        RecipeField.PREP_TIME: None,
        RecipeField.TOTAL_TIME: None,
        RecipeField.CUISINE: (),
        RecipeField.COOKING_METHOD: None,
        RecipeField.RATINGS: 0,
        RecipeField.RATINGS_COUNT: 0,
        RecipeField.EQUIPMENT: (),
        RecipeField.REVIEWS: MappingProxyType({}),
        RecipeField.NUTRIENTS: MappingProxyType({}),
        RecipeField.DIETARY_RESTRICTIONS: (),
        RecipeField.KEYWORDS: (),
        RecipeField.LINKS: (),
    }
)

REQUIRED_RECIPE_FIELDS: frozenset[RecipeField] = frozenset(
    field for field in RecipeField if field not in OPTIONAL_RECIPE_FIELD_DEFAULT_VALUES
)


def is_optional_field(field: RecipeField) -> bool:
    """Check whether a field has a documented default."""
    return field in OPTIONAL_RECIPE_FIELD_DEFAULT_VALUES


def default_value(field: RecipeField) -> Any:
    """
    Get a fresh copy of the default value for an optional field.

    Raises:
        KeyError: If the field is required
    """
    value = OPTIONAL_RECIPE_FIELD_DEFAULT_VALUES[field]
    if isinstance(value, MappingProxyType):
        return dict(value)
    return value
