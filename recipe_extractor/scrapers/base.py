"""
Site Override Base
==================

A site override is plain data: the host it applies to and a table of
field extractors. Each extractor is called as ``fn(scraper, previous)``
with the value produced by the plugin chain (or None) and returns the
field value, sync or async.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Union

from recipe_extractor.core.enums import RecipeField

if TYPE_CHECKING:
    from recipe_extractor.scraper import RecipeScraper

FieldOverride = Callable[["RecipeScraper", Any], Union[Any, Awaitable[Any]]]


@dataclass(frozen=True)
class SiteOverride:
    """Field overrides for one recipe site."""

    host: str
    name: str
    extractors: Mapping[RecipeField, FieldOverride] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "extractors",
            MappingProxyType({RecipeField(key): fn for key, fn in self.extractors.items()}),
        )

    def get_extractor(self, field: RecipeField) -> FieldOverride | None:
        """The override for a field, if this site has one."""
        return self.extractors.get(RecipeField(field))

    def get_info(self) -> dict[str, str]:
        """Get override information."""
        return {
            "host": self.host,
            "name": self.name,
            "fields": ", ".join(str(key) for key in self.extractors),
        }
