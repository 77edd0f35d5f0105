"""Recipe record types and their serialized (JSON-ready) form."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DEFAULT_INGREDIENTS_GROUP_NAME = "Ingredients"


def unique_list(items: Iterable[str]) -> tuple[str, ...]:
    """Return the items as an insertion-ordered tuple without duplicates."""
    return tuple(dict.fromkeys(items))


@dataclass(frozen=True)
class FlatIngredients:
    """Ingredients as one ordered set of unique strings."""

    items: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", unique_list(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)


@dataclass(frozen=True)
class GroupedIngredients:
    """Ingredients partitioned by named subsection, in document order."""

    groups: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "groups",
            {name: unique_list(items) for name, items in self.groups.items()},
        )

    def __len__(self) -> int:
        return sum(len(items) for items in self.groups.values())

    def __bool__(self) -> bool:
        return bool(self.groups)

    def all_items(self) -> tuple[str, ...]:
        """Every ingredient across groups, in group order."""
        return unique_list(item for items in self.groups.values() for item in items)


Ingredients = Union[FlatIngredients, GroupedIngredients]


def ingredients_to_object(value: Ingredients) -> list[str] | dict[str, list[str]]:
    """
    Convert an ingredients value to its serialized shape.

    Flat ingredients become a plain list, grouped ingredients a dict
    mapping group name to list.
    """
    if isinstance(value, FlatIngredients):
        return list(value.items)
    if isinstance(value, GroupedIngredients):
        return {name: list(items) for name, items in value.groups.items()}
    raise TypeError(f"Invalid ingredients type: {type(value).__name__}")


class LinkRecord(BaseModel):
    """An outbound link found on the page."""

    href: str
    text: str = ""


class RecipeObject(BaseModel):
    """
    The externally visible recipe record.

    Every set-like field is a plain list and every mapping a plain dict.
    Dump with ``model_dump(by_alias=True)`` to get camelCase keys.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    author: str
    canonical_url: str
    category: list[str] = Field(default_factory=list)
    cook_time: int | None = None
    cooking_method: str | None = None
    cuisine: list[str] = Field(default_factory=list)
    description: str
    dietary_restrictions: list[str] = Field(default_factory=list)
    equipment: list[str] = Field(default_factory=list)
    host: str
    image: str
    ingredients: list[str] | dict[str, list[str]]
    instructions: list[str]
    keywords: list[str] = Field(default_factory=list)
    language: str
    links: list[LinkRecord] = Field(default_factory=list)
    nutrients: dict[str, str] = Field(default_factory=dict)
    prep_time: int | None = None
    ratings: float = 0
    ratings_count: int = 0
    reviews: dict[str, str] = Field(default_factory=dict)
    site_name: str | None = None
    title: str
    total_time: int | None = None
    yields: str


@dataclass
class RecipeData:
    """The assembled recipe record with set and mapping typed fields."""

    author: str
    canonical_url: str
    category: tuple[str, ...]
    cook_time: int | None
    cooking_method: str | None
    cuisine: tuple[str, ...]
    description: str
    dietary_restrictions: tuple[str, ...]
    equipment: tuple[str, ...]
    host: str
    image: str
    ingredients: Ingredients
    instructions: tuple[str, ...]
    keywords: tuple[str, ...]
    language: str
    links: list[LinkRecord]
    nutrients: dict[str, str]
    prep_time: int | None
    ratings: float
    ratings_count: int
    reviews: dict[str, str]
    site_name: str | None
    title: str
    total_time: int | None
    yields: str

    def to_model(self) -> RecipeObject:
        """Build the serialized record model."""
        return RecipeObject(
            author=self.author,
            canonical_url=self.canonical_url,
            category=list(self.category),
            cook_time=self.cook_time,
            cooking_method=self.cooking_method,
            cuisine=list(self.cuisine),
            description=self.description,
            dietary_restrictions=list(self.dietary_restrictions),
            equipment=list(self.equipment),
            host=self.host,
            image=self.image,
            ingredients=ingredients_to_object(self.ingredients),
            instructions=list(self.instructions),
            keywords=list(self.keywords),
            language=self.language,
            links=list(self.links),
            nutrients=dict(self.nutrients),
            prep_time=self.prep_time,
            ratings=self.ratings,
            ratings_count=self.ratings_count,
            reviews=dict(self.reviews),
            site_name=self.site_name,
            title=self.title,
            total_time=self.total_time,
            yields=self.yields,
        )

    def to_object(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict with camelCase keys."""
        return self.to_model().model_dump(by_alias=True)
