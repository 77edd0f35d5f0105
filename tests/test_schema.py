"""Tests for recipe record types, defaults and errors."""

import pytest

from recipe_extractor.core.constants import (
    OPTIONAL_RECIPE_FIELD_DEFAULT_VALUES,
    REQUIRED_RECIPE_FIELDS,
    default_value,
    is_optional_field,
)
from recipe_extractor.core.enums import LogLevel, RecipeField
from recipe_extractor.core.exceptions import (
    ExtractionFailedError,
    IngredientGroupingError,
    NotImplementedFeatureError,
    UnsupportedFieldError,
)
from recipe_extractor.core.schema import (
    FlatIngredients,
    GroupedIngredients,
    LinkRecord,
    RecipeData,
    ingredients_to_object,
)


def make_record(**overrides) -> RecipeData:
    data = dict(
        author="Jane",
        canonical_url="https://example.com/soup",
        category=("Soup",),
        cook_time=30,
        cooking_method=None,
        cuisine=(),
        description="Warm.",
        dietary_restrictions=(),
        equipment=(),
        host="example.com",
        image="https://example.com/soup.jpg",
        ingredients=FlatIngredients(("1 can tomatoes", "salt")),
        instructions=("Simmer.", "Serve."),
        keywords=("soup",),
        language="en",
        links=[LinkRecord(href="https://example.com", text="Home")],
        nutrients={"calories": "120"},
        prep_time=None,
        ratings=4.5,
        ratings_count=10,
        reviews={},
        site_name="Example",
        title="Soup",
        total_time=40,
        yields="4 servings",
    )
    data.update(overrides)
    return RecipeData(**data)


class TestIngredients:
    """Tests for the ingredient variants."""

    def test_flat_deduplicates(self) -> None:
        """Test flat ingredients are an ordered set."""
        ingredients = FlatIngredients(("salt", "egg", "salt"))
        assert ingredients.items == ("salt", "egg")
        assert len(ingredients) == 2
        assert list(ingredients) == ["salt", "egg"]

    def test_grouped_len(self) -> None:
        """Test grouped length counts every item."""
        grouped = GroupedIngredients({"A": ("1", "2"), "B": ("3",)})
        assert len(grouped) == 3
        assert grouped.all_items() == ("1", "2", "3")

    def test_to_object(self) -> None:
        """Test each variant serializes to its own shape."""
        assert ingredients_to_object(FlatIngredients(("a", "b"))) == ["a", "b"]
        assert ingredients_to_object(GroupedIngredients({"X": ("a",), "Y": ("b",)})) == {
            "X": ["a"],
            "Y": ["b"],
        }

    def test_to_object_rejects_other_types(self) -> None:
        """Test unknown values are rejected."""
        with pytest.raises(TypeError):
            ingredients_to_object(["a"])


class TestRecipeData:
    """Tests for record serialization."""

    def test_to_object_flat(self) -> None:
        """Test the serialized record uses camelCase keys and plain containers."""
        obj = make_record().to_object()

        assert obj["canonicalUrl"] == "https://example.com/soup"
        assert obj["ingredients"] == ["1 can tomatoes", "salt"]
        assert obj["instructions"] == ["Simmer.", "Serve."]
        assert obj["category"] == ["Soup"]
        assert obj["ratingsCount"] == 10
        assert obj["siteName"] == "Example"
        assert obj["prepTime"] is None
        assert obj["links"] == [{"href": "https://example.com", "text": "Home"}]
        assert obj["nutrients"] == {"calories": "120"}
        assert len(obj) == len(RecipeField)

    def test_to_object_grouped(self) -> None:
        """Test grouped ingredients serialize as an ordered mapping."""
        grouped = GroupedIngredients({"Dough": ("flour",), "Sauce": ("tomatoes",)})
        obj = make_record(ingredients=grouped).to_object()

        assert obj["ingredients"] == {"Dough": ["flour"], "Sauce": ["tomatoes"]}
        assert list(obj["ingredients"]) == ["Dough", "Sauce"]


class TestDefaults:
    """Tests for optional field defaults."""

    def test_optional_and_required(self) -> None:
        """Test the optional/required split."""
        assert is_optional_field(RecipeField.KEYWORDS)
        assert not is_optional_field(RecipeField.TITLE)
        assert RecipeField.TITLE in REQUIRED_RECIPE_FIELDS
        assert RecipeField.CANONICAL_URL in REQUIRED_RECIPE_FIELDS
        assert not set(REQUIRED_RECIPE_FIELDS) & set(OPTIONAL_RECIPE_FIELD_DEFAULT_VALUES)

    def test_mapping_defaults_are_fresh(self) -> None:
        """Test mapping defaults are new dicts on every call."""
        first = default_value(RecipeField.NUTRIENTS)
        first["x"] = "y"
        assert default_value(RecipeField.NUTRIENTS) == {}

    def test_required_has_no_default(self) -> None:
        """Test required fields have no default."""
        with pytest.raises(KeyError):
            default_value(RecipeField.TITLE)


class TestErrors:
    """Tests for error messages."""

    def test_extraction_failed_messages(self) -> None:
        """Test missing and invalid value messages."""
        assert str(ExtractionFailedError("title")) == 'No value found for "title"'
        assert str(ExtractionFailedError("image", "/a.jpg")) == 'Invalid value for "image": /a.jpg'
        assert str(ExtractionFailedError("nutrients", None)) == 'Invalid value for "nutrients": null'

    def test_other_messages(self) -> None:
        """Test programmer error messages."""
        assert str(UnsupportedFieldError(RecipeField.TITLE)) == "Extraction not supported for field: title"
        assert str(NotImplementedFeatureError("host")) == "Method should be implemented: host"

    def test_grouping_error(self) -> None:
        """Test the grouping error names both counts."""
        error = IngredientGroupingError(found=3, expected=2)
        assert isinstance(error, ExtractionFailedError)
        assert str(error) == "Found 3 grouped ingredients but was expecting to find 2."


class TestLogLevel:
    """Tests for LogLevel parsing."""

    def test_parse(self) -> None:
        """Test level names parse case-insensitively."""
        assert LogLevel.parse("debug") is LogLevel.DEBUG
        assert LogLevel.parse("WARNING") is LogLevel.WARN
        assert LogLevel.parse(LogLevel.ERROR) is LogLevel.ERROR
        assert LogLevel.VERBOSE.level == 5

    def test_parse_invalid(self) -> None:
        """Test unknown levels raise ValueError."""
        with pytest.raises(ValueError):
            LogLevel.parse("loud")
