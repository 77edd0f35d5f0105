"""Tests for ingredient grouping."""

import pytest
from bs4 import BeautifulSoup

from recipe_extractor.core.exceptions import IngredientGroupingError
from recipe_extractor.core.schema import FlatIngredients, GroupedIngredients
from recipe_extractor.extraction.grouping import (
    best_match,
    find_selectors,
    group_ingredients,
    score_sentence_similarity,
)

WPRM_HTML = """
<div class="wprm-recipe-ingredients-container">
  <div class="wprm-recipe-ingredient-group">
    <h4 class="wprm-recipe-group-name">For the dough</h4>
    <ul class="wprm-recipe-ingredients">
      <li class="wprm-recipe-ingredient">2 cups  flour</li>
      <li class="wprm-recipe-ingredient">1 tsp salt</li>
    </ul>
  </div>
  <div class="wprm-recipe-ingredient-group">
    <h4 class="wprm-recipe-group-name">For the sauce</h4>
    <ul class="wprm-recipe-ingredients">
      <li class="wprm-recipe-ingredient">1 can tomatoes</li>
    </ul>
  </div>
</div>
"""

CUSTOM_HTML = """
<section class="ingredients">
  <p class="item">1 egg</p>
  <h3 class="heading">Topping</h3>
  <p class="item">2 tbsp sugar</p>
  <h3 class="heading">  </h3>
  <p class="item">pinch of salt</p>
</section>
"""


@pytest.fixture
def wprm_soup() -> BeautifulSoup:
    return BeautifulSoup(WPRM_HTML, "lxml")


class TestSimilarity:
    """Tests for bigram similarity scoring."""

    def test_identical(self) -> None:
        """Test identical strings score 1."""
        assert score_sentence_similarity("flour", "flour") == 1.0

    def test_short_strings(self) -> None:
        """Test strings shorter than two characters score 0."""
        assert score_sentence_similarity("a", "a") == 0.0
        assert score_sentence_similarity("a", "flour") == 0.0
        assert score_sentence_similarity("flour", "") == 0.0

    def test_symmetric(self) -> None:
        """Test similarity does not depend on argument order."""
        first = score_sentence_similarity("night", "nacht")
        second = score_sentence_similarity("nacht", "night")
        assert first == second
        assert 0.0 < first < 1.0

    def test_best_match(self) -> None:
        """Test the most similar candidate is chosen."""
        candidates = ["2 cups flour", "1 tsp salt", "1 can tomatoes"]
        assert best_match("1 teaspoon salt", candidates) == "1 tsp salt"

    def test_best_match_tie_first_wins(self) -> None:
        """Test ties go to the first candidate."""
        assert best_match("zz", ["ab", "cd"]) == "ab"

    def test_best_match_empty(self) -> None:
        """Test an empty candidate list raises ValueError."""
        with pytest.raises(ValueError):
            best_match("salt", [])


class TestFindSelectors:
    """Tests for selector resolution."""

    def test_default_selectors(self, wprm_soup: BeautifulSoup) -> None:
        """Test the built-in selector conventions are detected."""
        assert find_selectors(wprm_soup) == (
            ".wprm-recipe-ingredient-group h4",
            ".wprm-recipe-ingredient",
        )

    def test_custom_selectors_must_match(self, wprm_soup: BeautifulSoup) -> None:
        """Test caller selectors that do not match give no selectors."""
        assert find_selectors(wprm_soup, "h3.missing", "li.missing") is None

    def test_no_selectors(self) -> None:
        """Test a document without known markup."""
        soup = BeautifulSoup("<ul><li>1 egg</li></ul>", "lxml")
        assert find_selectors(soup) is None


class TestGroupIngredients:
    """Tests for group_ingredients."""

    def test_groups_by_heading(self, wprm_soup: BeautifulSoup) -> None:
        """Test ingredients are partitioned under their headings."""
        ingredients = FlatIngredients(("2 cups flour", "1 tsp salt", "1 can tomatoes"))

        result = group_ingredients(wprm_soup, ingredients)

        assert isinstance(result, GroupedIngredients)
        assert result.groups == {
            "For the dough": ("2 cups flour", "1 tsp salt"),
            "For the sauce": ("1 can tomatoes",),
        }

    def test_partition_matches_input(self, wprm_soup: BeautifulSoup) -> None:
        """Test the groups cover the input exactly once."""
        ingredients = FlatIngredients(("2 cups flour", "1 tsp salt", "1 can tomatoes"))

        result = group_ingredients(wprm_soup, ingredients)

        items = [item for group in result.groups.values() for item in group]
        assert sorted(items) == sorted(ingredients.items)
        assert len(result) == len(ingredients)

    def test_keeps_extracted_text(self, wprm_soup: BeautifulSoup) -> None:
        """Test the extracted strings, not the DOM text, are grouped."""
        ingredients = ["2 cups of flour", "1 teaspoon salt", "1 can of tomatoes"]

        result = group_ingredients(wprm_soup, ingredients)

        assert result.groups["For the dough"] == ("2 cups of flour", "1 teaspoon salt")

    def test_count_mismatch(self, wprm_soup: BeautifulSoup) -> None:
        """Test a cardinality mismatch raises with both counts."""
        with pytest.raises(IngredientGroupingError) as exc_info:
            group_ingredients(wprm_soup, ["2 cups flour", "1 tsp salt"])

        assert exc_info.value.found == 3
        assert exc_info.value.expected == 2
        assert "Found 3" in str(exc_info.value)

    def test_no_selectors_returns_input(self) -> None:
        """Test ingredients are returned ungrouped without usable selectors."""
        soup = BeautifulSoup("<ul><li>1 egg</li></ul>", "lxml")
        ingredients = FlatIngredients(("1 egg",))

        assert group_ingredients(soup, ingredients) is ingredients

    def test_default_group_names(self) -> None:
        """Test items before any heading and under a blank heading use the default group."""
        soup = BeautifulSoup(CUSTOM_HTML, "lxml")
        ingredients = ["1 egg", "2 tbsp sugar", "pinch of salt"]

        result = group_ingredients(soup, ingredients, "h3.heading", "p.item")

        assert result.groups == {
            "Ingredients": ("1 egg", "pinch of salt"),
            "Topping": ("2 tbsp sugar",),
        }
