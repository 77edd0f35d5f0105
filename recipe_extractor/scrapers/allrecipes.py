"""allrecipes.com: structured data is complete, no overrides needed."""

from recipe_extractor.scrapers.base import SiteOverride

ALLRECIPES = SiteOverride(host="allrecipes.com", name="AllRecipes")
