"""Enums for recipe fields and logging levels."""

import logging
from enum import Enum

VERBOSE = 5
logging.addLevelName(VERBOSE, "VERBOSE")


class RecipeField(str, Enum):
    """A named slot in the canonical recipe record."""

    AUTHOR = "author"
    CANONICAL_URL = "canonicalUrl"
    CATEGORY = "category"
    COOK_TIME = "cookTime"
    COOKING_METHOD = "cookingMethod"
    CUISINE = "cuisine"
    DESCRIPTION = "description"
    DIETARY_RESTRICTIONS = "dietaryRestrictions"
    EQUIPMENT = "equipment"
    HOST = "host"
    IMAGE = "image"
    INGREDIENTS = "ingredients"
    INSTRUCTIONS = "instructions"
    KEYWORDS = "keywords"
    LANGUAGE = "language"
    LINKS = "links"
    NUTRIENTS = "nutrients"
    PREP_TIME = "prepTime"
    RATINGS = "ratings"
    RATINGS_COUNT = "ratingsCount"
    REVIEWS = "reviews"
    SITE_NAME = "siteName"
    TITLE = "title"
    TOTAL_TIME = "totalTime"
    YIELDS = "yields"

    def __str__(self) -> str:
        return self.value


class LogLevel(str, Enum):
    """Verbosity of a scraper run."""

    VERBOSE = "VERBOSE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    @property
    def level(self) -> int:
        """The matching standard library logging level."""
        return {
            LogLevel.VERBOSE: VERBOSE,
            LogLevel.DEBUG: logging.DEBUG,
            LogLevel.INFO: logging.INFO,
            LogLevel.WARN: logging.WARNING,
            LogLevel.ERROR: logging.ERROR,
        }[self]

    @classmethod
    def parse(cls, value: "LogLevel | str") -> "LogLevel":
        """Parse a level name case-insensitively ("warning" is accepted for WARN)."""
        if isinstance(value, LogLevel):
            return value
        name = str(value).strip().upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls(name)
        except ValueError:
            valid = ", ".join(level.value for level in cls)
            raise ValueError(f"Unknown log level: {value!r} (expected one of {valid})") from None
