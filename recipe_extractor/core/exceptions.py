"""Exception hierarchy for recipe extraction."""

from __future__ import annotations

from typing import Any

MISSING: Any = object()


class RecipeExtractorError(Exception):
    """Base class for all recipe extractor errors."""


class ExtractorNotFoundError(RecipeExtractorError):
    """No plugin, site override or default produced a value for a field."""

    def __init__(self, field: str) -> None:
        self.field = str(field)
        super().__init__(f"No extractor found for field: {self.field}")


class NotImplementedFeatureError(RecipeExtractorError):
    """An abstract contract point was invoked without being overridden."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Method should be implemented: {method}")


class UnsupportedFieldError(RecipeExtractorError):
    """A plugin was asked for a field outside its declared capability."""

    def __init__(self, field: str) -> None:
        self.field = str(field)
        super().__init__(f"Extraction not supported for field: {self.field}")


class ExtractionFailedError(RecipeExtractorError):
    """
    A source found no value, or an invalid value, for a field it supports.

    The offending raw value is kept on ``value`` for diagnostics.
    """

    def __init__(self, field: str, value: Any = MISSING) -> None:
        self.field = str(field)
        self.value = value
        if value is MISSING:
            message = f'No value found for "{self.field}"'
        else:
            message = f'Invalid value for "{self.field}": {_describe(value)}'
        super().__init__(message)


class IngredientGroupingError(ExtractionFailedError):
    """The DOM ingredient items disagree with the extracted ingredient list."""

    def __init__(self, found: int, expected: int) -> None:
        self.found = found
        self.expected = expected
        RecipeExtractorError.__init__(
            self,
            f"Found {found} grouped ingredients but was expecting to find {expected}.",
        )
        self.field = "ingredients"
        self.value = MISSING


class UnsupportedSiteError(RecipeExtractorError):
    """No site override is registered for a host."""

    def __init__(self, host: str) -> None:
        self.host = host
        super().__init__(
            f"The website '{host}' is not currently supported. "
            "If you want to help add support, please open an issue!"
        )


def _describe(value: Any) -> str:
    if value is None:
        return "null"
    return str(value)
