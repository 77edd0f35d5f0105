"""Per-scraper logging with a run-level verbosity threshold."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from recipe_extractor.core.enums import VERBOSE, LogLevel


class ScraperLogger(logging.LoggerAdapter):
    """
    Logger adapter that prefixes records with a context name and drops
    anything below the run's configured level.

    Errors are never filtered by the run level.
    """

    def __init__(self, logger: logging.Logger, context: str, log_level: LogLevel = LogLevel.WARN) -> None:
        super().__init__(logger, {"context": context})
        self.context = context
        self.log_level = log_level

    def isEnabledFor(self, level: int) -> bool:  # noqa: N802
        if level < logging.ERROR and level < self.log_level.level:
            return False
        return self.logger.isEnabledFor(level)

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        return f"[{self.context}] {msg}", kwargs

    def verbose(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self.log(VERBOSE, msg, *args, **kwargs)

    def child(self, name: str) -> ScraperLogger:
        """Create a logger for a nested context (e.g. a plugin)."""
        return ScraperLogger(self.logger, f"{self.context}.{name}", self.log_level)
