"""
Scraper Options Module
======================

Per-run configuration for a scraper: extra plugins, link collection and
log verbosity. Options can be built in code or loaded from a YAML file.
"""

from __future__ import annotations

import importlib
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Union

import yaml
from bs4 import BeautifulSoup

from recipe_extractor.core.enums import LogLevel
from recipe_extractor.plugins.base import ExtractorPlugin, PostProcessorPlugin

# A plugin instance, or a class/factory building one (extractors receive the soup)
ExtractorEntry = Union[ExtractorPlugin, Callable[[BeautifulSoup], ExtractorPlugin]]
PostProcessorEntry = Union[PostProcessorPlugin, Callable[[], PostProcessorPlugin]]

CONFIG_ENV_VAR = "RECIPE_EXTRACTOR_CONFIG"


def import_object(path: str) -> Any:
    """
    Import an object from a "package.module:Name" path.

    Raises:
        ValueError: If the path is not in "module:Name" form
        ImportError: If the module cannot be imported
        AttributeError: If the module has no such attribute
    """
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Invalid import path (expected 'module:Name'): {path}")
    module = importlib.import_module(module_name)
    return getattr(module, attr)


@dataclass
class ScraperOptions:
    """Configuration bag for one scraper run."""

    extra_extractors: list[ExtractorEntry] = field(default_factory=list)
    extra_post_processors: list[PostProcessorEntry] = field(default_factory=list)
    links_enabled: bool = False
    log_level: LogLevel = LogLevel.WARN

    def __post_init__(self) -> None:
        self.log_level = LogLevel.parse(self.log_level)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> ScraperOptions:
        """Create from dictionary, using defaults for missing values."""
        if data is None:
            return cls()
        return cls(
            extra_extractors=[_resolve_entry(item) for item in data.get("extra_extractors") or []],
            extra_post_processors=[_resolve_entry(item) for item in data.get("extra_post_processors") or []],
            links_enabled=bool(data.get("links_enabled", False)),
            log_level=LogLevel.parse(data.get("log_level", LogLevel.WARN)),
        )

    def build_extractors(self, soup: BeautifulSoup) -> list[ExtractorPlugin]:
        """Instantiate the extra extractor plugins for a document."""
        return [item if isinstance(item, ExtractorPlugin) else item(soup) for item in self.extra_extractors]

    def build_post_processors(self) -> list[PostProcessorPlugin]:
        """Instantiate the extra post-processor plugins."""
        return [item if isinstance(item, PostProcessorPlugin) else item() for item in self.extra_post_processors]


def _resolve_entry(item: Any) -> Any:
    if isinstance(item, str):
        return import_object(item)
    return item


def load_options(config_path: Path | str) -> ScraperOptions:
    """
    Load scraper options from a YAML file.

    Args:
        config_path: Path to the YAML file

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a mapping or holds an unknown log level
    """
    config_path = Path(config_path).expanduser().resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        data = yaml.safe_load(f)

    if data is None:
        return ScraperOptions()
    if not isinstance(data, dict):
        raise ValueError(f"Options file must contain a mapping: {config_path}")
    return ScraperOptions.from_dict(data)


# Global options instance
_default_options: ScraperOptions | None = None


def get_default_options() -> ScraperOptions:
    """
    Get the default scraper options.

    Loaded from the file named by the RECIPE_EXTRACTOR_CONFIG environment
    variable when set, otherwise built-in defaults.
    """
    global _default_options

    if _default_options is None:
        config_path = os.environ.get(CONFIG_ENV_VAR)
        _default_options = load_options(config_path) if config_path else ScraperOptions()

    return _default_options


def reset_default_options() -> None:
    """Reset the default options (useful for testing)."""
    global _default_options
    _default_options = None
