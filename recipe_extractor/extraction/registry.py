"""
Plugin Registry Module
======================

Composes the base plugin set with caller-supplied plugins into
priority-ordered extractor and post-processor chains.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar

from recipe_extractor.plugins.base import ExtractorPlugin, PostProcessorPlugin


class _Prioritized(Protocol):
    name: str
    priority: int


P = TypeVar("P", bound=_Prioritized)


def sort_by_priority(plugins: Iterable[P]) -> list[P]:
    """
    Sort plugins by descending priority.

    The sort is stable, so plugins with equal priority keep their
    relative input order.
    """
    return sorted(plugins, key=lambda plugin: plugin.priority, reverse=True)


def compose_plugins(
    base_extractors: Sequence[ExtractorPlugin],
    base_post_processors: Sequence[PostProcessorPlugin],
    extra_extractors: Sequence[ExtractorPlugin] = (),
    extra_post_processors: Sequence[PostProcessorPlugin] = (),
) -> tuple[list[ExtractorPlugin], list[PostProcessorPlugin]]:
    """
    Build the extractor and post-processor chains.

    Each chain is the base list followed by the extra list, sorted by
    descending priority.
    """
    extractors = sort_by_priority([*base_extractors, *extra_extractors])
    post_processors = sort_by_priority([*base_post_processors, *extra_post_processors])
    return extractors, post_processors


class PluginManager:
    """Owns the plugin chains for one scraper instance."""

    def __init__(
        self,
        base_extractors: Sequence[ExtractorPlugin],
        base_post_processors: Sequence[PostProcessorPlugin],
        extra_extractors: Sequence[ExtractorPlugin] | None = None,
        extra_post_processors: Sequence[PostProcessorPlugin] | None = None,
    ) -> None:
        self._extractors, self._post_processors = compose_plugins(
            base_extractors,
            base_post_processors,
            extra_extractors or (),
            extra_post_processors or (),
        )

    def get_extractors(self) -> list[ExtractorPlugin]:
        """Extractor chain, highest priority first."""
        return list(self._extractors)

    def get_post_processors(self) -> list[PostProcessorPlugin]:
        """Post-processor chain, highest priority first."""
        return list(self._post_processors)

    def list_plugins(self) -> list[dict[str, str]]:
        """Describe every plugin in chain order."""
        return [
            {"kind": "extractor", "name": plugin.name, "priority": str(plugin.priority)}
            for plugin in self._extractors
        ] + [
            {"kind": "post_processor", "name": plugin.name, "priority": str(plugin.priority)}
            for plugin in self._post_processors
        ]
